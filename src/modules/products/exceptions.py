"""Product domain exceptions.

Raised while building the product store.  Search failures are not
exceptions: repositories report them as ``Err`` results and the view
translates them into HTTP responses.
"""

from __future__ import annotations


class InvalidProductStore(ValueError):
    """A store key does not match the ``id`` of the product it maps to."""


class ProductSeedError(Exception):
    """The product seed file is unreadable, malformed or inconsistent."""

"""Result primitives for operations that report failure as a value.

A ``Result`` is either ``Ok`` (carrying the produced value) or ``Err``
(carrying the underlying cause).  Callers branch on the concrete type
instead of wrapping the call in ``try``/``except``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome (immutable)."""

    value: T

    @property
    def is_ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    """Failed outcome (immutable).

    ``partial`` holds whatever the operation produced before failing.
    Consumers must not treat it as a valid result.
    """

    cause: Exception
    partial: Optional[Any] = None

    @property
    def is_ok(self) -> bool:
        return False


Result = Union[Ok[T], Err]

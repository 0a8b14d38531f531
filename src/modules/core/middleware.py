"""Request-scoped logging context.

Every request gets a request ID (taken from ``X-Request-ID`` or freshly
generated) that is bound, together with the method and path, into
structlog's context variables.  Log lines emitted by views while the
request is served therefore carry ``correlation_id`` without passing it
around explicitly.
"""

import time
import uuid
from typing import Callable

import structlog
from django.http import HttpRequest, HttpResponse

REQUEST_ID_HEADER = "X-Request-ID"

logger = structlog.get_logger(__name__)


def resolve_request_id(request: HttpRequest) -> str:
    """Return the caller's request ID, or a new UUID4 when none was sent."""
    return request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())


class CorrelationIdMiddleware:
    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        request_id = resolve_request_id(request)
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            correlation_id=request_id,
            method=request.method,
            path=request.path,
        )

        started = time.monotonic()
        response = self.get_response(request)
        elapsed_ms = round((time.monotonic() - started) * 1000, 2)

        logger.info(
            "request_served",
            status_code=response.status_code,
            duration_ms=elapsed_ms,
        )
        response[REQUEST_ID_HEADER] = request_id
        return response

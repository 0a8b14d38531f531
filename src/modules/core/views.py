import time
from typing import Any, Dict

import structlog
from django.apps import apps
from django.http import HttpRequest, JsonResponse
from django.utils import timezone

from modules.products.dtos import ProductQuery
from shared.domain.result import Err

logger = structlog.get_logger(__name__)


def health_check(request: HttpRequest) -> JsonResponse:
    services: Dict[str, Dict[str, Any]] = {}
    overall_healthy = True

    # Check the product store answers an unfiltered search
    try:
        start = time.monotonic()
        repository = apps.get_app_config("products").repository
        result = repository.search_products(ProductQuery())
        if isinstance(result, Err):
            raise result.cause
        services["products"] = {
            "status": "up",
            "count": len(result.value),
            "response_time_ms": round((time.monotonic() - start) * 1000, 2),
        }
    except Exception:
        services["products"] = {"status": "down"}
        overall_healthy = False
        logger.exception("health_check_products_failure")

    status_code = 200 if overall_healthy else 503

    logger.info(
        "health_check_completed", status="healthy" if overall_healthy else "unhealthy"
    )

    return JsonResponse(
        {
            "status": "healthy" if overall_healthy else "unhealthy",
            "timestamp": timezone.now().isoformat(),
            "services": services,
        },
        status=status_code,
    )

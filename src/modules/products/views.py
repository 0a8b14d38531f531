"""Product API views.

Exposes ``IProductRepository.search_products`` via HTTP.  The view is
the only place where failures become status codes: an invalid ``id``
is a 400, any repository failure is a 500, and an empty match is a
plain 200.
"""

from __future__ import annotations

from http import HTTPStatus
from typing import Optional

import structlog
from django.apps import apps
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from modules.products.dtos import ProductQuery
from modules.products.repositories import IProductRepository
from modules.products.serializers import serialize_products
from shared.domain.result import Err

logger = structlog.get_logger(__name__)


def _error_response(message: str, code: int) -> Response:
    return Response(
        {"message": message, "status": HTTPStatus(code).phrase},
        status=code,
    )


class ProductsDefaultView(APIView):
    """Product listing endpoint.

    The repository is injected with ``ProductsDefaultView.as_view(repository=...)``.
    Without injection the repository built by ``ProductsConfig.ready()`` is used.
    """

    authentication_classes: list = []
    permission_classes = [AllowAny]

    repository: Optional[IProductRepository] = None

    def get_repository(self) -> IProductRepository:
        if self.repository is not None:
            return self.repository
        return apps.get_app_config("products").repository

    @extend_schema(
        parameters=[
            OpenApiParameter(
                "id",
                OpenApiTypes.INT,
                OpenApiParameter.QUERY,
                required=False,
                description="Return only the product with this id.",
            )
        ],
        responses={
            200: OpenApiTypes.OBJECT,
            400: OpenApiTypes.OBJECT,
            500: OpenApiTypes.OBJECT,
        },
    )
    def get(self, request: Request) -> Response:
        """GET /products?id={id}"""
        raw_id = request.query_params.get("id")
        try:
            query = ProductQuery.from_raw_id(raw_id)
        except ValueError:
            logger.warning("products.invalid_id", raw_id=raw_id)
            return _error_response("invalid id", status.HTTP_400_BAD_REQUEST)

        log = logger.bind(product_id=query.id)

        try:
            result = self.get_repository().search_products(query)
        except Exception:
            log.exception("products.search_failed")
            return _error_response("internal error", status.HTTP_500_INTERNAL_SERVER_ERROR)

        if isinstance(result, Err):
            log.error("products.search_failed", error=str(result.cause))
            return _error_response("internal error", status.HTTP_500_INTERNAL_SERVER_ERROR)

        log.info("products.searched", count=len(result.value))
        return Response(
            {"message": "success", "data": serialize_products(result.value)},
            status=status.HTTP_200_OK,
        )

"""Product API views.

Exposes the ``ProductService`` via HTTP using a DRF ViewSet.
Views only decode requests into DTOs and encode results; every
exception propagates to ``modules.core.exception_handler``, which
owns the mapping to HTTP status codes.
"""

from __future__ import annotations

from typing import Any, Dict

from django.conf import settings
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import serializers, status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.products.dtos import (
    CreateProductDTO,
    ProductListQueryDTO,
    UpdateProductDTO,
)
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import (
    ProductInputSerializer,
    ProductPageSerializer,
    ProductSerializer,
)
from modules.products.services import ProductService


def _body(request: Request) -> Dict[str, Any]:
    return request.data if isinstance(request.data, dict) else {}


class ProductViewSet(ViewSet):
    """ViewSet for Product CRUD and category listing.

    Uses ``ProductService`` with ``ProductDjangoRepository`` (DIP).
    There is no ``partial_update``: updates always replace both fields.
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(
            repository=ProductDjangoRepository(),
            max_page_size=settings.MAX_PAGE_SIZE,
        )

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    @extend_schema(
        parameters=[
            OpenApiParameter("category", OpenApiTypes.STR, required=True),
            OpenApiParameter("page", OpenApiTypes.INT, description="Zero-based."),
            OpenApiParameter(
                "size", OpenApiTypes.INT, description="1 to MAX_PAGE_SIZE."
            ),
        ],
        responses=ProductPageSerializer,
    )
    def list(self, request: Request) -> Response:
        """GET /api/v1/products/?category=&page=&size="""
        params = request.query_params
        query = ProductListQueryDTO.model_validate(
            {
                "category": params.get("category"),
                "page": params.get("page", 0),
                "size": params.get("size", settings.DEFAULT_PAGE_SIZE),
            }
        )
        page = self._service.list_by_category(query)
        return Response(ProductPageSerializer(page).data)

    @extend_schema(responses=ProductSerializer)
    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/products/{pk}/"""
        product = self._service.get_product(pk)
        return Response(ProductSerializer(product).data)

    @extend_schema(responses=serializers.ListSerializer(child=serializers.CharField()))
    @action(detail=False, methods=["get"], url_path="categories")
    def categories(self, request: Request) -> Response:
        """GET /api/v1/products/categories/"""
        return Response(self._service.list_categories())

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    @extend_schema(request=ProductInputSerializer, responses={201: ProductSerializer})
    def create(self, request: Request) -> Response:
        """POST /api/v1/products/"""
        dto = CreateProductDTO.model_validate(_body(request))
        product = self._service.create_product(dto)
        return Response(ProductSerializer(product).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=ProductInputSerializer, responses=ProductSerializer)
    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/v1/products/{pk}/"""
        dto = UpdateProductDTO.model_validate({**_body(request), "id": pk})
        product = self._service.update_product(dto)
        return Response(ProductSerializer(product).data)

    @extend_schema(responses={204: None})
    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/products/{pk}/"""
        self._service.delete_product(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)

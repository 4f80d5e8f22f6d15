"""Product API views.

Exposes ``ProductService`` via HTTP using DRF ViewSets.

- ``ProductViewSet`` (v1): unpaged listing, retrieve, create, stock
  update and delete.
- ``ProductPageViewSet`` (v2): paginated listing.

Views validate input, call the service and pick the status code.  They
never catch domain exceptions: errors propagate to the global exception
handler, which renders the error envelope.
"""

from __future__ import annotations

from typing import ClassVar, Optional

from rest_framework import status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.reverse import reverse
from rest_framework.viewsets import ViewSet

from modules.core.exceptions import RequestValidationFailed
from modules.core.pagination import PaginationParameters
from modules.core.validation import Validator, parse_request
from modules.products.dtos import CreateProductRequest, UpdateStockRequest
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.services import ProductService
from modules.products.validators import (
    CreateProductRequestValidator,
    UpdateStockRequestValidator,
)


class _ProductServiceMixin:
    """Builds the default ``ProductService`` unless one was injected.

    ``as_view(service=...)`` replaces it, which is how tests swap in a
    service over a fake repository.
    """

    service: Optional[ProductService] = None

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        if self.service is None:
            self.service = ProductService(repository=ProductDjangoRepository())


class ProductViewSet(_ProductServiceMixin, ViewSet):
    """Version 1 product endpoints."""

    create_validator: ClassVar[Validator[CreateProductRequest]] = CreateProductRequestValidator()
    update_stock_validator: ClassVar[Validator[UpdateStockRequest]] = UpdateStockRequestValidator()

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/v1/products"""
        products = self.service.get_all()
        return Response([p.to_json() for p in products])

    def retrieve(self, request: Request, pk: str) -> Response:
        """GET /api/v1/products/{pk}"""
        return Response(self.service.get_by_id(pk).to_json())

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/v1/products"""
        dto = parse_request(CreateProductRequest, request.data)
        errors = self.create_validator.validate(dto)
        if errors:
            raise RequestValidationFailed(errors)

        product = self.service.create(dto)
        location = reverse("product-v1-detail", kwargs={"pk": str(product.id)}, request=request)
        return Response(
            product.to_json(),
            status=status.HTTP_201_CREATED,
            headers={"Location": location},
        )

    @action(detail=True, methods=["patch"], url_path="stock")
    def update_stock(self, request: Request, pk: str) -> Response:
        """PATCH /api/v1/products/{pk}/stock"""
        dto = parse_request(UpdateStockRequest, request.data)
        errors = self.update_stock_validator.validate(dto)
        if errors:
            raise RequestValidationFailed(errors)

        return Response(self.service.update_stock(pk, dto).to_json())

    def destroy(self, request: Request, pk: str) -> Response:
        """DELETE /api/v1/products/{pk}"""
        self.service.delete(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)


class ProductPageViewSet(_ProductServiceMixin, ViewSet):
    """Version 2 product endpoints: paginated listing."""

    def list(self, request: Request) -> Response:
        """GET /api/v2/products?pageNumber=&pageSize="""
        params = parse_request(PaginationParameters, request.query_params.dict())
        page = self.service.get_paged(params)
        return Response(page.model_dump(mode="json", by_alias=True))

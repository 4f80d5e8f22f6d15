"""Product service layer (Use Cases).

Orchestrates the Product use-cases, delegating persistence to the
injected ``IProductRepository`` and returning response DTOs.

- Identifiers (UUIDv7) and ``created_at`` are assigned on create, and
  prices are rounded to the stored two decimals.
- ``updated_at`` is stamped on every stock change.
- Missing products raise ``ProductNotFound``; malformed page requests
  raise ``InvalidPaginationParameters``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import structlog
import uuid6
from django.db import transaction
from django.utils import timezone

from modules.core.pagination import PaginatedResult, PaginationParameters
from modules.products.dtos import ProductResponse
from modules.products.exceptions import InvalidPaginationParameters, ProductNotFound
from modules.products.models import Product, round_price

if TYPE_CHECKING:
    from modules.products.dtos import CreateProductRequest, UpdateStockRequest
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_all(self) -> List[ProductResponse]:
        """Return every product, unfiltered."""
        return [ProductResponse.from_entity(p) for p in self._repo.get_all()]

    def get_paged(self, params: PaginationParameters) -> PaginatedResult[ProductResponse]:
        """Return one page of products ordered by name.

        Raises:
            InvalidPaginationParameters: if the page number or size is out of range.
        """
        if not params.is_valid():
            logger.warning(
                "product.invalid_pagination",
                page_number=params.page_number,
                page_size=params.page_size,
            )
            raise InvalidPaginationParameters()

        items, total_count = self._repo.get_paged(params.page_number, params.page_size)
        return PaginatedResult[ProductResponse](
            items=[ProductResponse.from_entity(p) for p in items],
            total_count=total_count,
            page_number=params.page_number,
            page_size=params.page_size,
        )

    def get_by_id(self, id: str) -> ProductResponse:
        """Retrieve a single product by ID.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        return ProductResponse.from_entity(self._load(id))

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create(self, request: CreateProductRequest) -> ProductResponse:
        """Create a product with a fresh identifier and creation timestamp."""
        product = Product(
            id=uuid6.uuid7(),
            name=request.name,
            image_url=request.image_url,
            price=round_price(request.price),
            description=request.description,
            stock_quantity=request.stock_quantity,
            created_at=timezone.now(),
            updated_at=None,
        )
        product = self._repo.create(product)
        logger.info("product.created", product_id=str(product.id), name=product.name)
        return ProductResponse.from_entity(product)

    @transaction.atomic
    def update_stock(self, id: str, request: UpdateStockRequest) -> ProductResponse:
        """Overwrite the stock quantity of a product.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._load(id)
        product.stock_quantity = request.stock_quantity
        product.touch()

        product = self._repo.update(product)
        logger.info(
            "product.stock_updated",
            product_id=str(product.id),
            stock_quantity=product.stock_quantity,
        )
        return ProductResponse.from_entity(product)

    @transaction.atomic
    def delete(self, id: str) -> None:
        """Delete a product.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        if not self._repo.delete(id):
            raise ProductNotFound(id)
        logger.info("product.deleted", product_id=str(id))

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _load(self, id: str) -> Product:
        product = self._repo.get_by_id(id)
        if product is None:
            raise ProductNotFound(id)
        return product

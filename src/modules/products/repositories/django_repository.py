"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: methods return ``None``
or ``False`` instead of raising for missing or malformed IDs; the
Service Layer decides how to translate a missing entity into an API
response.

No row locking or version column: concurrent updates of the same
product are last-write-wins.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

import structlog
from django.core.exceptions import ValidationError
from django.db import transaction

from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def _by_id(self, id: str):
        return Product.objects.filter(id=id)

    def get_all(self) -> List[Product]:
        """Every product, ordered by name."""
        return list(Product.objects.order_by("name", "id"))

    def get_by_id(self, id: str) -> Optional[Product]:
        """Retrieve a product by primary key.

        Returns ``None`` for non-existent or invalid IDs.
        """
        try:
            return self._by_id(id).first()
        except (ValueError, ValidationError):
            return None

    @transaction.atomic
    def create(self, entity: Product) -> Product:
        entity.save(force_insert=True)
        logger.info("product.inserted", product_id=str(entity.id))
        return entity

    @transaction.atomic
    def update(self, entity: Product) -> Product:
        entity.save(force_update=True)
        logger.info("product.saved", product_id=str(entity.id))
        return entity

    @transaction.atomic
    def delete(self, id: str) -> bool:
        """Delete a product by ID in a single statement.

        Returns ``True`` if a row was removed, ``False`` if no product
        exists with the given ID.
        """
        try:
            deleted, _ = self._by_id(id).delete()
        except (ValueError, ValidationError):
            return False
        if deleted:
            logger.info("product.removed", product_id=str(id))
        return deleted > 0

    def exists(self, id: str) -> bool:
        try:
            return self._by_id(id).exists()
        except (ValueError, ValidationError):
            return False

    def get_paged(self, page_number: int, page_size: int) -> Tuple[List[Product], int]:
        queryset = Product.objects.order_by("name", "id")
        total_count = queryset.count()
        offset = (page_number - 1) * page_size
        items = list(queryset[offset : offset + page_size])
        return items, total_count

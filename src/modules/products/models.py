"""Product model.

Constraints mirrored at the database level:
- ``name`` up to 200 characters, indexed for name-ordered listings.
- ``image_url`` up to 500 characters.
- ``price`` and ``stock_quantity`` are optional and never negative.
- ``description`` up to 2000 characters.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from django.core.validators import MinValueValidator
from django.db import models

from modules.core.models import BaseModel

NAME_MAX_LENGTH = 200
IMAGE_URL_MAX_LENGTH = 500
DESCRIPTION_MAX_LENGTH = 2000
PRICE_MAX_DIGITS = 18
PRICE_DECIMAL_PLACES = 2
PRICE_MAX_VALUE = Decimal(10) ** (PRICE_MAX_DIGITS - PRICE_DECIMAL_PLACES) - Decimal("0.01")
# Largest value of a 32-bit integer column.
STOCK_QUANTITY_MAX = 2**31 - 1


def round_price(price: Optional[Decimal]) -> Optional[Decimal]:
    """Round half up to the stored scale, so responses match what is persisted."""
    if price is None:
        return None
    return price.quantize(Decimal(1).scaleb(-PRICE_DECIMAL_PLACES), rounding=ROUND_HALF_UP)


class Product(BaseModel):
    """Catalog product.

    ``id`` and ``created_at`` are assigned once by the Service Layer;
    ``updated_at`` stays ``NULL`` until the stock is first changed.
    """

    name = models.CharField(max_length=NAME_MAX_LENGTH)
    image_url = models.CharField(max_length=IMAGE_URL_MAX_LENGTH)
    price = models.DecimalField(
        max_digits=PRICE_MAX_DIGITS,
        decimal_places=PRICE_DECIMAL_PLACES,
        null=True,
        blank=True,
        validators=[MinValueValidator(Decimal("0"))],
    )
    description = models.CharField(  # noqa: DJ01
        max_length=DESCRIPTION_MAX_LENGTH,
        null=True,
        blank=True,
    )
    stock_quantity = models.PositiveIntegerField(null=True, blank=True)

    class Meta:
        db_table = "products"
        ordering = ["name", "id"]
        indexes = [
            models.Index(fields=["name"], name="products_name_idx"),
            models.Index(fields=["price"], name="products_price_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(price__isnull=True) | models.Q(price__gte=0),
                name="products_price_non_negative",
            ),
        ]

    def __str__(self) -> str:
        return self.name

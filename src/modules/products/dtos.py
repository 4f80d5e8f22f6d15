"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (Views) and the Service
layer.  DTOs are immutable (``frozen=True``) and speak camelCase on
the wire.

- ``CreateProductRequest``: input for product creation.
- ``UpdateStockRequest``: input for stock updates.
- ``ProductResponse``: output with all product fields.

Request DTOs only enforce types and column ranges; business rules live in
``modules.products.validators`` so every violation can be reported at
once with its own message.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Annotated, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_serializer
from pydantic.alias_generators import to_camel

from modules.products.models import PRICE_MAX_VALUE, STOCK_QUANTITY_MAX, Product

# Values the price and stock columns can hold; larger ones are a 400.
PriceInput = Annotated[Decimal, Field(le=PRICE_MAX_VALUE)]
StockQuantityInput = Annotated[int, Field(le=STOCK_QUANTITY_MAX)]


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class CreateProductRequest(_CamelModel):
    name: Optional[str] = None
    image_url: Optional[str] = None
    price: Optional[PriceInput] = None
    description: Optional[str] = None
    stock_quantity: Optional[StockQuantityInput] = None


class UpdateStockRequest(_CamelModel):
    stock_quantity: Optional[StockQuantityInput] = None


# ---------------------------------------------------------------------------
# Output DTO
# ---------------------------------------------------------------------------


class ProductResponse(_CamelModel):
    """Immutable DTO for product API responses."""

    id: UUID
    name: str
    image_url: str
    price: Optional[Decimal] = None
    description: Optional[str] = None
    stock_quantity: Optional[int] = None
    created_at: datetime
    updated_at: Optional[datetime] = None

    @field_serializer("price", when_used="json")
    def serialize_price(self, price: Optional[Decimal]) -> Optional[float]:
        return float(price) if price is not None else None

    @classmethod
    def from_entity(cls, product: Product) -> ProductResponse:
        """Build an output DTO from a Product model instance."""
        return cls(
            id=product.id,
            name=product.name,
            image_url=product.image_url,
            price=product.price,
            description=product.description,
            stock_quantity=product.stock_quantity,
            created_at=product.created_at,
            updated_at=product.updated_at,
        )

    def to_json(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)

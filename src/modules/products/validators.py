"""Product request validators.

Rule sets for the two product request shapes.  Every rule is evaluated;
failures are collected per property name (``Name``, ``ImageUrl``...).
"""

from __future__ import annotations

from django.core.validators import MaxLengthValidator, MinValueValidator, URLValidator

from modules.core.validation import FieldRule, Validator, when_not_empty
from modules.products.dtos import CreateProductRequest, UpdateStockRequest
from modules.products.models import (
    DESCRIPTION_MAX_LENGTH,
    IMAGE_URL_MAX_LENGTH,
    NAME_MAX_LENGTH,
)


class CreateProductRequestValidator(Validator[CreateProductRequest]):
    rules = (
        FieldRule(
            attribute="name",
            field="Name",
            required_message="Name is required",
            validators=(
                MaxLengthValidator(
                    NAME_MAX_LENGTH,
                    message=f"Name cannot exceed {NAME_MAX_LENGTH} characters",
                ),
            ),
        ),
        FieldRule(
            attribute="image_url",
            field="ImageUrl",
            required_message="ImageUrl is required",
            validators=(
                MaxLengthValidator(
                    IMAGE_URL_MAX_LENGTH,
                    message=f"ImageUrl cannot exceed {IMAGE_URL_MAX_LENGTH} characters",
                ),
                # Absolute URLs only; relative paths and other schemes are rejected.
                URLValidator(
                    schemes=["http", "https"],
                    message="ImageUrl must be a valid URL",
                ),
            ),
        ),
        FieldRule(
            attribute="price",
            field="Price",
            validators=(
                MinValueValidator(0, message="Price must be greater than or equal to 0"),
            ),
        ),
        FieldRule(
            attribute="description",
            field="Description",
            when=when_not_empty,
            validators=(
                MaxLengthValidator(
                    DESCRIPTION_MAX_LENGTH,
                    message=f"Description cannot exceed {DESCRIPTION_MAX_LENGTH} characters",
                ),
            ),
        ),
        FieldRule(
            attribute="stock_quantity",
            field="StockQuantity",
            validators=(
                MinValueValidator(
                    0, message="StockQuantity must be greater than or equal to 0"
                ),
            ),
        ),
    )


class UpdateStockRequestValidator(Validator[UpdateStockRequest]):
    rules = (
        FieldRule(
            attribute="stock_quantity",
            field="StockQuantity",
            required_message="StockQuantity is required",
            validators=(
                MinValueValidator(
                    0, message="StockQuantity must be greater than or equal to 0"
                ),
            ),
        ),
    )

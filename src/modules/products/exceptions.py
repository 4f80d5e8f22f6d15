"""Product domain exceptions.

Raised by the Service Layer.  The global exception handler translates
them into the JSON error envelope; views never catch them.
"""

from __future__ import annotations

from modules.core.exceptions import EntityNotFound, InvalidArgument


class ProductNotFound(EntityNotFound):
    """The requested product does not exist."""

    def __init__(self, product_id: object) -> None:
        super().__init__("Product", product_id)


class InvalidPaginationParameters(InvalidArgument):
    """Page number below 1 or page size outside 1..100."""

    def __init__(self, message: str = "Invalid pagination parameters") -> None:
        super().__init__(message)

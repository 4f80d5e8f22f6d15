"""Offset pagination contracts.

- ``PaginationParameters``: requested page, with the page size clamped
  to ``MAX_PAGE_SIZE`` whenever it is set.
- ``PaginatedResult``: one page of items plus the derived page metadata.
"""

from __future__ import annotations

import math
from typing import Annotated, Generic, List, TypeVar

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator
from pydantic.alias_generators import to_camel

T = TypeVar("T")

DEFAULT_PAGE_NUMBER = 1
DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100
# Keeps the row offset within a 64-bit integer.
MAX_PAGE_NUMBER = 2**31 - 1


class PaginationParameters(BaseModel):
    """Page request.

    Oversized ``page_size`` values are silently clamped rather than
    rejected.  A ``page_number`` above ``MAX_PAGE_NUMBER`` fails
    validation; the lower bounds are checked by ``is_valid()``.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
    )

    page_number: Annotated[int, Field(le=MAX_PAGE_NUMBER)] = DEFAULT_PAGE_NUMBER
    page_size: int = DEFAULT_PAGE_SIZE

    @field_validator("page_size")
    @classmethod
    def clamp_page_size(cls, v: int) -> int:
        return min(v, MAX_PAGE_SIZE)

    @property
    def offset(self) -> int:
        return (self.page_number - 1) * self.page_size

    def is_valid(self) -> bool:
        return self.page_number >= 1 and 1 <= self.page_size <= MAX_PAGE_SIZE


class PaginatedResult(BaseModel, Generic[T]):
    """Immutable page of ``T`` with navigation metadata."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    items: List[T]
    page_number: int
    page_size: int
    total_count: int

    @computed_field(alias="totalPages")
    @property
    def total_pages(self) -> int:
        if self.page_size <= 0:
            return 0
        return math.ceil(self.total_count / self.page_size)

    @computed_field(alias="hasPrevious")
    @property
    def has_previous(self) -> bool:
        return self.page_number > 1

    @computed_field(alias="hasNext")
    @property
    def has_next(self) -> bool:
        return self.page_number < self.total_pages

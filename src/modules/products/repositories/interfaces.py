"""Product repository interface.

Extends ``IRepository[Product]`` with the name-ordered paged query used
by the paginated listing.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, List, Tuple

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product entity."""

    @abstractmethod
    def get_paged(self, page_number: int, page_size: int) -> Tuple[List["Product"], int]:
        """Return one name-ordered page and the total row count.

        Pages past the end yield an empty list with the true total.
        """

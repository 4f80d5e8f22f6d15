"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that entity-specific
repository interfaces extend.  Service-layer code depends on this
abstraction, never on Django ORM directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the entity managed by the
    repository (e.g. ``Product``).  Look-ups by identifier return
    ``None`` / ``False`` for absent rows instead of raising; the Service
    Layer decides what a missing entity means.
    """

    @abstractmethod
    def get_all(self) -> List[T]:
        """Return every entity."""

    @abstractmethod
    def get_by_id(self, id: str) -> Optional[T]:
        """Retrieve an entity by its primary key."""

    @abstractmethod
    def create(self, entity: T) -> T:
        """Insert a new entity."""

    @abstractmethod
    def update(self, entity: T) -> T:
        """Persist changes to an existing entity."""

    @abstractmethod
    def delete(self, id: str) -> bool:
        """Remove an entity by ID; ``False`` when nothing matched."""

    @abstractmethod
    def exists(self, id: str) -> bool:
        """Whether an entity with the given ID is stored."""

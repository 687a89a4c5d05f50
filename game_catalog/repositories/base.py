"""Base repository interface."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar, List

T = TypeVar('T')


class Repository(ABC, Generic[T]):
    """
    Base repository interface for an ordered collection keyed by id.

    Ids are not required to be unique. Lookups act on the first entity
    with a matching id in insertion order.
    """

    @abstractmethod
    def list(self) -> List[T]:
        """List all entities in insertion order."""
        pass

    @abstractmethod
    def add(self, entity: T) -> T:
        """Append entity to the end of the collection."""
        pass

    @abstractmethod
    def replace(self, id: str, entity: T) -> bool:
        """Replace first entity with this ID in place. Returns False if not found."""
        pass

    @abstractmethod
    def delete(self, id: str) -> bool:
        """Delete first entity with this ID. Returns True if deleted, False if not found."""
        pass

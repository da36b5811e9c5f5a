"""
Registry port: the ordered collection behind each entity type.

A registry holds every live instance of one entity type in creation
order and is the single source of truth for that type. Relationship
queries are linear scans over a registry via ``select``.
"""

from abc import ABC, abstractmethod
from typing import Callable, Generic, TypeVar

T = TypeVar("T")


class Registry(ABC, Generic[T]):
    """
    Port: append-only, insertion-ordered store of entities.

    Nothing is ever removed one by one; ``clear`` empties the whole
    registry so tests can start from a clean slate.
    """

    @abstractmethod
    def add(self, item: T) -> T:
        """Append an item and return it."""
        ...

    @abstractmethod
    def all(self) -> list[T]:
        """Return every item, oldest first, as a new list."""
        ...

    @abstractmethod
    def select(self, predicate: Callable[[T], bool]) -> list[T]:
        """Return the items matching predicate, oldest first."""
        ...

    @abstractmethod
    def clear(self) -> None:
        """Forget every item."""
        ...

    @abstractmethod
    def __len__(self) -> int:
        ...

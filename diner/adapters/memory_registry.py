"""In-memory Registry: a plain list. Not safe to share between threads."""

from typing import Callable, TypeVar

from diner.domain.registry import Registry

T = TypeVar("T")


class InMemoryRegistry(Registry[T]):

    def __init__(self):
        self._items: list[T] = []

    def add(self, item: T) -> T:
        self._items.append(item)
        return item

    def all(self) -> list[T]:
        return self._items.copy()

    def select(self, predicate: Callable[[T], bool]) -> list[T]:
        return [item for item in self._items if predicate(item)]

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

"""
Lock-protected Registry for restaurants shared between threads.

One lock per registry. Appends and scans both take it, so a scan never
sees a half-finished append; readers get a snapshot list they can keep.
"""

import threading
from typing import Callable, TypeVar

from diner.domain.registry import Registry

T = TypeVar("T")


class LockedRegistry(Registry[T]):

    def __init__(self):
        self._items: list[T] = []
        self._lock = threading.Lock()

    def add(self, item: T) -> T:
        with self._lock:
            self._items.append(item)
        return item

    def all(self) -> list[T]:
        with self._lock:
            return self._items.copy()

    def select(self, predicate: Callable[[T], bool]) -> list[T]:
        # The predicate must not call back into this registry: the lock is not reentrant.
        with self._lock:
            return [item for item in self._items if predicate(item)]

    def clear(self) -> None:
        with self._lock:
            self._items.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

"""A first-in first-out queue with a fixed capacity that blocks when full or empty."""

from __future__ import annotations

import threading
from collections import deque
from typing import Generic, TypeVar

T = TypeVar("T")


class BoundedBlockingQueue(Generic[T]):
    """Producers wait while the queue is full; consumers wait while it is empty."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._items: deque[T] = deque()
        lock = threading.Lock()
        self._not_empty = threading.Condition(lock)
        self._not_full = threading.Condition(lock)

    def enqueue(self, element: T) -> None:
        """Append ``element``, waiting for free space first."""
        with self._not_full:
            self._not_full.wait_for(lambda: len(self._items) < self.capacity)
            self._items.append(element)
            self._not_empty.notify()

    def dequeue(self) -> T:
        """Remove and return the oldest element, waiting for one if needed."""
        with self._not_empty:
            self._not_empty.wait_for(lambda: len(self._items) > 0)
            element = self._items.popleft()
            self._not_full.notify()
            return element

    def __len__(self) -> int:
        with self._not_empty:
            return len(self._items)
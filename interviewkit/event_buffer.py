"""A bounded event buffer that drops the oldest events, fed by one producer and drained by one consumer."""

from __future__ import annotations

import threading
import time
from collections import deque
from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")

_ID_LIMIT = 2**31 - 1


class CircularBuffer(Generic[T]):
    """A thread-safe ring buffer; once full, each insert overwrites the oldest item."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._items: deque[T] = deque(maxlen=capacity)
        self._ready = threading.Condition()

    def insert(self, item: T) -> None:
        """Add ``item``, dropping the oldest item when the buffer is full."""
        with self._ready:
            self._items.append(item)
            self._ready.notify()

    def remove(self, timeout: Optional[float] = None) -> T:
        """Take the oldest item, waiting for one to arrive.

        With a ``timeout`` in seconds, TimeoutError is raised when nothing
        arrives in time; without one the call waits indefinitely.
        """
        with self._ready:
            if not self._ready.wait_for(lambda: len(self._items) > 0, timeout):
                raise TimeoutError("no item arrived in time")
            return self._items.popleft()

    def __len__(self) -> int:
        with self._ready:
            return len(self._items)


@dataclass(frozen=True)
class Event:
    """An event produced by the generator."""

    event_id: str
    message: str

    def __str__(self) -> str:
        return f"{self.event_id}: {self.message}"


class ProcessHandler:
    """Couples an event generator and an event processor through a circular buffer."""

    MESSAGE = "Event messages"

    def __init__(
        self,
        buffer_size: int,
        max_events: int,
        generate_interval: float = 0.08,
        process_interval: float = 0.11,
    ) -> None:
        if max_events < 1:
            raise ValueError("max_events must be at least 1")
        self.events: CircularBuffer[Event] = CircularBuffer(buffer_size)
        self.max_events = max_events
        self.generate_interval = generate_interval
        self.process_interval = process_interval
        self._next_id = 0

    def _new_id(self) -> str:
        ident = f"ID{self._next_id}"
        self._next_id += 1
        if self._next_id == _ID_LIMIT:
            self._next_id = 0
        return ident

    def generate_events(self) -> None:
        """Produce ``max_events`` events, pausing ``generate_interval`` after each."""
        for _ in range(self.max_events):
            self.events.insert(Event(self._new_id(), self.MESSAGE))
            time.sleep(self.generate_interval)

    def process_events(
        self,
        handle: Callable[[Event], object] = print,
        timeout: Optional[float] = None,
    ) -> int:
        """Hand each buffered event to ``handle`` in arrival order.

        Stops and returns the number handled once no event arrives within
        ``timeout`` seconds; with no timeout it runs indefinitely.
        """
        handled = 0
        while True:
            try:
                event = self.events.remove(timeout)
            except TimeoutError:
                return handled
            handle(event)
            handled += 1
            time.sleep(self.process_interval)
"""A fixed-capacity least-recently-used cache of integer keys and values."""

from __future__ import annotations

from collections import OrderedDict


class LRUCache:
    """Evicts the least recently used entry once ``capacity`` is reached."""

    def __init__(self, capacity: int) -> None:
        self.capacity = capacity
        self._entries: OrderedDict[int, int] = OrderedDict()

    def get(self, key: int) -> int:
        """Return the value for ``key`` and mark it recent, or -1 if absent."""
        if key not in self._entries:
            return -1
        self._entries.move_to_end(key)
        return self._entries[key]

    def put(self, key: int, value: int) -> None:
        """Store ``value`` under ``key``, evicting the oldest entry if full."""
        if self.capacity == 0:
            return
        if key in self._entries:
            del self._entries[key]
        elif len(self._entries) == self.capacity:
            self._entries.popitem(last=False)
        self._entries[key] = value

    def items(self) -> list[tuple[int, int]]:
        """Entries from most to least recently used."""
        return list(reversed(self._entries.items()))

    def __len__(self) -> int:
        return len(self._entries)
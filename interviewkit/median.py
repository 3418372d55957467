"""Running median of a stream of numbers, kept with two heaps."""

from __future__ import annotations

import heapq


class MedianFinder:
    """Tracks the median of every number added so far."""

    def __init__(self) -> None:
        self._low: list[int] = []  # max-heap, stored negated
        self._high: list[int] = []  # min-heap

    def add_num(self, num: int) -> None:
        heapq.heappush(self._high, -heapq.heappushpop(self._low, -num))
        if len(self._low) < len(self._high):
            heapq.heappush(self._low, -heapq.heappop(self._high))

    def find_median(self) -> float:
        """Return the median; raise ValueError when nothing has been added."""
        if not self._low:
            raise ValueError("no numbers have been added")
        if len(self._low) > len(self._high):
            return float(-self._low[0])
        return (-self._low[0] + self._high[0]) / 2.0
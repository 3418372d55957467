"""Averaging current samples over a recent time window with a ring buffer."""

from __future__ import annotations

import math


class CurrentMonitor:
    """Keeps the samples taken during the last ``window`` seconds.

    Samples arrive every ``sample_period`` seconds; readings outside
    -1000..1000 are discarded.
    """

    MIN_CURRENT = -1000.0
    MAX_CURRENT = 1000.0

    def __init__(self, sample_period: float = 0.002, window: float = 2.0) -> None:
        if sample_period <= 0 or window <= 0:
            raise ValueError("sample period and window must be positive")
        self.sample_period = sample_period
        self.window = window
        self.sample_rate = 1 / sample_period
        self.capacity = math.floor(window / sample_period + 0.5)
        if self.capacity < 1:
            raise ValueError("window must hold at least one sample")
        self._samples = [0.0] * self.capacity
        self._head = 0
        self._full = False
        self._running_sum = 0.0

    def register_sample(self, current: float) -> None:
        """Record one reading, replacing the oldest when the buffer is full."""
        if not self.MIN_CURRENT <= current <= self.MAX_CURRENT:
            return
        old = self._samples[self._head] if self._full else 0.0
        self._samples[self._head] = current
        self._running_sum += current - old
        self._head = (self._head + 1) % self.capacity
        if not self._full and self._head == 0:
            self._full = True

    def average_over_last(self, seconds: float) -> float:
        """Mean of the samples taken in the last ``seconds``, capped at the window.

        Returns 0.0 for a non-positive span or when there are no samples.
        """
        if seconds <= 0:
            return 0.0
        seconds = min(seconds, self.window)
        required = int(seconds * self.sample_rate)
        available = self.capacity if self._full else self._head
        count = min(required, available)
        if count == 0:
            return 0.0
        if count == available:
            return self._running_sum / count
        start = self._head - count
        recent = (self._samples[(start + i) % self.capacity] for i in range(count))
        return sum(recent) / count
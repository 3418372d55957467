"""FizzBuzz printed cooperatively by four threads that take turns."""

from __future__ import annotations

import threading
from typing import Callable


class FizzBuzz:
    """Counts from 1 to ``n``; each method is meant to run in its own thread.

    Each thread waits until the current number is its kind and then emits it,
    so together they produce the sequence in order.
    """

    def __init__(self, n: int) -> None:
        self.n = n
        self._item = 1
        self._turn = threading.Condition()

    def _consume(self, wanted: Callable[[int], bool], action: Callable[[int], object]) -> None:
        while True:
            with self._turn:
                self._turn.wait_for(lambda: self._item > self.n or wanted(self._item))
                if self._item > self.n:
                    return
                action(self._item)
                self._item += 1
                self._turn.notify_all()

    def fizz(self, print_fizz: Callable[[], object]) -> None:
        """Emit every multiple of 3 that is not a multiple of 5."""
        self._consume(lambda i: i % 3 == 0 and i % 5 != 0, lambda _: print_fizz())

    def buzz(self, print_buzz: Callable[[], object]) -> None:
        """Emit every multiple of 5 that is not a multiple of 3."""
        self._consume(lambda i: i % 3 != 0 and i % 5 == 0, lambda _: print_buzz())

    def fizzbuzz(self, print_fizzbuzz: Callable[[], object]) -> None:
        """Emit every multiple of 15."""
        self._consume(lambda i: i % 15 == 0, lambda _: print_fizzbuzz())

    def number(self, print_number: Callable[[int], object]) -> None:
        """Emit every number divisible by neither 3 nor 5."""
        self._consume(lambda i: i % 3 != 0 and i % 5 != 0, print_number)
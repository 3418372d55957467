"""Dynamic programming: pairing numbers for the best GCD score, and Fibonacci numbers."""

from __future__ import annotations

from functools import lru_cache
from itertools import combinations
from math import gcd
from typing import Iterable


def max_score(nums: Iterable[int]) -> int:
    """Best score from pairing up ``nums``.

    The i-th operation (counting from 1) removes two numbers and scores
    i times their greatest common divisor; len(nums) // 2 operations are made.
    """
    values = list(nums)
    operations = len(values) // 2
    pair_gcd = {(i, j): gcd(values[i], values[j]) for i, j in combinations(range(len(values)), 2)}

    @lru_cache(maxsize=None)
    def best(mask: int, done: int) -> int:
        if done >= operations:
            return 0
        free = [i for i in range(len(values)) if not (mask >> i) & 1]
        return max(
            (
                (done + 1) * pair_gcd[i, j] + best(mask | (1 << i) | (1 << j), done + 1)
                for i, j in combinations(free, 2)
            ),
            default=0,
        )

    return best(0, 0)


def _check_position(n: int) -> None:
    if n < 1:
        raise ValueError("Fibonacci positions start at 1")


def fib_recursive(n: int) -> int:
    """The n-th Fibonacci number by plain recursion; exponential time."""
    _check_position(n)
    if n <= 2:
        return 1
    return fib_recursive(n - 1) + fib_recursive(n - 2)


def fib_memo(n: int) -> int:
    """The n-th Fibonacci number, top-down with a memo of solved positions."""
    _check_position(n)
    memo = {1: 1, 2: 1}
    pending = [n]
    while pending:
        position = pending[-1]
        if position in memo:
            pending.pop()
            continue
        missing = [p for p in (position - 1, position - 2) if p not in memo]
        if missing:
            pending.extend(missing)
        else:
            memo[position] = memo[position - 1] + memo[position - 2]
            pending.pop()
    return memo[n]


def fib_bottom_up(n: int) -> int:
    """The n-th Fibonacci number, built up from the first two."""
    _check_position(n)
    previous, current = 1, 1
    for _ in range(n - 2):
        previous, current = current, previous + current
    return current
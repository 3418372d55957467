"""Array problems: maxima, merge sort, truck loading, subarrays, rotation and key timing."""

from __future__ import annotations

import heapq
from functools import reduce
from itertools import pairwise
from typing import Iterable, Sequence


def _non_empty(values: Iterable[int]) -> list[int]:
    items = list(values)
    if not items:
        raise ValueError("at least one value is required")
    return items


def max_recursive(values: Iterable[int]) -> int:
    """Largest value, found by comparing each element with the maximum before it."""
    items = _non_empty(values)
    return reduce(lambda best, value: best if best > value else value, items)


def max_divide_and_conquer(values: Iterable[int]) -> int:
    """Largest value, found by splitting the range in halves."""
    items = _non_empty(values)

    def largest(start: int, end: int) -> int:
        if start == end:
            return items[start]
        half = (start + end) // 2
        left = largest(start, half)
        right = largest(half + 1, end)
        return left if left > right else right

    return largest(0, len(items) - 1)


def merge_sort(values: Iterable[int]) -> list[int]:
    """Return a new list holding ``values`` in ascending order, sorted stably."""
    items = list(values)
    if len(items) <= 1:
        return items
    middle = (len(items) + 1) // 2
    return list(heapq.merge(merge_sort(items[:middle]), merge_sort(items[middle:])))


def maximum_units(box_types: Iterable[Sequence[int]], truck_size: int) -> int:
    """Most units a truck holding ``truck_size`` boxes can carry.

    Each box type is a pair of the number of boxes and the units per box.
    """
    remaining = truck_size
    total = 0
    for count, units in sorted(box_types, key=lambda box: box[1], reverse=True):
        taken = min(remaining, count)
        total += units * taken
        remaining -= taken
        if remaining <= 0:
            break
    return total


def max_subarray(nums: Iterable[int]) -> int:
    """Largest sum of a non-empty contiguous run of ``nums``."""
    items = _non_empty(nums)
    best = items[0]
    running = 0
    for value in items:
        running += value
        best = max(best, running)
        if running < 0:
            running = 0
    return best


def rotate_image(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return a square matrix rotated a quarter turn clockwise."""
    if any(len(row) != len(matrix) for row in matrix):
        raise ValueError("matrix must be square")
    return [list(row) for row in zip(*reversed(matrix))]


def slowest_key(release_times: Sequence[int], keys_pressed: str) -> str:
    """Key held down longest; ties go to the lexicographically largest key.

    The first key is held from time 0 until its release time, every later key
    from the previous release until its own.
    """
    if not release_times:
        raise ValueError("at least one key press is required")
    if len(release_times) != len(keys_pressed):
        raise ValueError("release times and keys must have the same length")
    longest = release_times[0]
    key = keys_pressed[0]
    for (previous, current), pressed in zip(pairwise(release_times), keys_pressed[1:]):
        held = current - previous
        if held > longest:
            longest = held
            key = pressed
        elif held == longest and pressed > key:
            key = pressed
    return key
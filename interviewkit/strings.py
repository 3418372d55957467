"""String problems: substring search, windows, parentheses, partitions, run lengths and robot paths."""

from __future__ import annotations

from collections import Counter
from itertools import groupby
from typing import Optional


def prefix_table(needle: str) -> list[int]:
    """For each position, the length of the longest proper prefix that is also a suffix there."""
    table = [0] * len(needle)
    matched = 0
    for i, ch in enumerate(needle[1:], start=1):
        while matched and ch != needle[matched]:
            matched = table[matched - 1]
        if ch == needle[matched]:
            matched += 1
        table[i] = matched
    return table


def str_str(haystack: str, needle: str) -> int:
    """Index of the first occurrence of ``needle`` in ``haystack``, or -1."""
    if len(needle) > len(haystack):
        return -1
    if not needle:
        return 0
    table = prefix_table(needle)
    matched = 0
    for i, ch in enumerate(haystack):
        while matched and ch != needle[matched]:
            matched = table[matched - 1]
        if ch == needle[matched]:
            matched += 1
            if matched == len(needle):
                return i - matched + 1
    return -1


def length_of_longest_substring(s: str) -> int:
    """Length of the longest run of ``s`` with no repeated character."""
    after_last: dict[str, int] = {}
    start = 0
    best = 0
    for i, ch in enumerate(s):
        start = max(start, after_last.get(ch, 0))
        after_last[ch] = i + 1
        best = max(best, i - start + 1)
    return best


def longest_valid_parentheses(s: str) -> int:
    """Length of the longest well-formed parentheses substring.

    Every character other than ``(`` is treated as a closing parenthesis.
    """
    stack = [-1]
    best = 0
    for i, ch in enumerate(s):
        if ch == "(":
            stack.append(i)
            continue
        stack.pop()
        if stack:
            best = max(best, i - stack[-1])
        else:
            stack.append(i)
    return best


def min_window(s: str, t: str) -> str:
    """Shortest substring of ``s`` holding every character of ``t`` with multiplicity.

    The earliest such window wins a tie; "" is returned when none exists.
    """
    if not s or not t or len(t) > len(s):
        return ""
    need = Counter(t)
    missing = len(need)
    left = 0
    best: Optional[tuple[int, int]] = None
    for right, ch in enumerate(s, start=1):
        if ch in need:
            need[ch] -= 1
            if need[ch] == 0:
                missing -= 1
        if missing:
            continue
        while not missing:
            gone = s[left]
            left += 1
            if gone in need:
                need[gone] += 1
                if need[gone] > 0:
                    missing += 1
        if best is None or right - left + 1 < best[1] - best[0]:
            best = (left - 1, right)
    return s[best[0]:best[1]] if best else ""


def partition_string(s: str) -> int:
    """Fewest pieces ``s`` splits into with no character repeated in a piece.

    An empty string counts as one (empty) piece.
    """
    pieces = 1
    seen: set[str] = set()
    for ch in s:
        if ch in seen:
            pieces += 1
            seen = set()
        seen.add(ch)
    return pieces


def run_length_encode(text: str) -> str:
    """Encode each run of a repeated character as the character followed by its count."""
    return "".join(f"{ch}{sum(1 for _ in run)}" for ch, run in groupby(text))


_HEADINGS = ((0, 1), (1, 0), (0, -1), (-1, 0))


def is_robot_bounded(instructions: str) -> bool:
    """Whether repeating ``instructions`` forever keeps the robot near the origin.

    ``G`` moves one step, ``L`` turns one way and any other character turns
    the other way.
    """
    x = y = 0
    heading = 0
    for command in instructions:
        if command == "G":
            dx, dy = _HEADINGS[heading]
            x += dx
            y += dy
        elif command == "L":
            heading = (heading + 1) % 4
        else:
            heading = (heading - 1) % 4
    return (x, y) == (0, 0) or heading != 0
"""Bit-level searches: a 32-bit marker in a byte stream and runs of 2-bit switch states."""

from __future__ import annotations

PATTERN = 0xFE6B2840
_PATTERN_BITS = 32
_SWITCHES = 16


def find_pattern(data: bytes) -> int:
    """Bit offset of the first big-endian occurrence of ``PATTERN`` in ``data``.

    Offsets count from the most significant bit of the first byte and need not
    be byte aligned. Returns -1 when the pattern does not occur.
    """
    total_bits = len(data) * 8
    if total_bits < _PATTERN_BITS:
        return -1
    stream = int.from_bytes(data, "big")
    mask = (1 << _PATTERN_BITS) - 1
    for start in range(total_bits - _PATTERN_BITS + 1):
        if (stream >> (total_bits - _PATTERN_BITS - start)) & mask == PATTERN:
            return start
    return -1


def max_consecutive_states(states: int, state: int) -> int:
    """Longest run of adjacent switches in ``state`` among 16 two-bit fields.

    Field 0 occupies the two least significant bits of ``states``.
    """
    longest = run = 0
    for index in range(_SWITCHES):
        if (states >> (index * 2)) & 0b11 == state:
            run += 1
            longest = max(longest, run)
        else:
            run = 0
    return longest
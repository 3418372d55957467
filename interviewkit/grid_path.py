"""Shortest clear path through a square binary matrix."""

from __future__ import annotations

from collections import deque
from typing import Sequence

_DIRECTIONS = (
    (1, -1), (0, 1), (1, 0), (1, 1),
    (-1, 0), (0, -1), (-1, -1), (-1, 1),
)


def shortest_path_binary_matrix(grid: Sequence[Sequence[int]]) -> int:
    """Length in cells of the shortest 8-directional path of zeros.

    The path runs from the top-left to the bottom-right cell of an n-by-n
    grid; -1 is returned when no such path exists.
    """
    n = len(grid)
    queue = deque([(0, 0, 1)])
    seen = {(0, 0)}
    while queue:
        row, col, length = queue.popleft()
        if not (0 <= row < n and 0 <= col < n) or grid[row][col] == 1:
            continue
        if row == n - 1 and col == n - 1:
            return length
        for d_row, d_col in _DIRECTIONS:
            cell = (row + d_row, col + d_col)
            if cell not in seen:
                seen.add(cell)
                queue.append((cell[0], cell[1], length + 1))
    return -1
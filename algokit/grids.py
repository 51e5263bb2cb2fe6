"""Breadth-first searches over rectangular grids."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Sequence

UNREACHABLE = -1
"""Returned when the goal of a grid search can never be reached."""

OPEN = "."
"""Maze cell that can be walked through."""

EMPTY = 0
FRESH = 1
ROTTEN = 2

_MAZE_DIRECTIONS = ((-1, 0), (1, 0), (0, 1), (0, -1))
_ORANGE_DIRECTIONS = ((0, 1), (0, -1), (1, 0), (-1, 0))


def _neighbours(
    row: int,
    col: int,
    rows: int,
    cols: int,
    directions: Sequence[tuple[int, int]],
) -> Iterator[tuple[int, int]]:
    for d_row, d_col in directions:
        r, c = row + d_row, col + d_col
        if 0 <= r < rows and 0 <= c < cols:
            yield r, c


def _dimensions(grid: Sequence[Sequence[object]]) -> tuple[int, int]:
    if not grid or not grid[0]:
        raise ValueError("grid must not be empty")
    return len(grid), len(grid[0])


def nearest_exit(maze: Sequence[Sequence[str]], entrance: Sequence[int]) -> int:
    """Return the fewest steps from ``entrance`` to an open border cell.

    Cells equal to ``"."`` are open; anything else is a wall. The entrance
    itself never counts as an exit. Returns ``UNREACHABLE`` when no exit
    can be reached.
    """
    rows, cols = _dimensions(maze)
    start_row, start_col = entrance
    if not (0 <= start_row < rows and 0 <= start_col < cols):
        raise ValueError(f"entrance {tuple(entrance)} lies outside the maze")

    start = (start_row, start_col)
    visited = {start}
    queue = deque([(start, 0)])
    while queue:
        (row, col), steps = queue.popleft()
        for r, c in _neighbours(row, col, rows, cols, _MAZE_DIRECTIONS):
            if (r, c) in visited or maze[r][c] != OPEN:
                continue
            visited.add((r, c))
            if r in (0, rows - 1) or c in (0, cols - 1):
                return steps + 1
            queue.append(((r, c), steps + 1))
    return UNREACHABLE


def oranges_rotting(grid: Sequence[Sequence[int]]) -> int:
    """Return the minutes until no fresh orange is left.

    Each minute every rotten orange (``2``) rots its fresh (``1``)
    neighbours in the four directions. Returns ``UNREACHABLE`` if some
    fresh orange can never rot. The given grid is left unchanged.
    """
    rows, cols = _dimensions(grid)
    state = [list(row) for row in grid]
    fresh = sum(cell == FRESH for row in state for cell in row)
    frontier = [
        (r, c)
        for r, row in enumerate(state)
        for c, cell in enumerate(row)
        if cell == ROTTEN
    ]

    minutes = 0
    while frontier and fresh > 0:
        next_frontier = []
        for row, col in frontier:
            for r, c in _neighbours(row, col, rows, cols, _ORANGE_DIRECTIONS):
                if state[r][c] == FRESH:
                    state[r][c] = ROTTEN
                    fresh -= 1
                    next_frontier.append((r, c))
        frontier = next_frontier
        minutes += 1

    return minutes if fresh == 0 else UNREACHABLE
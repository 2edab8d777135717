"""Bounded flood fill used to avoid moving into dead ends."""

from __future__ import annotations

from snake_brain.board import Board
from snake_brain.geometry import Coord, neighbors
from snake_brain.grid import OccupancyGrid


def reachable_count(
    start: Coord,
    board: Board,
    capacity: int,
    grid: OccupancyGrid | None = None,
) -> int:
    """Count open cells reachable from *start*, stopping at *capacity*.

    The walk is a depth-first search over on-board cells not covered by
    a snake; food and hazards do not block it. It returns as soon as
    *capacity* distinct cells have been visited, so the result answers
    "is there room for my whole body this way" rather than measuring the
    full region. An invalid *start* or a non-positive *capacity* gives 0.

    Pass *grid* to reuse one rasterised board across several calls.
    """
    if grid is None:
        grid = OccupancyGrid.from_board(board)
    if capacity <= 0 or not grid.is_open(start):
        return 0

    visited: set[Coord] = {start}
    stack = [start]
    while stack and len(visited) < capacity:
        cell = stack.pop()
        for _, nxt in neighbors(cell):
            if nxt in visited or not grid.is_open(nxt):
                continue
            visited.add(nxt)
            if len(visited) >= capacity:
                break
            stack.append(nxt)
    return len(visited)

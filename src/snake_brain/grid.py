"""NumPy occupancy grid rasterised from a board snapshot."""

from __future__ import annotations

import enum

import numpy as np

from snake_brain.board import Board
from snake_brain.geometry import Coord


class CellType(enum.IntEnum):
    """Integer codes stored in the grid array.

    Snake cells win over food and hazards when they overlap.
    """

    EMPTY = 0
    SNAKE = 1
    FOOD = 2
    HAZARD = 3


class OccupancyGrid:
    """NumPy-backed view of one board for O(1) cell lookups.

    Cells are indexed ``cells[y, x]``. Only snake cells block movement;
    food and hazard cells are traversable.
    """

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError("Grid dimensions must be non-negative.")
        self.width = width
        self.height = height
        self.cells = np.zeros((height, width), dtype=np.int8)

    @classmethod
    def from_board(cls, board: Board) -> OccupancyGrid:
        """Paint hazards, then food, then every snake cell onto a new grid."""
        grid = cls(board.width, board.height)
        for cell in board.hazards:
            grid.set(cell, CellType.HAZARD)
        for cell in board.food:
            grid.set(cell, CellType.FOOD)
        for snake in board.snakes:
            for cell in snake.cells:
                grid.set(cell, CellType.SNAKE)
        return grid

    def in_bounds(self, cell: Coord) -> bool:
        """Check whether a coordinate lies within the grid."""
        return 0 <= cell.x < self.width and 0 <= cell.y < self.height

    def get(self, cell: Coord) -> CellType:
        return CellType(self.cells[cell.y, cell.x])

    def set(self, cell: Coord, cell_type: CellType) -> None:
        """Set a cell, silently ignoring coordinates off the grid."""
        if self.in_bounds(cell):
            self.cells[cell.y, cell.x] = cell_type

    def is_open(self, cell: Coord) -> bool:
        """True for on-grid cells not covered by a snake."""
        return self.in_bounds(cell) and self.cells[cell.y, cell.x] != CellType.SNAKE

    def free_cell_count(self) -> int:
        """Number of cells a snake head could enter."""
        return int(np.count_nonzero(self.cells != CellType.SNAKE))

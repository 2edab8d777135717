"""Grid coordinates and the four cardinal moves."""

from __future__ import annotations

import enum
from typing import NamedTuple


class Coord(NamedTuple):
    """An immutable ``(x, y)`` cell position.

    ``x`` grows to the right and ``y`` grows upward, so ``up`` is ``y + 1``.
    """

    x: int
    y: int


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) values."""

    UP = (0, 1)
    DOWN = (0, -1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def token(self) -> str:
        """Wire name of the move, e.g. ``"up"``."""
        return self.name.lower()

    @classmethod
    def from_token(cls, token: str) -> Direction:
        try:
            return cls[token.upper()]
        except KeyError:
            raise ValueError(f"Unknown move: {token!r}.") from None


# Fixed evaluation order; ties go to the earliest entry.
DIRECTION_ORDER: tuple[Direction, ...] = (
    Direction.UP,
    Direction.DOWN,
    Direction.LEFT,
    Direction.RIGHT,
)


def step(cell: Coord, direction: Direction) -> Coord:
    """Return the cell one unit away from *cell* in *direction*."""
    dx, dy = direction.value
    return Coord(cell.x + dx, cell.y + dy)


def up(cell: Coord) -> Coord:
    return Coord(cell.x, cell.y + 1)


def down(cell: Coord) -> Coord:
    return Coord(cell.x, cell.y - 1)


def left(cell: Coord) -> Coord:
    return Coord(cell.x - 1, cell.y)


def right(cell: Coord) -> Coord:
    return Coord(cell.x + 1, cell.y)


def neighbors(cell: Coord) -> list[tuple[Direction, Coord]]:
    """Return the four adjacent cells paired with their direction.

    Entries follow :data:`DIRECTION_ORDER`.
    """
    return [(d, step(cell, d)) for d in DIRECTION_ORDER]

"""Membership predicates over a single turn's snapshot."""

from __future__ import annotations

from collections.abc import Iterable

from snake_brain.board import Board, Snake
from snake_brain.geometry import Coord


def cell_has_snake(cell: Coord, snakes: Iterable[Snake]) -> bool:
    """True if *cell* is any snake's head or body segment, own snake included."""
    return any(cell == s.head or cell in s.body for s in snakes)


def cell_has_food(cell: Coord, board: Board) -> bool:
    return cell in board.food


def cell_has_hazard(cell: Coord, board: Board) -> bool:
    return cell in board.hazards

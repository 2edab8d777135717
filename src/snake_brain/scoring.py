"""Per-cell desirability score for a candidate head position."""

from __future__ import annotations

from snake_brain.board import Board, Snake
from snake_brain.config import ScoreWeights
from snake_brain.connectivity import reachable_count
from snake_brain.geometry import Coord
from snake_brain.grid import OccupancyGrid
from snake_brain.occupancy import cell_has_food, cell_has_hazard, cell_has_snake
from snake_brain.threat import cell_might_be_threatened

DEFAULT_WEIGHTS = ScoreWeights()


def base_score(cell: Coord, board: Board, weights: ScoreWeights = DEFAULT_WEIGHTS) -> int:
    """Score a cell on occupancy and position alone.

    First match wins: snake collision, off the board, low edge
    (``x == 0`` or ``y == 0``), open interior.
    """
    if cell_has_snake(cell, board.snakes):
        return weights.snake_collision
    if not board.in_bounds(cell):
        return weights.off_board
    if cell.x == 0 or cell.y == 0:
        return weights.edge_base
    return weights.interior_base


def is_fatal(value: int, weights: ScoreWeights = DEFAULT_WEIGHTS) -> bool:
    """True if *value* belongs to the collision/off-board tier."""
    return value <= max(weights.snake_collision, weights.off_board)


def modifier(
    cell: Coord,
    board: Board,
    me: Snake,
    weights: ScoreWeights = DEFAULT_WEIGHTS,
    grid: OccupancyGrid | None = None,
) -> int:
    """Sum of the threat, food/hazard and space adjustments for *cell*."""
    total = 0

    if cell_might_be_threatened(cell, board.snakes, me):
        total -= weights.threat_penalty

    # Food takes priority; a hazard only counts on a cell without food.
    if cell_has_food(cell, board):
        total += weights.food_bonus
    elif cell_has_hazard(cell, board):
        total -= weights.hazard_penalty(me.health)

    if reachable_count(cell, board, me.length, grid=grid) >= me.length:
        total += weights.space_bonus
    else:
        total -= weights.space_penalty

    return total


def score(
    cell: Coord,
    board: Board,
    me: Snake,
    weights: ScoreWeights = DEFAULT_WEIGHTS,
    grid: OccupancyGrid | None = None,
) -> int:
    """Return the integer desirability of moving *me*'s head onto *cell*.

    Fatal cells return their fatal constant unchanged; every other cell
    gets its base value plus :func:`modifier`.
    """
    value = base_score(cell, board, weights)
    if is_fatal(value, weights):
        return value
    return value + modifier(cell, board, me, weights, grid=grid)

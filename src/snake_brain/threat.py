"""One-ply prediction of where opposing heads can land next turn."""

from __future__ import annotations

from collections.abc import Iterable

from snake_brain.board import Snake
from snake_brain.geometry import Coord, neighbors


def threatening_snakes(snakes: Iterable[Snake], me: Snake) -> list[Snake]:
    """Opponents that would win or tie a head-to-head collision with *me*."""
    return [s for s in snakes if s.id != me.id and s.length >= me.length]


def cell_might_be_threatened(cell: Coord, snakes: Iterable[Snake], me: Snake) -> bool:
    """Check whether an equal or longer opponent's head can reach *cell* next turn.

    Shorter opponents are ignored since they lose a head-to-head
    collision. The evaluating snake itself is always excluded.
    """
    for snake in threatening_snakes(snakes, me):
        if any(reachable == cell for _, reachable in neighbors(snake.head)):
            return True
    return False

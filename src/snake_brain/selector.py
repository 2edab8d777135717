"""Pick the best of the four moves for one turn."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from snake_brain.board import Board, Snake
from snake_brain.config import ScoreWeights
from snake_brain.geometry import Direction, neighbors
from snake_brain.grid import OccupancyGrid
from snake_brain.scoring import DEFAULT_WEIGHTS, is_fatal, score

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoveScores:
    """Scores for all four directions in evaluation order.

    Built once per turn and never updated.
    """

    entries: tuple[tuple[Direction, int], ...]
    weights: ScoreWeights = DEFAULT_WEIGHTS

    def __getitem__(self, direction: Direction) -> int:
        for d, value in self.entries:
            if d is direction:
                return value
        raise KeyError(direction)

    def best(self) -> Direction:
        """Return the first direction holding the maximum score."""
        best_dir, best_value = self.entries[0]
        for d, value in self.entries[1:]:
            if value > best_value:
                best_dir, best_value = d, value
        return best_dir

    def safe_moves(self) -> list[Direction]:
        """Directions that do not end the game immediately."""
        return [d for d, value in self.entries if not is_fatal(value, self.weights)]

    def as_dict(self) -> dict[str, int]:
        return {d.token: value for d, value in self.entries}


def evaluate_moves(
    board: Board,
    me: Snake,
    weights: ScoreWeights = DEFAULT_WEIGHTS,
) -> MoveScores:
    """Score each neighbour of *me*'s head."""
    board = board.with_snake(me)
    grid = OccupancyGrid.from_board(board)
    entries = tuple(
        (direction, score(cell, board, me, weights, grid=grid))
        for direction, cell in neighbors(me.head)
    )
    return MoveScores(entries=entries, weights=weights)


def choose_move(
    board: Board,
    me: Snake,
    weights: ScoreWeights = DEFAULT_WEIGHTS,
) -> str:
    """Return the wire token of the highest scoring move.

    A move is always returned, even when every option is fatal.
    """
    scores = evaluate_moves(board, me, weights)
    chosen = scores.best()
    logger.debug("Scores %s -> %s", scores.as_dict(), chosen.token)
    return chosen.token

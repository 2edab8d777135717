"""Snake Brain — single-turn Battlesnake move engine."""

from snake_brain.board import Board, Snake
from snake_brain.config import Appearance, ScoreWeights, ServerConfig
from snake_brain.connectivity import reachable_count
from snake_brain.geometry import Coord, Direction, down, left, right, up
from snake_brain.occupancy import cell_has_food, cell_has_hazard, cell_has_snake
from snake_brain.scoring import score
from snake_brain.selector import MoveScores, choose_move, evaluate_moves
from snake_brain.threat import cell_might_be_threatened

__all__ = [
    "Appearance",
    "Board",
    "Coord",
    "Direction",
    "MoveScores",
    "ScoreWeights",
    "ServerConfig",
    "Snake",
    "cell_has_food",
    "cell_has_hazard",
    "cell_has_snake",
    "cell_might_be_threatened",
    "choose_move",
    "down",
    "evaluate_moves",
    "left",
    "reachable_count",
    "right",
    "score",
    "up",
]

"""Tests for move selection."""

import pytest

from snake_brain.board import Board, Snake
from snake_brain.config import ScoreWeights
from snake_brain.geometry import Direction
from snake_brain.scoring import DEFAULT_WEIGHTS
from snake_brain.selector import MoveScores, choose_move, evaluate_moves

W = DEFAULT_WEIGHTS


def _snake(sid, body, length=None, health=100):
    return Snake(
        id=sid, head=body[0], body=tuple(body),
        length=len(body) if length is None else length, health=health,
    )


def _board(snakes, width=11, height=11, food=(), hazards=()):
    return Board(
        width=width, height=height,
        food=tuple(food), hazards=tuple(hazards), snakes=tuple(snakes),
    )


class TestMoveScores:
    def test_first_maximum_wins(self):
        scores = MoveScores(entries=(
            (Direction.UP, 5),
            (Direction.DOWN, 9),
            (Direction.LEFT, 9),
            (Direction.RIGHT, 1),
        ))
        assert scores.best() is Direction.DOWN

    def test_lookup_by_direction(self):
        scores = MoveScores(entries=((Direction.UP, 5), (Direction.LEFT, 2)))
        assert scores[Direction.LEFT] == 2
        with pytest.raises(KeyError):
            scores[Direction.RIGHT]

    def test_safe_moves_exclude_fatal(self):
        scores = MoveScores(entries=(
            (Direction.UP, W.snake_collision),
            (Direction.DOWN, -40),
            (Direction.LEFT, W.off_board),
            (Direction.RIGHT, 175),
        ))
        assert scores.safe_moves() == [Direction.DOWN, Direction.RIGHT]

    def test_as_dict(self):
        scores = MoveScores(entries=((Direction.UP, 1), (Direction.DOWN, 2)))
        assert scores.as_dict() == {"up": 1, "down": 2}


class TestEvaluateMoves:
    def test_scores_every_direction_in_order(self):
        me = _snake("me", [(5, 5), (5, 4), (5, 3)])
        scores = evaluate_moves(_board([me]), me)
        assert [d for d, _ in scores.entries] == [
            Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT,
        ]
        assert scores[Direction.DOWN] == W.snake_collision
        assert scores[Direction.UP] == W.interior_base + W.space_bonus

    def test_self_added_when_missing_from_board(self):
        me = _snake("me", [(5, 5), (5, 4), (5, 3)])
        scores = evaluate_moves(_board([]), me)
        assert scores[Direction.DOWN] == W.snake_collision

    def test_custom_weights_carried(self):
        weights = ScoreWeights(interior_base=200)
        me = _snake("me", [(5, 5), (5, 4)])
        scores = evaluate_moves(_board([me]), me, weights)
        assert scores.weights is weights
        assert scores[Direction.UP] == 200 + weights.space_bonus


class TestChooseMove:
    def test_ties_resolve_to_up(self):
        me = _snake("me", [(5, 5), (5, 4), (5, 3)])
        assert choose_move(_board([me]), me) == "up"

    def test_avoids_own_neck(self):
        me = _snake("me", [(5, 5), (5, 6), (5, 7)])
        assert choose_move(_board([me]), me) == "down"

    def test_corner_escape(self):
        me = _snake("me", [(0, 0), (1, 0)])
        assert choose_move(_board([me]), me) == "up"

    def test_follows_food(self):
        me = _snake("me", [(5, 5), (5, 4), (5, 3)])
        board = _board([me], food=[(4, 5)])
        assert choose_move(board, me) == "left"

    def test_avoids_threatened_cell(self):
        me = _snake("me", [(5, 5), (5, 4), (5, 3)])
        opp = _snake("opp", [(5, 7), (5, 8), (5, 9)])
        assert choose_move(_board([me, opp]), me) == "left"

    def test_ignores_shorter_opponent(self):
        me = _snake("me", [(5, 5), (5, 4), (5, 3)])
        opp = _snake("opp", [(5, 7), (5, 8)])
        assert choose_move(_board([me, opp]), me) == "up"

    def test_avoids_dead_end(self):
        me = _snake("me", [(1, 5), (2, 5), (3, 5), (4, 5), (5, 5)])
        above = _snake("a", [(0, 6), (0, 7)])
        below = _snake("b", [(0, 4), (0, 3)])
        board = _board([me, above, below])
        scores = evaluate_moves(board, me)
        assert scores[Direction.LEFT] == W.edge_base - W.space_penalty
        assert Direction.LEFT in scores.safe_moves()
        assert Direction.RIGHT not in scores.safe_moves()
        assert choose_move(board, me) == "up"

    def test_all_moves_fatal_still_returns_a_move(self):
        me = _snake("me", [(0, 0)])
        board = _board([me], width=1, height=1)
        scores = evaluate_moves(board, me)
        assert scores.safe_moves() == []
        assert choose_move(board, me) == "up"

    def test_prefers_wall_over_collision_when_trapped(self):
        me = _snake("me", [(0, 5), (1, 5), (1, 4), (0, 4)])
        blocker = _snake("b", [(0, 6), (1, 6)])
        board = _board([me, blocker])
        scores = evaluate_moves(board, me)
        assert scores[Direction.LEFT] == W.off_board
        assert choose_move(board, me) == "left"

    def test_deterministic(self):
        me = _snake("me", [(5, 5), (5, 4), (5, 3)])
        opp = _snake("opp", [(7, 5), (8, 5), (9, 5)])
        board = _board([me, opp], food=[(4, 5)], hazards=[(5, 6)])
        assert len({choose_move(board, me) for _ in range(5)}) == 1

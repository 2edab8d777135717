"""Battlesnake API route handlers."""

from __future__ import annotations

import logging
from dataclasses import asdict

from fastapi import APIRouter, Request, Response

from snake_brain.config import ServerConfig
from snake_brain.selector import evaluate_moves
from snake_brain.server.models import GameState, InfoResponse, MoveResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["battlesnake"])


def _get_config(request: Request) -> ServerConfig:
    return request.app.state.config


@router.get("/")
async def handle_index(request: Request) -> InfoResponse:
    """Return the snake's identity and appearance."""
    logger.info("INFO")
    return InfoResponse(**asdict(_get_config(request).appearance))


@router.post("/start", status_code=200)
async def handle_start(body: GameState) -> Response:
    logger.info("%s START", body.game.id)
    return Response(status_code=200)


@router.post("/move")
async def handle_move(body: GameState, request: Request) -> MoveResponse:
    """Score the four moves for this turn and return the best one."""
    board, me = body.snapshot()
    scores = evaluate_moves(board, me, _get_config(request).weights)
    chosen = scores.best().token
    logger.debug("%s turn %d scores %s", body.game.id, body.turn, scores.as_dict())
    logger.info("%s MOVE %s", body.game.id, chosen)
    return MoveResponse(move=chosen)


@router.post("/end", status_code=200)
async def handle_end(body: GameState) -> Response:
    logger.info("%s END", body.game.id)
    return Response(status_code=200)

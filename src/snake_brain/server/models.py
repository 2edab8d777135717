"""Pydantic models for the Battlesnake API request/response schemas."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from snake_brain.board import Board, Snake
from snake_brain.geometry import Coord


class CoordModel(BaseModel):
    x: int
    y: int

    def to_coord(self) -> Coord:
        return Coord(self.x, self.y)


class BattlesnakeModel(BaseModel):
    """A snake as sent by the game server."""

    id: str
    name: str = ""
    health: int = Field(default=100, ge=0, le=100)
    body: list[CoordModel] = Field(default_factory=list)
    head: CoordModel
    length: int = Field(default=1, ge=0)
    latency: str = ""
    shout: str | None = None
    squad: str | None = None

    def to_snake(self) -> Snake:
        return Snake(
            id=self.id,
            name=self.name,
            head=self.head.to_coord(),
            body=tuple(seg.to_coord() for seg in self.body),
            length=self.length,
            health=self.health,
            latency=self.latency,
            shout=self.shout,
            squad=self.squad,
        )


class BoardModel(BaseModel):
    width: int = Field(ge=0)
    height: int = Field(ge=0)
    food: list[CoordModel] = Field(default_factory=list)
    hazards: list[CoordModel] = Field(default_factory=list)
    snakes: list[BattlesnakeModel] = Field(default_factory=list)

    def to_board(self) -> Board:
        return Board(
            width=self.width,
            height=self.height,
            food=tuple(c.to_coord() for c in self.food),
            hazards=tuple(c.to_coord() for c in self.hazards),
            snakes=tuple(s.to_snake() for s in self.snakes),
        )


class Game(BaseModel):
    id: str
    ruleset: dict[str, Any] = Field(default_factory=dict)
    timeout: int = 500


class GameState(BaseModel):
    """Request body for /start, /move and /end."""

    game: Game
    turn: int = Field(default=0, ge=0)
    board: BoardModel
    you: BattlesnakeModel

    def snapshot(self) -> tuple[Board, Snake]:
        """Convert to core types; the evaluating snake is always on the board."""
        me = self.you.to_snake()
        return self.board.to_board().with_snake(me), me


class MoveResponse(BaseModel):
    """Response body for /move."""

    move: str


class InfoResponse(BaseModel):
    """Identity payload for GET /."""

    apiversion: str
    author: str
    color: str
    head: str
    tail: str
    version: str

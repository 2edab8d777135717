"""Read-only per-turn snapshot of the board and the snakes on it."""

from __future__ import annotations

from dataclasses import dataclass, field

from snake_brain.geometry import Coord


@dataclass(frozen=True)
class Snake:
    """One snake as seen in a single turn's snapshot.

    ``body`` is stored exactly as the game server sends it: ``body[0]``
    is the head and ``body[1]`` the neck. Occupancy checks always use
    ``head`` together with ``body``, so a body list that starts at the
    neck is handled the same way.
    """

    id: str
    head: Coord
    body: tuple[Coord, ...] = ()
    length: int = 1
    health: int = 100
    name: str = ""
    latency: str = ""
    shout: str | None = None
    squad: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "head", Coord(*self.head))
        object.__setattr__(self, "body", tuple(Coord(*seg) for seg in self.body))

    @property
    def cells(self) -> frozenset[Coord]:
        """Every cell this snake occupies, head included."""
        return frozenset((self.head, *self.body))


@dataclass(frozen=True)
class Board:
    """Board dimensions plus everything placed on it this turn.

    The playable area is ``[0, width) x [0, height)``.
    """

    width: int
    height: int
    food: tuple[Coord, ...] = ()
    hazards: tuple[Coord, ...] = ()
    snakes: tuple[Snake, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "food", tuple(Coord(*c) for c in self.food))
        object.__setattr__(self, "hazards", tuple(Coord(*c) for c in self.hazards))
        object.__setattr__(self, "snakes", tuple(self.snakes))

    def in_bounds(self, cell: Coord) -> bool:
        """Check whether a coordinate lies on the board."""
        return 0 <= cell.x < self.width and 0 <= cell.y < self.height

    def find_snake(self, snake_id: str) -> Snake | None:
        for snake in self.snakes:
            if snake.id == snake_id:
                return snake
        return None

    def with_snake(self, snake: Snake) -> Board:
        """Return a board guaranteed to contain *snake* exactly once."""
        if self.find_snake(snake.id) is not None:
            return self
        return Board(
            width=self.width,
            height=self.height,
            food=self.food,
            hazards=self.hazards,
            snakes=(*self.snakes, snake),
        )

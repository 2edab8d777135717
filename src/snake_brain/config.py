"""Tunable scoring weights and server configuration."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict, dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ScoreWeights:
    """Constants combined by the move scorer.

    Penalties are stored as positive magnitudes and subtracted.
    Fatal scores must stay far below the worst non-fatal total.
    """

    # Fatal tier
    snake_collision: int = -1000
    off_board: int = -999

    # Base value of a safe cell
    edge_base: int = 40
    interior_base: int = 100

    # Modifiers
    threat_penalty: int = 80
    food_bonus: int = 50
    hazard_base: int = 100
    hazard_health_offset: int = 14
    space_bonus: int = 75
    space_penalty: int = 80

    def hazard_penalty(self, health: int) -> int:
        """Penalty for stepping on a hazard; shrinks as health rises."""
        return self.hazard_base - (health - self.hazard_health_offset)

    @property
    def worst_safe_score(self) -> int:
        """Lowest total a non-fatal cell can reach (health 0, every penalty)."""
        return (
            min(self.edge_base, self.interior_base)
            - self.threat_penalty
            - self.hazard_penalty(0)
            - self.space_penalty
        )


@dataclass(frozen=True)
class Appearance:
    """Identity payload returned from ``GET /``."""

    apiversion: str = "1"
    author: str = "snake-brain"
    color: str = "#F09383"
    head: str = "bendr"
    tail: str = "round-bum"
    version: str = "0.1.0"


@dataclass(frozen=True)
class ServerConfig:
    """Full server configuration.

    Supports JSON serialization and a ``PORT`` environment override.
    """

    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"

    appearance: Appearance = field(default_factory=Appearance)
    weights: ScoreWeights = field(default_factory=ScoreWeights)

    def __post_init__(self) -> None:
        if not 1 <= self.port <= 65535:
            raise ValueError("port must be between 1 and 65535.")
        if self.log_level.upper() not in _LOG_LEVELS:
            raise ValueError(
                f"Unknown log level: {self.log_level!r}. "
                f"Expected one of {list(_LOG_LEVELS)}.",
            )
        if self.weights.worst_safe_score <= max(
            self.weights.snake_collision, self.weights.off_board,
        ):
            raise ValueError(
                "Fatal scores must be lower than any non-fatal score.",
            )

    def to_dict(self) -> dict:
        """Serialize to a plain dict."""
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def from_dict(cls, raw: dict) -> ServerConfig:
        raw = dict(raw)
        raw["appearance"] = Appearance(**raw.pop("appearance", {}))
        raw["weights"] = ScoreWeights(**raw.pop("weights", {}))
        return cls(**raw)

    @classmethod
    def load(cls, path: str | Path) -> ServerConfig:
        """Load config from a JSON file."""
        return cls.from_dict(json.loads(Path(path).read_text()))

    @classmethod
    def from_env(cls, base: ServerConfig | None = None) -> ServerConfig:
        """Apply the ``PORT`` environment variable on top of *base*."""
        d = (base or cls()).to_dict()
        env_port = os.environ.get("PORT")
        if env_port:
            try:
                d["port"] = int(env_port)
            except ValueError as exc:
                raise ValueError(f"PORT must be an integer, got {env_port!r}.") from exc
        return cls.from_dict(d)

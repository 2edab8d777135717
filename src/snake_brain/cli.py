"""Command-line launcher for the Snake Brain server and offline scoring."""

from __future__ import annotations

import argparse
import json
import logging
import sys

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="snake-brain",
        description="Battlesnake move engine: serve the HTTP API or score a saved turn.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- serve ---
    serve_p = sub.add_parser("serve", help="Run the Battlesnake HTTP server.")
    serve_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file.",
    )
    serve_p.add_argument("--host", type=str, default=None)
    serve_p.add_argument(
        "--port", type=int, default=None,
        help="Port to bind (default: $PORT or 8080).",
    )
    serve_p.add_argument("--log-level", type=str, default=None)

    # --- move ---
    move_p = sub.add_parser(
        "move", help="Score a saved /move request body and print the choice.",
    )
    move_p.add_argument("state", help="Path to a JSON game state.")
    move_p.add_argument("--config", type=str, default=None)

    # --- config-dump ---
    dump_p = sub.add_parser(
        "config-dump", help="Write the default configuration as JSON.",
    )
    dump_p.add_argument("output", help="Destination path.")

    return parser


def _load_config(path: str | None):
    from snake_brain.config import ServerConfig

    base = ServerConfig.load(path) if path else ServerConfig()
    return ServerConfig.from_env(base)


def _run_serve(args: argparse.Namespace) -> int:
    import uvicorn

    from snake_brain.config import ServerConfig
    from snake_brain.server.app import create_app

    config = _load_config(args.config)

    overrides = {
        "host": args.host,
        "port": args.port,
        "log_level": args.log_level,
    }
    overrides = {k: v for k, v in overrides.items() if v is not None}
    if overrides:
        d = config.to_dict()
        d.update(overrides)
        config = ServerConfig.from_dict(d)

    logging.getLogger().setLevel(config.log_level.upper())
    uvicorn.run(
        create_app(config),
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
    )
    return 0


def _run_move(args: argparse.Namespace) -> int:
    from pathlib import Path

    from snake_brain.selector import evaluate_moves
    from snake_brain.server.models import GameState

    config = _load_config(args.config)
    state = GameState.model_validate(json.loads(Path(args.state).read_text()))
    board, me = state.snapshot()
    scores = evaluate_moves(board, me, config.weights)
    print(json.dumps({"move": scores.best().token, "scores": scores.as_dict()}))  # noqa: T201
    return 0


def _run_config_dump(args: argparse.Namespace) -> int:
    from snake_brain.config import ServerConfig

    ServerConfig().save(args.output)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``snake-brain`` CLI."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "serve": _run_serve,
        "move": _run_move,
        "config-dump": _run_config_dump,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())

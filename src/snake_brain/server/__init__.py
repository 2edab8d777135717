"""HTTP transport for the move engine."""

from snake_brain.server.app import create_app

__all__ = ["create_app"]

"""Flask JSON API that lets a human play Othello against the engine."""

from .app import create_app

__all__ = ["create_app"]

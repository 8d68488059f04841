"""HTTP API for whistler."""

from .app import create_app

__all__ = ["create_app"]

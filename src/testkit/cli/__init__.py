"""Command-line interface for the testkit demo."""

from .app import app

__all__ = ["app"]

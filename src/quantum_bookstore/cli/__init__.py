"""Command-line interface exports."""

from .app import app

__all__ = ["app"]

"""Command line interface for keymapdoc."""

from .app import app, main


__all__ = ["app", "main"]

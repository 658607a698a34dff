"""CLI command registration."""

import typer

from .parse import parse_keymap


def register_all_commands(app: typer.Typer) -> None:
    """Register all CLI commands with the main app."""
    app.command(name="parse")(parse_keymap)


__all__ = ["register_all_commands"]

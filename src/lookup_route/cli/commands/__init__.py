"""CLI command modules for lookup-route."""

from __future__ import annotations

import typer

from lookup_route.cli.commands.config_cmd import config_command
from lookup_route.cli.commands.lookup import lookup_command


def register_commands(app: typer.Typer) -> None:
    """Attach every lookup-route command to *app*."""
    app.command("lookup")(lookup_command)
    app.command("config")(config_command)


__all__ = ["register_commands"]

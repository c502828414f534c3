"""Show the effective cf target and lookup settings."""

from __future__ import annotations

import json

import typer
from rich.table import Table

from lookup_route.cli.helpers import console
from lookup_route.errors import LookupRouteError
from lookup_route.inventory.config import LookupConfig, cf_config_path, load_cf_target


def config_command(as_json: bool = typer.Option(False, "--json", help="Render configuration as JSON")) -> None:
    """Show the API endpoint and batching settings lookups will use."""
    try:
        cf_target = load_cf_target()
        settings = LookupConfig().get_settings()
    except LookupRouteError as exc:
        typer.secho(f"error: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1) from exc

    payload = {
        "cf_config": str(cf_config_path()),
        "api_endpoint": cf_target.api_endpoint,
        "skip_ssl_validation": cf_target.skip_ssl_validation,
        "organization": cf_target.organization,
        "space": cf_target.space,
        **settings.to_dict(),
    }

    if as_json:
        typer.echo(json.dumps(payload, indent=2, sort_keys=True))
        return

    table = Table(title="lookup-route configuration", show_header=False)
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    for key, value in payload.items():
        table.add_row(key, "-" if value is None else str(value))
    console.print(table)

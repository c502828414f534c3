"""
lookup-route - find the organization, space and applications behind a
Cloud Foundry route.

Usage:
    lookup-route lookup https://api.example.com/v1
    lookup-route lookup -t https://api.example.com/v1
    lookup-route config
"""

__version__ = "0.1.0"

from typing import Optional

import typer

from lookup_route.cli.commands import register_commands
from lookup_route.cli.helpers import configure_logging

app = typer.Typer(
    name="lookup-route",
    help="Identify the application, organization and space a route is pointing to.",
    add_completion=False,
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"lookup-route {__version__}")
        raise typer.Exit()


@app.callback()
def callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log inventory requests to stderr"),
    version: Optional[bool] = typer.Option(
        None, "--version", callback=_version_callback, is_eager=True, help="Show the version and exit"
    ),
) -> None:
    configure_logging(verbose)


register_commands(app)


def main():
    app()


if __name__ == "__main__":
    main()

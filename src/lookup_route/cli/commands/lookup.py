"""Look up the organization, space and applications behind a route."""

from __future__ import annotations

import json
from typing import Any, Optional

import typer

from lookup_route.errors import ContextSwitchFailed, LookupRouteError
from lookup_route.inventory.client import CloudControllerClient
from lookup_route.inventory.config import CfTarget, LookupConfig, LookupSettings, load_cf_target
from lookup_route.report import format_text, to_dict
from lookup_route.resolver.engine import LookupResult, RouteLookup
from lookup_route.targeting import CfCliContextSwitcher, ContextSwitcher


def _print_json(payload: Any) -> None:
    typer.echo(json.dumps(payload, indent=2, sort_keys=True, default=str))


def _run_or_exit(fn):
    try:
        return fn()
    except LookupRouteError as exc:
        typer.secho(f"error: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1) from exc


def build_inventory(target: CfTarget, settings: LookupSettings) -> CloudControllerClient:
    return CloudControllerClient(
        target.api_endpoint,
        target.access_token,
        skip_ssl_validation=target.skip_ssl_validation,
        timeout=settings.timeout_seconds,
    )


def build_context_switcher() -> ContextSwitcher:
    return CfCliContextSwitcher()


def _switch_target(result: LookupResult, switcher: ContextSwitcher, *, err: bool) -> None:
    typer.echo("Targeting an app's organization and space...", err=err)
    try:
        switcher.set_active(result.organization.name, result.space.name)
    except ContextSwitchFailed as exc:
        typer.secho(f"warning: {exc}", fg=typer.colors.YELLOW, err=True)
        return
    typer.echo("Targeting an app's organization and space successful.", err=err)


def lookup_command(
    route_url: str = typer.Argument(..., help="Route URL including the scheme, e.g. https://api.example.com/v1"),
    target: bool = typer.Option(False, "--target", "-t", help="Target the org/space containing this route"),
    as_json: bool = typer.Option(False, "--json", help="Render the result as JSON"),
    batch_size: Optional[int] = typer.Option(
        None, "--batch-size", min=1, max=5000, help="Applications fetched per request"
    ),
    workers: Optional[int] = typer.Option(None, "--workers", min=1, help="Application batches fetched in parallel"),
) -> None:
    """Identify the application(s) a route is pointing to."""

    def _run() -> LookupResult:
        settings = LookupConfig().get_settings()
        if batch_size is not None:
            settings.max_batch_size = batch_size
        if workers is not None:
            settings.max_workers = workers
        settings.validate()

        cf_target = load_cf_target()
        with build_inventory(cf_target, settings) as inventory:
            engine = RouteLookup(
                inventory,
                max_batch_size=settings.max_batch_size,
                max_workers=settings.max_workers,
            )
            return engine.lookup(route_url)

    result = _run_or_exit(_run)

    if as_json:
        _print_json(to_dict(result))
    else:
        for line in format_text(result):
            typer.echo(line)

    if target:
        _switch_target(result, build_context_switcher(), err=as_json)

"""Shared console and logging helpers for CLI commands."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

console = Console()
err_console = Console(stderr=True)

_PACKAGE_LOGGER = "lookup_route"


def configure_logging(verbose: bool = False) -> None:
    """Send lookup_route log records to stderr through rich.

    DEBUG when *verbose*, WARNING otherwise. Safe to call repeatedly.
    """
    logger = logging.getLogger(_PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(console=err_console, show_path=False, markup=False)
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

"""CLI helpers exposed for other modules."""

from .helpers import configure_logging, console, err_console

__all__ = ["configure_logging", "console", "err_console"]

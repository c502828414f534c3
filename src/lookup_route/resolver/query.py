"""Parsing of route URLs supplied on the command line."""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import unquote, urlsplit

from lookup_route.errors import MalformedQuery


@dataclass(frozen=True)
class RouteQuery:
    """A parsed route URL.

    ``hostname`` is lowercased and stripped of any port. ``path`` is the
    percent-decoded URL path with a lone ``/`` treated as no path, since
    platform routes never carry a bare slash.
    """

    raw: str
    hostname: str
    path: str


def parse_query(raw: str) -> RouteQuery:
    """Parse *raw* into a RouteQuery, requiring a scheme."""
    text = raw.strip()
    try:
        parts = urlsplit(text)
        hostname = parts.hostname or ""
    except ValueError as exc:
        raise MalformedQuery(raw) from exc

    if not parts.scheme:
        raise MalformedQuery(raw)

    path = unquote(parts.path)
    if path == "/":
        path = ""

    return RouteQuery(raw=raw, hostname=hostname, path=path)

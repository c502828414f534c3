"""Rendering of lookup results."""

from __future__ import annotations

from typing import Any

from lookup_route.resolver.engine import LookupResult


def format_text(result: LookupResult) -> list[str]:
    """Lines in the cf plugin's ``Bound to:`` layout."""
    lines = [
        "Bound to:",
        f"Organization: {result.organization.name} ({result.organization.guid})",
        f"Space       : {result.space.name} ({result.space.guid})",
    ]
    lines.extend(f"App         : {app.name} ({app.guid})" for app in result.applications)
    return lines


def _process_types(result: LookupResult) -> dict[str, list[str]]:
    types: dict[str, list[str]] = {}
    for destination in result.route.destinations:
        bound = types.setdefault(destination.app_guid, [])
        if destination.process_type not in bound:
            bound.append(destination.process_type)
    return types


def to_dict(result: LookupResult) -> dict[str, Any]:
    route = result.route
    process_types = _process_types(result)
    return {
        "query": result.query.raw,
        "route": {
            "guid": route.guid,
            "host": route.host,
            "domain": result.domain.name,
            "path": route.path,
            "url": route.url,
            "wildcard": route.is_wildcard,
        },
        "organization": {"guid": result.organization.guid, "name": result.organization.name},
        "space": {"guid": result.space.guid, "name": result.space.name},
        "applications": [
            {
                "guid": app.guid,
                "name": app.name,
                "state": app.state,
                "process_types": process_types.get(app.guid, []),
            }
            for app in result.applications
        ],
    }

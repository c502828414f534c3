"""Inventory records read from the Cloud Controller v3 API."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


def _relationship_guid(resource: dict[str, Any], name: str) -> str:
    relationships = resource.get("relationships")
    relation = relationships.get(name) if isinstance(relationships, dict) else None
    data = relation.get("data") if isinstance(relation, dict) else None
    guid = data.get("guid") if isinstance(data, dict) else None
    return str(guid) if guid else ""


@dataclass(frozen=True)
class Domain:
    """A DNS suffix registered with the platform."""
    guid: str
    name: str

    @classmethod
    def from_resource(cls, resource: dict[str, Any]) -> "Domain":
        return cls(guid=str(resource["guid"]), name=str(resource["name"]))


@dataclass(frozen=True)
class Destination:
    """Binding from a route to one application."""
    guid: str
    app_guid: str
    process_type: str = "web"

    @classmethod
    def from_resource(cls, resource: dict[str, Any]) -> "Destination":
        app = resource.get("app") or {}
        process = app.get("process") or {}
        return cls(
            guid=str(resource.get("guid") or ""),
            app_guid=str(app.get("guid") or ""),
            process_type=str(process.get("type") or "web"),
        )


@dataclass(frozen=True)
class Route:
    """A (host, domain, path) tuple and the applications it points to.

    ``host`` is empty for routes on the bare domain and ``*`` for wildcard
    routes. Destination order is the order reported by the platform.
    """
    guid: str
    host: str
    domain_guid: str
    path: str = ""
    url: str = ""
    destinations: tuple[Destination, ...] = field(default_factory=tuple)

    @property
    def is_wildcard(self) -> bool:
        return self.host == "*"

    @property
    def app_guids(self) -> list[str]:
        return [destination.app_guid for destination in self.destinations if destination.app_guid]

    @classmethod
    def from_resource(cls, resource: dict[str, Any]) -> "Route":
        destinations = resource.get("destinations") or []
        return cls(
            guid=str(resource["guid"]),
            host=str(resource.get("host") or ""),
            domain_guid=_relationship_guid(resource, "domain"),
            path=str(resource.get("path") or ""),
            url=str(resource.get("url") or ""),
            destinations=tuple(Destination.from_resource(item) for item in destinations),
        )


@dataclass(frozen=True)
class Application:
    guid: str
    name: str
    space_guid: str
    state: str = ""

    @classmethod
    def from_resource(cls, resource: dict[str, Any]) -> "Application":
        return cls(
            guid=str(resource["guid"]),
            name=str(resource.get("name") or ""),
            space_guid=_relationship_guid(resource, "space"),
            state=str(resource.get("state") or ""),
        )


@dataclass(frozen=True)
class Organization:
    guid: str
    name: str

    @classmethod
    def from_resource(cls, resource: dict[str, Any]) -> "Organization":
        return cls(guid=str(resource["guid"]), name=str(resource.get("name") or ""))


@dataclass(frozen=True)
class Space:
    guid: str
    name: str
    organization_guid: str

    @classmethod
    def from_resource(cls, resource: dict[str, Any]) -> "Space":
        return cls(
            guid=str(resource["guid"]),
            name=str(resource.get("name") or ""),
            organization_guid=_relationship_guid(resource, "organization"),
        )

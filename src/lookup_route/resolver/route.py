"""Resolve a domain, host fragment and path to a route record."""

from __future__ import annotations

import logging

from lookup_route.errors import RouteNotFound
from lookup_route.inventory.client import Inventory
from lookup_route.inventory.models import Domain, Route

logger = logging.getLogger(__name__)

WILDCARD_HOST = "*"


class RouteResolver:
    """Find the route for a host on a domain and path.

    Exact-host routes always win. Wildcard routes are only queried when no
    exact match exists, and the first record in inventory order is used.
    """

    def __init__(self, inventory: Inventory) -> None:
        self.inventory = inventory

    def resolve(self, domain: Domain, host: str, path: str, hostname: str | None = None) -> Route:
        hosts = [host]
        routes = self.inventory.lookup_routes(hosts, domain.guid, path)
        if routes:
            return routes[0]

        logger.debug("No route for host %r on %s%s, trying wildcard", host, domain.name, path)
        hosts.append(WILDCARD_HOST)
        routes = self.inventory.lookup_routes(hosts, domain.guid, path)
        if routes:
            return routes[0]

        raise RouteNotFound(hostname or _hostname(host, domain))


def _hostname(host: str, domain: Domain) -> str:
    return f"{host}.{domain.name}" if host else domain.name

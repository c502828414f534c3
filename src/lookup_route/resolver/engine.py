"""End-to-end route lookup: query -> domain -> route -> applications."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from lookup_route.inventory.client import Inventory
from lookup_route.inventory.models import Application, Domain, Organization, Route, Space
from lookup_route.resolver.domain import DomainResolver
from lookup_route.resolver.enricher import DEFAULT_MAX_BATCH_SIZE, ApplicationEnricher
from lookup_route.resolver.query import RouteQuery, parse_query
from lookup_route.resolver.route import RouteResolver

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LookupResult:
    """Everything known about a resolved route."""
    query: RouteQuery
    domain: Domain
    route: Route
    organization: Organization
    space: Space
    applications: tuple[Application, ...]


class RouteLookup:
    """Chain the domain, route and application stages against an inventory.

    Holds no state between calls: every ``lookup`` re-reads the inventory.
    """

    def __init__(
        self,
        inventory: Inventory,
        *,
        max_batch_size: int = DEFAULT_MAX_BATCH_SIZE,
        max_workers: int = 1,
    ) -> None:
        self.domains = DomainResolver(inventory)
        self.routes = RouteResolver(inventory)
        self.enricher = ApplicationEnricher(inventory, max_batch_size=max_batch_size, max_workers=max_workers)

    def lookup(self, raw_query: str) -> LookupResult:
        query = parse_query(raw_query)
        match = self.domains.resolve(query)
        logger.debug("Resolved %s to host %r on domain %s", query.hostname, match.host, match.domain.name)

        route = self.routes.resolve(match.domain, match.host, query.path, hostname=query.hostname)
        logger.debug("Resolved %s to route %s", query.hostname, route.guid)

        enrichment = self.enricher.enrich(route)
        return LookupResult(
            query=query,
            domain=match.domain,
            route=route,
            organization=enrichment.organization,
            space=enrichment.space,
            applications=enrichment.applications,
        )

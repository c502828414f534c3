"""Route resolution: domain, route and application stages."""

from lookup_route.resolver.domain import DomainMatch, DomainResolver
from lookup_route.resolver.engine import LookupResult, RouteLookup
from lookup_route.resolver.enricher import (
    DEFAULT_MAX_BATCH_SIZE,
    ApplicationEnricher,
    Enrichment,
    plan_batches,
)
from lookup_route.resolver.query import RouteQuery, parse_query
from lookup_route.resolver.route import WILDCARD_HOST, RouteResolver

__all__ = [
    "DEFAULT_MAX_BATCH_SIZE",
    "ApplicationEnricher",
    "DomainMatch",
    "DomainResolver",
    "Enrichment",
    "LookupResult",
    "RouteLookup",
    "RouteQuery",
    "RouteResolver",
    "WILDCARD_HOST",
    "parse_query",
    "plan_batches",
]

"""Resolve a route hostname to a registered domain and host fragment."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from lookup_route.errors import NotADomain, UnknownDomain
from lookup_route.inventory.client import Inventory
from lookup_route.inventory.models import Domain
from lookup_route.resolver.query import RouteQuery, parse_query

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DomainMatch:
    """A registered domain plus the host fragment in front of it."""
    domain: Domain
    host: str


class DomainResolver:
    """Find the registered domain a hostname belongs to.

    The full hostname is tried first; only when it is not itself a
    registered domain is it split once, at the first dot, into a host
    fragment and a candidate domain. Deeper subdomains are not stripped
    further, so ``a.b.example.com`` only ever tests ``b.example.com``.
    """

    def __init__(self, inventory: Inventory) -> None:
        self.inventory = inventory

    def resolve(self, query: RouteQuery | str) -> DomainMatch:
        if isinstance(query, str):
            query = parse_query(query)

        hostname = query.hostname
        if "." not in hostname:
            raise NotADomain(hostname)

        domains = self.inventory.lookup_domains_by_name(hostname)
        if domains:
            logger.debug("Hostname %s is a registered domain", hostname)
            return DomainMatch(domain=domains[0], host="")

        host, _, domain_name = hostname.partition(".")
        logger.debug("Hostname %s is not a domain, trying host %r on %s", hostname, host, domain_name)

        domains = self.inventory.lookup_domains_by_name(domain_name)
        if not domains:
            raise UnknownDomain(domain_name)
        return DomainMatch(domain=domains[0], host=host)

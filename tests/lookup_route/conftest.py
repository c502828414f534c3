"""Shared fixtures for lookup-route tests."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Callable

import pytest

from lookup_route.errors import InventoryError
from lookup_route.inventory.models import (
    Application,
    Destination,
    Domain,
    Organization,
    Route,
    Space,
)


class FakeInventory:
    """In-memory inventory that records every call.

    ``fail_on_app_call`` makes the n-th (1-based) application fetch raise
    InventoryError; ``fail_space_fetch`` does the same for the space fetch.
    Applications are returned in inventory order, not request order.
    """

    def __init__(
        self,
        domains: Sequence[Domain] = (),
        routes: Sequence[Route] = (),
        applications: Sequence[Application] = (),
        spaces: Sequence[Space] = (),
        organizations: Sequence[Organization] = (),
    ) -> None:
        self.domains = list(domains)
        self.routes = list(routes)
        self.applications = list(applications)
        self.spaces = {space.guid: space for space in spaces}
        self.organizations = {org.guid: org for org in organizations}
        self.calls: list[tuple] = []
        self.app_batches: list[list[str]] = []
        self.fail_on_app_call: int | None = None
        self.fail_space_fetch = False

    def __enter__(self) -> "FakeInventory":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        return False

    def lookup_domains_by_name(self, name: str) -> list[Domain]:
        self.calls.append(("domains", name))
        return [domain for domain in self.domains if domain.name == name]

    def lookup_routes(self, hosts: Sequence[str], domain_guid: str, path: str) -> list[Route]:
        self.calls.append(("routes", tuple(hosts), domain_guid, path))
        return [
            route
            for route in self.routes
            if route.host in hosts and route.domain_guid == domain_guid and route.path == path
        ]

    def fetch_applications_by_ids(self, ids: Sequence[str]) -> list[Application]:
        self.calls.append(("apps", tuple(ids)))
        self.app_batches.append(list(ids))
        if self.fail_on_app_call == len(self.app_batches):
            raise InventoryError("apps request failed", status_code=503)
        wanted = set(ids)
        return [app for app in self.applications if app.guid in wanted]

    def fetch_space_with_organization(self, space_guid: str) -> tuple[Space, Organization]:
        self.calls.append(("space", space_guid))
        if self.fail_space_fetch or space_guid not in self.spaces:
            raise InventoryError(f"space {space_guid} not found", status_code=404)
        space = self.spaces[space_guid]
        return space, self.organizations[space.organization_guid]


EXAMPLE_DOMAIN = Domain(guid="domain-example", name="example.com")
EXAMPLE_ORG = Organization(guid="org-1", name="acme")
EXAMPLE_SPACE = Space(guid="space-1", name="production", organization_guid="org-1")


def route_to(guid: str, app_guids: Sequence[str], *, host: str = "api", path: str = "/v1",
             domain: Domain = EXAMPLE_DOMAIN) -> Route:
    return Route(
        guid=guid,
        host=host,
        domain_guid=domain.guid,
        path=path,
        destinations=tuple(
            Destination(guid=f"dest-{app_guid}", app_guid=app_guid) for app_guid in app_guids
        ),
    )


def apps_in_space(count: int, space: Space = EXAMPLE_SPACE) -> list[Application]:
    return [
        Application(guid=f"app-{index:04d}", name=f"app-{index:04d}", space_guid=space.guid)
        for index in range(count)
    ]


@pytest.fixture
def make_inventory() -> Callable[..., FakeInventory]:
    """Factory building a FakeInventory that always knows the example org/space."""

    def _make(
        domains: Sequence[Domain] = (EXAMPLE_DOMAIN,),
        routes: Sequence[Route] = (),
        applications: Sequence[Application] = (),
    ) -> FakeInventory:
        return FakeInventory(
            domains=domains,
            routes=routes,
            applications=applications,
            spaces=[EXAMPLE_SPACE],
            organizations=[EXAMPLE_ORG],
        )

    return _make


@pytest.fixture
def make_route() -> Callable[..., Route]:
    return route_to


@pytest.fixture
def make_apps() -> Callable[..., list[Application]]:
    return apps_in_space


@pytest.fixture
def example_inventory(make_inventory) -> FakeInventory:
    """example.com with route api.example.com/v1 bound to one application."""
    app = Application(guid="app-orders", name="orders-api", space_guid=EXAMPLE_SPACE.guid, state="STARTED")
    route = route_to("route-api", [app.guid])
    return make_inventory(routes=[route], applications=[app])

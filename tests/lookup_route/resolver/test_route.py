"""Tests for route resolution and wildcard fallback."""

from __future__ import annotations

import pytest

from lookup_route.errors import RouteNotFound
from lookup_route.inventory.models import Domain
from lookup_route.resolver.route import WILDCARD_HOST, RouteResolver

DOMAIN = Domain(guid="domain-example", name="example.com")


def test_exact_host_route(make_inventory, make_route) -> None:
    route = make_route("route-api", ["app-1"])
    inventory = make_inventory(routes=[route])

    resolved = RouteResolver(inventory).resolve(DOMAIN, "api", "/v1")

    assert resolved == route
    assert inventory.calls == [("routes", ("api",), DOMAIN.guid, "/v1")]


def test_exact_host_preferred_over_wildcard(make_inventory, make_route) -> None:
    wildcard = make_route("route-wild", ["app-w"], host=WILDCARD_HOST)
    exact = make_route("route-api", ["app-1"])
    inventory = make_inventory(routes=[wildcard, exact])

    resolved = RouteResolver(inventory).resolve(DOMAIN, "api", "/v1")

    assert resolved.guid == "route-api"
    assert len(inventory.calls) == 1


def test_wildcard_fallback(make_inventory, make_route) -> None:
    wildcard = make_route("route-wild", ["app-w"], host=WILDCARD_HOST)
    inventory = make_inventory(routes=[wildcard])

    resolved = RouteResolver(inventory).resolve(DOMAIN, "shop", "/v1")

    assert resolved.guid == "route-wild"
    assert resolved.is_wildcard
    assert inventory.calls[-1] == ("routes", ("shop", WILDCARD_HOST), DOMAIN.guid, "/v1")


def test_first_route_in_inventory_order(make_inventory, make_route) -> None:
    first = make_route("route-a", ["app-1"])
    second = make_route("route-b", ["app-2"])
    inventory = make_inventory(routes=[first, second])

    assert RouteResolver(inventory).resolve(DOMAIN, "api", "/v1").guid == "route-a"


def test_path_must_match(make_inventory, make_route) -> None:
    inventory = make_inventory(routes=[make_route("route-api", ["app-1"], path="/v2")])

    with pytest.raises(RouteNotFound):
        RouteResolver(inventory).resolve(DOMAIN, "api", "/v1")


def test_route_not_found_names_hostname(make_inventory) -> None:
    inventory = make_inventory(routes=[])

    with pytest.raises(RouteNotFound) as exc_info:
        RouteResolver(inventory).resolve(DOMAIN, "api", "", hostname="api.example.com")

    assert exc_info.value.hostname == "api.example.com"
    assert "route 'api.example.com' not found" in str(exc_info.value)
    assert len(inventory.calls) == 2


def test_route_not_found_builds_hostname(make_inventory) -> None:
    with pytest.raises(RouteNotFound) as exc_info:
        RouteResolver(make_inventory()).resolve(DOMAIN, "", "")

    assert exc_info.value.hostname == "example.com"

"""Tests for route URL parsing."""

from __future__ import annotations

import pytest

from lookup_route.errors import MalformedQuery
from lookup_route.resolver.query import parse_query


def test_parse_query_extracts_host_and_path() -> None:
    query = parse_query("https://api.example.com/v1")

    assert query.hostname == "api.example.com"
    assert query.path == "/v1"
    assert query.raw == "https://api.example.com/v1"


def test_parse_query_lowercases_host_and_drops_port() -> None:
    query = parse_query("http://API.Example.COM:8080/Orders")

    assert query.hostname == "api.example.com"
    assert query.path == "/Orders"


def test_parse_query_decodes_escaped_path() -> None:
    assert parse_query("https://api.example.com/a%20b").path == "/a b"
    assert parse_query("https://api.example.com/caf%C3%A9/v1").path == "/caf\u00e9/v1"
    assert parse_query("https://api.example.com/%2F").path == ""


def test_parse_query_treats_root_path_as_no_path() -> None:
    assert parse_query("https://example.com/").path == ""
    assert parse_query("https://example.com").path == ""


@pytest.mark.parametrize("raw", ["api.example.com", "//api.example.com/v1", ""])
def test_parse_query_requires_scheme(raw: str) -> None:
    with pytest.raises(MalformedQuery) as exc_info:
        parse_query(raw)

    assert exc_info.value.query == raw
    assert "scheme" in str(exc_info.value)


def test_parse_query_rejects_invalid_url() -> None:
    with pytest.raises(MalformedQuery):
        parse_query("https://[::1/v1")

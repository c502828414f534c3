"""Cloud Controller v3 inventory client."""

from __future__ import annotations

import logging
import ssl
import threading
from collections.abc import Callable, Sequence
from typing import Any, Optional, Protocol, TypeVar

import httpx
import truststore

from lookup_route.errors import InventoryError
from lookup_route.inventory.models import Application, Domain, Organization, Route, Space

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 30.0

T = TypeVar("T")


class Inventory(Protocol):
    """Read-only view of the platform's domains, routes, apps and spaces."""

    def lookup_domains_by_name(self, name: str) -> list[Domain]:
        """Return the domains whose name is exactly *name*."""
        ...

    def lookup_routes(self, hosts: Sequence[str], domain_guid: str, path: str) -> list[Route]:
        """Return routes matching any of *hosts* on *domain_guid* and *path*."""
        ...

    def fetch_applications_by_ids(self, ids: Sequence[str]) -> list[Application]:
        """Return the applications with the given guids (missing ones are skipped)."""
        ...

    def fetch_space_with_organization(self, space_guid: str) -> tuple[Space, Organization]:
        """Return a space and the organization it belongs to."""
        ...


def _error_detail(response: httpx.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        return ""
    errors = payload.get("errors") if isinstance(payload, dict) else None
    if isinstance(errors, list) and errors and isinstance(errors[0], dict):
        return str(errors[0].get("detail") or errors[0].get("title") or "")
    return ""


class CloudControllerClient:
    """Inventory backed by the Cloud Controller v3 REST API.

    The access token is sent as-is, so it must carry its ``bearer`` prefix
    the way the cf CLI stores it.
    """

    def __init__(
        self,
        api_endpoint: str,
        access_token: str,
        *,
        skip_ssl_validation: bool = False,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.api_endpoint = api_endpoint.rstrip("/")
        self.access_token = access_token
        self.skip_ssl_validation = skip_ssl_validation
        self.timeout = timeout
        self._transport = transport
        self._http_client: Optional[httpx.Client] = None
        self._client_lock = threading.Lock()

    def _get_http_client(self) -> httpx.Client:
        """Get or create HTTP client."""
        with self._client_lock:
            if self._http_client is None:
                verify: bool | ssl.SSLContext
                if self.skip_ssl_validation:
                    verify = False
                else:
                    verify = truststore.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
                self._http_client = httpx.Client(
                    base_url=self.api_endpoint,
                    headers={"Authorization": self.access_token, "Accept": "application/json"},
                    timeout=self.timeout,
                    verify=verify,
                    transport=self._transport,
                )
            return self._http_client

    def close(self):
        """Close HTTP client."""
        with self._client_lock:
            if self._http_client is not None:
                self._http_client.close()
                self._http_client = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def _get(self, url: str, params: Optional[dict[str, str]] = None) -> dict[str, Any]:
        client = self._get_http_client()
        logger.debug("GET %s %s", url, params or "")

        try:
            response = client.get(url, params=params)
        except httpx.HTTPError as exc:
            raise InventoryError(f"Cannot reach {self.api_endpoint}: {exc}") from exc

        if response.status_code == 401:
            raise InventoryError("not authorized, please run 'cf login'", status_code=401)
        if not response.is_success:
            detail = _error_detail(response)
            message = f"{url} returned {response.status_code}"
            if detail:
                message = f"{message}: {detail}"
            raise InventoryError(message, status_code=response.status_code)

        try:
            payload = response.json()
        except ValueError as exc:
            raise InventoryError(f"{url} returned invalid JSON") from exc
        if not isinstance(payload, dict):
            raise InventoryError(f"{url} returned an unexpected payload")
        return payload

    @staticmethod
    def _read(url: str, reader: Callable[[dict[str, Any]], T], resource: dict[str, Any]) -> T:
        try:
            return reader(resource)
        except (KeyError, TypeError, AttributeError) as exc:
            raise InventoryError(f"{url} returned an unexpected payload") from exc

    def _list_all(self, url: str, params: dict[str, str]) -> list[dict[str, Any]]:
        resources: list[dict[str, Any]] = []
        page = self._get(url, params)
        while True:
            items = page.get("resources") or []
            if not isinstance(items, list):
                raise InventoryError(f"{url} returned an unexpected payload")
            resources.extend(item for item in items if isinstance(item, dict))
            pagination = page.get("pagination") or {}
            next_link = pagination.get("next") if isinstance(pagination, dict) else None
            href = next_link.get("href") if isinstance(next_link, dict) else None
            if not href:
                return resources
            page = self._get(href)

    def lookup_domains_by_name(self, name: str) -> list[Domain]:
        url = "/v3/domains"
        resources = self._list_all(url, {"names": name})
        return [self._read(url, Domain.from_resource, item) for item in resources]

    def lookup_routes(self, hosts: Sequence[str], domain_guid: str, path: str) -> list[Route]:
        params = {
            "hosts": ",".join(hosts),
            "domain_guids": domain_guid,
            "paths": path,
        }
        url = "/v3/routes"
        resources = self._list_all(url, params)
        return [self._read(url, Route.from_resource, item) for item in resources]

    def fetch_applications_by_ids(self, ids: Sequence[str]) -> list[Application]:
        if not ids:
            return []
        params = {"guids": ",".join(ids), "per_page": str(len(ids))}
        url = "/v3/apps"
        resources = self._list_all(url, params)
        return [self._read(url, Application.from_resource, item) for item in resources]

    def fetch_space_with_organization(self, space_guid: str) -> tuple[Space, Organization]:
        url = f"/v3/spaces/{space_guid}"
        payload = self._get(url, {"include": "organization"})
        space = self._read(url, Space.from_resource, payload)

        included = payload.get("included") or {}
        organizations = included.get("organizations") if isinstance(included, dict) else None
        for item in organizations or []:
            if isinstance(item, dict) and item.get("guid") == space.organization_guid:
                return space, self._read(url, Organization.from_resource, item)

        raise InventoryError(f"organization of space '{space.name}' ({space.guid}) not included in response")

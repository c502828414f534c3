"""Exception hierarchy for route lookups."""

from __future__ import annotations


class LookupRouteError(Exception):
    """Base exception for lookup-route errors."""
    pass


class ConfigurationError(LookupRouteError):
    """CF target or tool settings are missing or invalid."""
    pass


class InventoryError(LookupRouteError):
    """A Cloud Controller request failed.

    Raised by the inventory client for transport errors and non-2xx
    responses. ``status_code`` is ``None`` when no response was received.
    """

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


class MalformedQuery(LookupRouteError):
    """The route URL has no scheme."""

    def __init__(self, query: str):
        self.query = query
        super().__init__(f"please provide the url including the scheme: '{query}'")


class NotADomain(LookupRouteError):
    """The hostname has no dot-separated suffix to test as a domain."""

    def __init__(self, hostname: str):
        self.hostname = hostname
        super().__init__(f"'{hostname}' is not a domain")


class UnknownDomain(LookupRouteError):
    """Neither the hostname nor its suffix is a registered domain."""

    def __init__(self, domain_name: str):
        self.domain_name = domain_name
        super().__init__(f"route not found, domain '{domain_name}' is unknown")


class RouteNotFound(LookupRouteError):
    """No exact or wildcard route matches."""

    def __init__(self, hostname: str):
        self.hostname = hostname
        super().__init__(f"route '{hostname}' not found")


class RouteUnbound(LookupRouteError):
    """The route has no (or no longer any) application destinations."""

    def __init__(self, route_guid: str):
        self.route_guid = route_guid
        super().__init__("route not bound to any applications")


class EnrichmentFailed(LookupRouteError):
    """Fetching applications or their space/organization failed.

    The underlying error is available as ``cause`` and as ``__cause__``.
    """

    def __init__(self, message: str, cause: BaseException | None = None):
        self.cause = cause
        super().__init__(message)


class ContextSwitchFailed(LookupRouteError):
    """Switching the active org/space failed.

    Reported as a warning; never invalidates a completed lookup.
    """

    def __init__(self, org_name: str, space_name: str, detail: str = ""):
        self.org_name = org_name
        self.space_name = space_name
        self.detail = detail
        message = f"targeting organization '{org_name}' and space '{space_name}' failed"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)

"""Read-only access to the platform's domains, routes, apps and spaces."""

from lookup_route.inventory.client import CloudControllerClient, Inventory
from lookup_route.inventory.models import (
    Application,
    Destination,
    Domain,
    Organization,
    Route,
    Space,
)

__all__ = [
    "Application",
    "CloudControllerClient",
    "Destination",
    "Domain",
    "Inventory",
    "Organization",
    "Route",
    "Space",
]

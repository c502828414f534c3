"""Batched enrichment of the applications bound to a route.

Application records are fetched in bounded batches so that no request
exceeds the Cloud Controller filter-list limit. The organization and space
are then read once, from the first application found; the platform
guarantees that every destination of a route lives in the same space.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass

from lookup_route.errors import EnrichmentFailed, InventoryError, RouteUnbound
from lookup_route.inventory.client import Inventory
from lookup_route.inventory.models import Application, Organization, Route, Space

logger = logging.getLogger(__name__)

DEFAULT_MAX_BATCH_SIZE = 50
MAX_BATCH_SIZE_LIMIT = 5000


@dataclass(frozen=True)
class Enrichment:
    """Organization, space and applications behind one route."""
    organization: Organization
    space: Space
    applications: tuple[Application, ...]


def plan_batches(ids: Sequence[str], max_batch_size: int) -> list[list[str]]:
    """Split *ids* into consecutive batches of at most *max_batch_size*.

    Returns ``ceil(len(ids) / max_batch_size)`` batches; only the last one
    may be short, and an empty input yields no batches.
    """
    if max_batch_size < 1:
        raise ValueError(f"max_batch_size must be at least 1, got {max_batch_size}")
    return [list(ids[start:start + max_batch_size]) for start in range(0, len(ids), max_batch_size)]


def _in_request_order(ids: Sequence[str], applications: Sequence[Application]) -> list[Application]:
    position = {guid: index for index, guid in enumerate(ids)}
    found = [app for app in applications if app.guid in position]
    return sorted(found, key=lambda app: position[app.guid])


class ApplicationEnricher:
    """Fetch the applications, space and organization behind a route.

    With ``max_workers`` of 1 batches are fetched one after another in
    index order. Larger values fetch batches on a bounded thread pool and
    reassemble them by batch index. Either way a single failing batch
    aborts the whole enrichment.
    """

    def __init__(
        self,
        inventory: Inventory,
        max_batch_size: int = DEFAULT_MAX_BATCH_SIZE,
        max_workers: int = 1,
    ) -> None:
        if not 1 <= max_batch_size <= MAX_BATCH_SIZE_LIMIT:
            raise ValueError(
                f"max_batch_size must be between 1 and {MAX_BATCH_SIZE_LIMIT}, got {max_batch_size}"
            )
        if max_workers < 1:
            raise ValueError(f"max_workers must be at least 1, got {max_workers}")
        self.inventory = inventory
        self.max_batch_size = max_batch_size
        self.max_workers = max_workers

    def enrich(self, route: Route) -> Enrichment:
        # Apps bound on several ports/processes are reported once.
        ids = list(dict.fromkeys(route.app_guids))
        if not ids:
            raise RouteUnbound(route.guid)

        batches = plan_batches(ids, self.max_batch_size)
        logger.debug(
            "Fetching %d application(s) of route %s in %d batch(es) of at most %d",
            len(ids),
            route.guid,
            len(batches),
            self.max_batch_size,
        )

        if self.max_workers > 1 and len(batches) > 1:
            results = self._fetch_concurrently(batches)
        else:
            results = [self._fetch_batch(index, batch, len(batches)) for index, batch in enumerate(batches)]

        applications = tuple(app for batch in results for app in batch)
        if not applications:
            raise RouteUnbound(route.guid)

        space, organization = self._fetch_space(applications[0])
        return Enrichment(organization=organization, space=space, applications=applications)

    def _fetch_batch(self, index: int, batch: list[str], total: int) -> list[Application]:
        logger.debug("Fetching application batch %d/%d (%d id(s))", index + 1, total, len(batch))
        try:
            applications = self.inventory.fetch_applications_by_ids(batch)
        except InventoryError as exc:
            raise EnrichmentFailed(
                f"error retrieving apps: batch {index + 1}/{total} failed: {exc}", cause=exc
            ) from exc
        return _in_request_order(batch, applications)

    def _fetch_concurrently(self, batches: list[list[str]]) -> list[list[Application]]:
        slots: list[list[Application]] = [[] for _ in batches]
        workers = min(self.max_workers, len(batches))
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="lookup-route-batch") as pool:
            futures: list[Future[list[Application]]] = [
                pool.submit(self._fetch_batch, index, batch, len(batches))
                for index, batch in enumerate(batches)
            ]
            for index, future in enumerate(futures):
                try:
                    slots[index] = future.result()
                except EnrichmentFailed:
                    for pending in futures:
                        pending.cancel()
                    raise
        return slots

    def _fetch_space(self, application: Application) -> tuple[Space, Organization]:
        if not application.space_guid:
            raise EnrichmentFailed(f"application '{application.name}' ({application.guid}) has no space")

        logger.debug("Fetching space %s of application %s", application.space_guid, application.name)
        try:
            return self.inventory.fetch_space_with_organization(application.space_guid)
        except InventoryError as exc:
            raise EnrichmentFailed(f"error retrieving space: {exc}", cause=exc) from exc

"""
Refresh cycle - orchestrates one pass from the DAA API into the cache.

Cycle stages:
1. Fetch: flight data for the configured carriers
2. Fetch: updates for the same carriers (always attempted)
3. Merge: hand both outcomes to the cache's partial-success merge

A failing fetch is logged and absorbed here so one resource never blocks
the other, and the background loop never dies on upstream errors.
"""

import logging
import threading
import time
from typing import Optional

from gops.cache import FlightDataCache
from gops.config import config
from gops.errors import GopsError
from gops.ingestion.daa_client import DaaClient
from gops.models import FetchOutcome, Resource

logger = logging.getLogger(__name__)


class RefreshCycle:
    """
    One fetch-both-resources-and-update-cache pass.

    Called by the scheduler on every tick and synchronously by request
    handlers on a cache miss. Concurrent runs are allowed; the cache lock
    keeps every write atomic.
    """

    def __init__(
        self,
        client: DaaClient,
        cache: FlightDataCache,
        carriers: Optional[str] = None,
    ):
        self.client = client
        self.cache = cache
        self.carriers = carriers or config.daa.carrier_list

        # State tracking
        self._stats_lock = threading.Lock()
        self._cycle_count: int = 0
        self._error_count: int = 0
        self._last_cycle_time: float = 0

    def _fetch(self, resource: Resource) -> FetchOutcome:
        path = resource.path(self.carriers)
        try:
            document = self.client.fetch(path)
        except GopsError as e:
            logger.error(f'Refresh of {resource.value} failed: {e}')
            return FetchOutcome.failure(resource, e)

        logger.info(f'Refreshed {resource.value}')
        return FetchOutcome.success(resource, document)

    def run(self) -> None:
        """Fetch both resources and merge the outcomes into the cache."""
        flightdata = self._fetch(Resource.FLIGHTDATA)
        updates = self._fetch(Resource.UPDATES)

        self.cache.write_from_cycle(flightdata, updates)

        with self._stats_lock:
            self._cycle_count += 1
            self._last_cycle_time = time.time()
            if not flightdata.ok or not updates.ok:
                self._error_count += 1

    @property
    def stats(self) -> dict:
        """Get refresh statistics."""
        with self._stats_lock:
            return {
                'cycle_count': self._cycle_count,
                'error_count': self._error_count,
                'last_cycle_time': self._last_cycle_time,
            }

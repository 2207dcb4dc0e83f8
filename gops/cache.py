"""
In-memory cache for the two DAA resources.

Holds the most recently fetched flight data and updates documents plus
the time of the last successful refresh. Request handlers read from it;
the refresh cycle writes to it.

Consistency rules:
- One lock guards the entry; it is held only to swap an immutable
  CacheEntry, never across I/O
- Readers always see a whole entry, never a half-applied cycle
- A failed fetch keeps the last good value for that resource
"""

import logging
import threading
from typing import Any, Optional

from gops.models import CacheEntry, FetchOutcome, Resource

logger = logging.getLogger(__name__)


class FlightDataCache:
    """
    Thread-safe holder of the cached DAA documents.

    Writes go through write_from_cycle(), which applies the
    partial-success merge policy.
    """

    def __init__(self):
        self._entry = CacheEntry()
        self._lock = threading.Lock()

        # Statistics
        self._hits = 0
        self._misses = 0

    def snapshot(self) -> CacheEntry:
        """Return the current entry as one consistent snapshot."""
        with self._lock:
            return self._entry

    def read(self, resource: Resource) -> Optional[Any]:
        """Return the cached document for a resource, or None if never fetched."""
        with self._lock:
            document = self._entry.get(resource)
            if document is None:
                self._misses += 1
            else:
                self._hits += 1
        return document

    def read_flightdata(self) -> Optional[Any]:
        return self.read(Resource.FLIGHTDATA)

    def read_updates(self) -> Optional[Any]:
        return self.read(Resource.UPDATES)

    def write_from_cycle(
        self,
        flightdata: FetchOutcome,
        updates: FetchOutcome,
        now: Optional[float] = None,
    ) -> bool:
        """
        Merge one refresh cycle's outcomes into the cache.

        Returns True if at least one resource was updated.
        """
        with self._lock:
            previous = self._entry
            self._entry = previous.merged(flightdata, updates, now=now)
            changed = self._entry is not previous

        if changed:
            logger.info('Cache updated')
        else:
            logger.debug('Cache unchanged, both fetches failed')
        return changed

    def clear(self) -> None:
        """Drop all cached documents."""
        with self._lock:
            self._entry = CacheEntry()

    @property
    def stats(self) -> dict:
        """Get cache statistics."""
        with self._lock:
            entry = self._entry
            hits, misses = self._hits, self._misses

        return {
            'has_flightdata': entry.flightdata is not None,
            'has_updates': entry.updates is not None,
            'last_refreshed_at': entry.last_refreshed_at,
            'age_seconds': round(entry.age_seconds, 1) if entry.age_seconds is not None else None,
            'hits': hits,
            'misses': misses,
            'hit_rate': hits / (hits + misses) if (hits + misses) > 0 else 0,
        }

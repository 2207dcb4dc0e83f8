"""
Cache entry model - the two cached DAA resources plus refresh time.

Design notes:
- CacheEntry is immutable; the cache replaces it wholesale under its lock
- A resource field is None until the first successful fetch
- FetchOutcome carries either a document or the error that prevented it
"""

import time
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Optional


class Resource(str, Enum):
    """
    Upstream resources mirrored in the cache.

    - FLIGHTDATA: operational flight data per carrier (primary)
    - UPDATES: recent flight updates per carrier (secondary)
    """
    FLIGHTDATA = 'flightdata'
    UPDATES = 'updates'

    def path(self, carriers: str) -> str:
        """Upstream path for this resource, relative to the API base URL."""
        if self is Resource.FLIGHTDATA:
            return f'/carrier/{carriers}'
        return f'/updates/carrier/{carriers}'


@dataclass(frozen=True)
class FetchOutcome:
    """Result of fetching one resource during a refresh cycle."""
    resource: Resource
    document: Any = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, resource: Resource, document: Any) -> 'FetchOutcome':
        return cls(resource=resource, document=document)

    @classmethod
    def failure(cls, resource: Resource, error: Exception) -> 'FetchOutcome':
        return cls(resource=resource, error=error)


@dataclass(frozen=True)
class CacheEntry:
    """Snapshot of the cached resources."""
    flightdata: Any = None
    updates: Any = None
    last_refreshed_at: Optional[float] = None

    def get(self, resource: Resource) -> Any:
        if resource is Resource.FLIGHTDATA:
            return self.flightdata
        return self.updates

    def merged(
        self,
        flightdata: FetchOutcome,
        updates: FetchOutcome,
        now: Optional[float] = None,
    ) -> 'CacheEntry':
        """
        Apply one refresh cycle's outcomes.

        Each resource is overwritten only on success; a failure keeps the
        previous value. The timestamp moves only if something succeeded.
        """
        if not flightdata.ok and not updates.ok:
            return self

        return replace(
            self,
            flightdata=flightdata.document if flightdata.ok else self.flightdata,
            updates=updates.document if updates.ok else self.updates,
            last_refreshed_at=now if now is not None else time.time(),
        )

    @property
    def age_seconds(self) -> Optional[float]:
        if self.last_refreshed_at is None:
            return None
        return time.time() - self.last_refreshed_at

"""
Data models for the GOPS backend.

Everything here is an immutable value; mutable state lives in the
credential store and the flight data cache.
"""

from gops.models.credentials import Credentials
from gops.models.cache_entry import CacheEntry, FetchOutcome, Resource

__all__ = [
    'Credentials',
    'CacheEntry',
    'FetchOutcome',
    'Resource',
]

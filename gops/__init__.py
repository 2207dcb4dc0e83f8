"""
GOPS Backend Package.

Credential-gated proxy and cache for the DAA operational flight data API,
built with Flask and requests.

Modules:
    api/          Views for credentials, cached flight data and status
    models/       Immutable values (Credentials, CacheEntry, Resource)
    ingestion/    DAA client, refresh cycle and background scheduler
    services/     Read-with-fallback and save-and-validate operations
    cache.py      Thread-safe in-memory cache with partial-success merge
    credentials.py  Thread-safe credential store
    config.py     Centralized configuration from environment variables
"""

__version__ = '1.0.0'

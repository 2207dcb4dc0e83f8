"""
Flight data service - what the HTTP layer calls into.

Wraps the credential store, DAA client, cache and refresh cycle behind
the two operations clients need:
- read a cached resource, refreshing once on a miss
- save new credentials, validating them and refreshing on success
"""

import logging
from typing import Any, Optional

from gops.cache import FlightDataCache
from gops.credentials import CredentialStore
from gops.errors import Unavailable
from gops.ingestion.daa_client import DaaClient
from gops.ingestion.pipeline import RefreshCycle
from gops.models import Resource

logger = logging.getLogger(__name__)


class FlightDataService:
    """Read-with-fallback and save-and-validate over the shared state."""

    def __init__(
        self,
        credentials: CredentialStore,
        client: DaaClient,
        cache: FlightDataCache,
        cycle: RefreshCycle,
    ):
        self.credentials = credentials
        self.client = client
        self.cache = cache
        self.cycle = cycle

    def read(self, resource: Resource) -> Any:
        """
        Return the cached document for a resource.

        On a miss, runs exactly one synchronous refresh cycle and reads
        again. Raises Unavailable if there is still nothing cached.
        """
        document = self.cache.read(resource)
        if document is not None:
            return document

        logger.info(f'Cache miss for {resource.value}, refreshing now')
        self.cycle.run()

        document = self.cache.read(resource)
        if document is None:
            raise Unavailable()
        return document

    def save_credentials(self, app_id: str, app_key: str) -> bool:
        """
        Store new credentials and check them against upstream.

        Raises InvalidInput (store untouched) if either field is empty.
        The new pair stays stored even when validation fails.
        """
        credentials = self.credentials.set(app_id, app_key)

        if not self.client.validate(credentials.app_id, credentials.app_key):
            logger.warning(f'Credentials {credentials.masked_id()} rejected by DAA')
            return False

        logger.info(f'Credentials {credentials.masked_id()} accepted, refreshing cache')
        self.cycle.run()
        return True

    def check_startup_credentials(self) -> Optional[bool]:
        """Validate credentials loaded from the environment, if any."""
        credentials = self.credentials.get()
        if not credentials.is_configured:
            logger.warning('No credentials in environment, waiting for input on /keys')
            return None

        valid = self.client.validate(credentials.app_id, credentials.app_key)
        if valid:
            logger.info('Credentials from environment are working')
        else:
            logger.warning('Credentials from environment do NOT work, waiting for input on /keys')
        return valid

"""
Thread-safe holder for the active DAA credentials.

Read by every upstream call, written only when an operator saves new
keys. Writes swap an immutable Credentials pair under a lock, giving
last-write-wins semantics with no torn reads. Previous credentials are
discarded; there is no rollback.
"""

import logging
import threading
from typing import Optional

from gops.errors import InvalidInput
from gops.models import Credentials

logger = logging.getLogger(__name__)


class CredentialStore:
    """Process-wide credential pair with atomic replacement."""

    def __init__(self, initial: Optional[Credentials] = None):
        self._credentials = initial or Credentials()
        self._lock = threading.Lock()

    @classmethod
    def from_config(cls, daa_config) -> 'CredentialStore':
        """Create a store pre-populated from APP_ID/APP_KEY, if both are set."""
        if daa_config.has_credentials:
            return cls(Credentials(daa_config.app_id, daa_config.app_key))
        return cls()

    def get(self) -> Credentials:
        with self._lock:
            return self._credentials

    def set(self, app_id: str, app_key: str) -> Credentials:
        """
        Replace the stored pair.

        Raises InvalidInput if either field is empty; the store is left
        unchanged in that case.
        """
        app_id = (app_id or '').strip()
        app_key = (app_key or '').strip()
        if not app_id or not app_key:
            raise InvalidInput()

        credentials = Credentials(app_id=app_id, app_key=app_key)
        with self._lock:
            self._credentials = credentials

        logger.info(f'New credentials saved: {credentials.masked_id()}')
        return credentials

    @property
    def is_configured(self) -> bool:
        return self.get().is_configured

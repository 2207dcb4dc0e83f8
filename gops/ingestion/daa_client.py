"""
DAA operational flight data API client.

Handles communication with the DAA REST API, including:
- Header authentication (app_id / app_key)
- Credential validation against a probe endpoint
- Bounded timeouts (no retries; the next refresh tick is the retry)

Upstream payloads are treated as opaque JSON documents. A 200 response
whose body is null or not valid JSON yields an empty document instead of an
error; this leniency is logged so malformed upstream data is visible.
"""

import logging
from typing import Any, Optional

import requests

from gops.config import DEFAULT_BASE_URL, config
from gops.credentials import CredentialStore
from gops.errors import NoCredentials, TransportError, UpstreamError
from gops.models import Credentials

logger = logging.getLogger(__name__)

# Max characters of an upstream body written to the log
LOG_BODY_LIMIT = 500


def _truncate(text: str, limit: int = LOG_BODY_LIMIT) -> str:
    if len(text) <= limit:
        return text
    return text[:limit] + '...'


class DaaClient:
    """
    Client for the DAA operational API.

    Handles:
    - validate(): probe GET with candidate credentials, never raises
    - fetch(): GET of a resource path with the stored credentials
    """

    def __init__(
        self,
        credentials: CredentialStore,
        base_url: str = DEFAULT_BASE_URL,
        probe_carrier: str = 'EI',
        validate_timeout: float = 8.0,
        fetch_timeout: float = 15.0,
        session: Optional[requests.Session] = None,
    ):
        self.credentials = credentials
        self.base_url = base_url.rstrip('/')
        self.probe_path = f'/carrier/{probe_carrier}'
        self.validate_timeout = validate_timeout
        self.fetch_timeout = fetch_timeout

        self.session = session or requests.Session()

    @classmethod
    def from_config(cls, credentials: CredentialStore) -> 'DaaClient':
        """Create client from application configuration."""
        return cls(
            credentials,
            base_url=config.daa.base_url,
            probe_carrier=config.daa.probe_carrier,
            validate_timeout=config.daa.validate_timeout,
            fetch_timeout=config.daa.fetch_timeout,
        )

    def validate(self, app_id: str, app_key: str) -> bool:
        """
        Check whether upstream accepts a credential pair.

        Returns True only on HTTP 200. Transport errors, timeouts and any
        other status collapse to False.
        """
        url = f'{self.base_url}{self.probe_path}'
        headers = Credentials(app_id, app_key).headers()

        try:
            response = self.session.get(url, headers=headers, timeout=self.validate_timeout)
        except requests.exceptions.RequestException as e:
            logger.error(f'Credential validation request failed: {e}')
            return False

        logger.info(
            f'Credential validation status: {response.status_code} | '
            f'body: {_truncate(response.text)}'
        )
        return response.status_code == 200

    def fetch(self, resource_path: str) -> Any:
        """
        Fetch a resource document using the stored credentials.

        Args:
            resource_path: path relative to the API base, e.g. '/carrier/EI'

        Returns:
            The decoded JSON document ({} if the body was null or not valid JSON)

        Raises:
            NoCredentials: store is not configured
            UpstreamError: upstream answered with a non-200 status
            TransportError: network failure or timeout
        """
        credentials = self.credentials.get()
        if not credentials.is_configured:
            raise NoCredentials()

        url = f'{self.base_url}{resource_path}'
        logger.debug(f'Fetching {url}')

        try:
            response = self.session.get(
                url,
                headers=credentials.headers(),
                timeout=self.fetch_timeout,
            )
        except requests.exceptions.Timeout as e:
            logger.error(f'DAA API timeout for {resource_path}')
            raise TransportError(f'Timeout fetching {resource_path}') from e
        except requests.exceptions.RequestException as e:
            logger.error(f'DAA request failed for {resource_path}: {e}')
            raise TransportError(str(e)) from e

        logger.info(f'DAA status {response.status_code} for {resource_path}')

        if response.status_code != 200:
            logger.warning(f'DAA error body: {_truncate(response.text)}')
            raise UpstreamError(response.status_code, resource_path)

        try:
            document = response.json()
        except ValueError:
            logger.warning(f'DAA returned malformed JSON for {resource_path}, using empty document')
            return {}

        if document is None:
            logger.warning(f'DAA returned null for {resource_path}, using empty document')
            return {}
        return document

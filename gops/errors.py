"""
Exceptions raised by the credential and cache subsystem.

Fetch-level errors (NoCredentials, TransportError, UpstreamError) are
absorbed by the refresh cycle. Only InvalidInput and Unavailable are
expected to reach HTTP callers.
"""

from typing import Optional


class GopsError(Exception):
    """Base exception for GOPS backend errors."""

    pass


class InvalidInput(GopsError):
    """A required field was missing or empty."""

    def __init__(self, message: str = 'Both app_id and app_key are required'):
        super().__init__(message)


class NoCredentials(GopsError):
    """An upstream fetch was attempted with no credentials configured."""

    def __init__(self, message: str = 'No DAA credentials configured'):
        super().__init__(message)


class TransportError(GopsError):
    """Network failure or timeout talking to the upstream API."""

    pass


class UpstreamError(GopsError):
    """Upstream answered with a non-200 status."""

    def __init__(self, status: int, path: Optional[str] = None):
        self.status = status
        self.path = path
        msg = f'DAA returned {status}'
        if path:
            msg += f' for {path}'
        super().__init__(msg)


class Unavailable(GopsError):
    """No cached data and the fallback refresh did not produce any."""

    def __init__(self, message: str = 'Cannot get data, check credentials'):
        super().__init__(message)

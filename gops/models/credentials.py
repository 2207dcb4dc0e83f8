"""
Credentials model - the DAA app_id/app_key pair.

Instances are immutable; the credential store swaps whole pairs so a
reader can never observe an id from one save and a key from another.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Credentials:
    """DAA API credential pair. Both empty means unconfigured."""
    app_id: str = ''
    app_key: str = ''

    @property
    def is_configured(self) -> bool:
        return bool(self.app_id and self.app_key)

    def masked_id(self) -> str:
        """First four characters of app_id, safe for logging."""
        if not self.app_id:
            return 'none'
        return self.app_id[:4] + '...'

    def headers(self) -> dict:
        """Request headers expected by the DAA API."""
        return {
            'app_id': self.app_id,
            'app_key': self.app_key,
            'Accept': 'application/json',
        }

    def __repr__(self) -> str:
        return f'Credentials(app_id={self.masked_id()!r}, configured={self.is_configured})'

"""
Configuration management for the GOPS backend.

Loads settings from environment variables (and an optional .env file)
with sensible defaults. All configuration is centralized here to avoid
magic strings scattered throughout the codebase.
"""

import os
from dataclasses import dataclass, field
from typing import Tuple

from dotenv import load_dotenv

load_dotenv()

DEFAULT_BASE_URL = 'https://api.daa.ie/dub/aops/flightdata/operational/v1'
DEFAULT_CARRIERS = 'EI,BA,IB,VY,I2,AA,T2'


def _parse_carriers(value: str) -> Tuple[str, ...]:
    """Parse 'EI,BA,...' into a tuple of upper-case carrier codes."""
    carriers = tuple(c.strip().upper() for c in value.split(',') if c.strip())
    return carriers or tuple(DEFAULT_CARRIERS.split(','))


@dataclass(frozen=True)
class DaaConfig:
    """DAA operational API configuration."""
    app_id: str = field(default_factory=lambda: os.getenv('APP_ID', '').strip())
    app_key: str = field(default_factory=lambda: os.getenv('APP_KEY', '').strip())
    base_url: str = field(
        default_factory=lambda: os.getenv('DAA_BASE_URL', DEFAULT_BASE_URL).rstrip('/')
    )
    carriers: Tuple[str, ...] = field(
        default_factory=lambda: _parse_carriers(os.getenv('DAA_CARRIERS', DEFAULT_CARRIERS))
    )
    probe_carrier: str = field(default_factory=lambda: os.getenv('DAA_PROBE_CARRIER', 'EI'))

    # Hard caps, never retried
    validate_timeout: float = field(
        default_factory=lambda: float(os.getenv('DAA_VALIDATE_TIMEOUT', '8'))
    )
    fetch_timeout: float = field(
        default_factory=lambda: float(os.getenv('DAA_FETCH_TIMEOUT', '15'))
    )

    @property
    def has_credentials(self) -> bool:
        return bool(self.app_id and self.app_key)

    @property
    def carrier_list(self) -> str:
        return ','.join(self.carriers)


@dataclass(frozen=True)
class RefreshConfig:
    """Background cache refresh settings."""
    interval_seconds: float = field(
        default_factory=lambda: float(os.getenv('REFRESH_INTERVAL_SECONDS', '60'))
    )


@dataclass(frozen=True)
class AppConfig:
    """Main application configuration."""
    daa: DaaConfig
    refresh: RefreshConfig

    # Flask settings
    secret_key: str
    debug: bool
    port: int


def load_config() -> AppConfig:
    """Load and validate all configuration."""
    refresh = RefreshConfig()
    if refresh.interval_seconds <= 0:
        raise ValueError('REFRESH_INTERVAL_SECONDS must be positive')

    return AppConfig(
        daa=DaaConfig(),
        refresh=refresh,
        secret_key=os.getenv('SECRET_KEY', 'dev-key-change-in-prod'),
        debug=os.getenv('FLASK_DEBUG', '0') == '1',
        port=int(os.getenv('PORT', '3000')),
    )


# Singleton instance
config = load_config()

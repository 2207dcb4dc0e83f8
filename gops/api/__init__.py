"""
API module for the GOPS backend.

Provides endpoints for:
- Cached flight data and updates
- Credential entry and validation
- System status
"""

from gops.api.flights import flights_bp
from gops.api.keys import keys_bp
from gops.api.metrics import metrics_bp

__all__ = ['flights_bp', 'keys_bp', 'metrics_bp']

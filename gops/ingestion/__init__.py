"""
Data ingestion module for the GOPS backend.

Handles calling the DAA API and keeping the in-memory cache fresh.
"""

from gops.ingestion.daa_client import DaaClient
from gops.ingestion.pipeline import RefreshCycle
from gops.ingestion.scheduler import RefreshScheduler

__all__ = ['DaaClient', 'RefreshCycle', 'RefreshScheduler']

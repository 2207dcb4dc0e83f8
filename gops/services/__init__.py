"""
Service layer consumed by the HTTP endpoints.
"""

from gops.services.flight_data import FlightDataService

__all__ = ['FlightDataService']

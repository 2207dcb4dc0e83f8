"""
Flight data API endpoints.

Provides endpoints for:
- GET /flightdata - Cached DAA flight data for the configured carriers
- GET /updates - Cached DAA flight updates for the configured carriers

Both return the upstream JSON document as-is. If nothing is cached and a
fallback refresh fails, they answer 500 with a human-readable error.
"""

import logging

from flask import Blueprint, current_app, jsonify

from gops.errors import Unavailable
from gops.models import Resource

logger = logging.getLogger(__name__)

flights_bp = Blueprint('flights', __name__)


def _serve(resource: Resource):
    service = current_app.config['FLIGHT_DATA_SERVICE']
    try:
        document = service.read(resource)
    except Unavailable as e:
        logger.warning(f'{resource.value} unavailable: {e}')
        return jsonify({'error': str(e)}), 500
    return jsonify(document)


@flights_bp.route('/flightdata', methods=['GET'])
def get_flightdata():
    """Return cached flight data, refreshing once if the cache is empty."""
    return _serve(Resource.FLIGHTDATA)


@flights_bp.route('/updates', methods=['GET'])
def get_updates():
    """Return cached flight updates, refreshing once if the cache is empty."""
    return _serve(Resource.UPDATES)

"""
Status API endpoint.

Provides endpoints for:
- GET /api/status - Refresh loop, cache and credential status
"""

import logging
import time
from datetime import datetime, timezone

from flask import Blueprint, current_app, jsonify

from gops.config import config

logger = logging.getLogger(__name__)

metrics_bp = Blueprint('metrics', __name__, url_prefix='/api')


@metrics_bp.route('/status', methods=['GET'])
def get_system_status():
    """
    Get system health and status information.

    Returns:
    - Refresh scheduler and cycle status
    - Cache statistics
    - Whether credentials are configured
    - Configuration info
    """
    start_time = time.perf_counter()

    service = current_app.config['FLIGHT_DATA_SERVICE']
    scheduler = current_app.config.get('REFRESH_SCHEDULER')
    scheduler_stats = scheduler.stats if scheduler else {'running': False}

    cache_stats = service.cache.stats
    configured = service.credentials.is_configured
    has_data = cache_stats['has_flightdata'] or cache_stats['has_updates']

    query_time_ms = (time.perf_counter() - start_time) * 1000

    return jsonify({
        'status': 'healthy' if (configured and has_data) else 'degraded',
        'credentials': {
            'configured': configured,
            'app_id': service.credentials.get().masked_id(),
        },
        'refresh': {
            **scheduler_stats,
            **service.cycle.stats,
        },
        'cache': cache_stats,
        'config': {
            'base_url': config.daa.base_url,
            'carriers': list(config.daa.carriers),
        },
        'timestamp': datetime.now(timezone.utc).isoformat(),
        'query_time_ms': round(query_time_ms, 2),
    })

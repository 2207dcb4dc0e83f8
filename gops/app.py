"""
GOPS Flask Application.

Main entry point for the web application. Initializes:
- Credential store (from APP_ID / APP_KEY)
- DAA client, cache and refresh cycle
- Background cache refresh loop
- Views and API routes

Usage:
    python -m gops.app

Or with gunicorn (single worker; the cache lives in process memory):
    gunicorn 'gops.app:create_app()'
"""

import logging
from typing import Optional

from flask import Flask
from flask_cors import CORS

from gops.api import flights_bp, keys_bp, metrics_bp
from gops.cache import FlightDataCache
from gops.config import config
from gops.credentials import CredentialStore
from gops.ingestion import DaaClient, RefreshCycle, RefreshScheduler
from gops.services import FlightDataService

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if config.debug else logging.INFO,
    format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S',
)
logger = logging.getLogger(__name__)


def build_service(
    credentials: Optional[CredentialStore] = None,
    client: Optional[DaaClient] = None,
) -> FlightDataService:
    """Wire the credential store, client, cache and refresh cycle together."""
    credentials = credentials or CredentialStore.from_config(config.daa)
    client = client or DaaClient.from_config(credentials)
    cache = FlightDataCache()
    cycle = RefreshCycle(client, cache)
    return FlightDataService(credentials, client, cache, cycle)


def create_app(
    start_refresh: bool = True,
    service: Optional[FlightDataService] = None,
) -> Flask:
    """
    Application factory for Flask.

    Args:
        start_refresh: Whether to validate env credentials and start the
                       background refresh loop. Set to False for testing.
        service: Pre-built service (tests inject one with a fake client).

    Returns:
        Configured Flask application instance.
    """
    app = Flask(__name__)

    # Configuration
    app.config['SECRET_KEY'] = config.secret_key

    # Enable CORS for the JSON endpoints
    CORS(app, resources={
        r'/flightdata': {'origins': '*'},
        r'/updates': {'origins': '*'},
        r'/api/*': {'origins': '*'},
    })

    service = service or build_service()
    app.config['FLIGHT_DATA_SERVICE'] = service

    # Register blueprints
    app.register_blueprint(keys_bp)
    app.register_blueprint(flights_bp)
    app.register_blueprint(metrics_bp)

    credentials = service.credentials.get()
    logger.info(
        f'Credentials from environment: app_id={"set" if credentials.app_id else "MISSING"}, '
        f'app_key={"set" if credentials.app_key else "MISSING"}'
    )

    if start_refresh:
        service.check_startup_credentials()

        scheduler = RefreshScheduler(service.cycle, interval=config.refresh.interval_seconds)
        scheduler.start_background()
        app.config['REFRESH_SCHEDULER'] = scheduler
    else:
        app.config['REFRESH_SCHEDULER'] = None

    # -------------------------------------------------------------------------
    # Health and error handlers
    # -------------------------------------------------------------------------

    @app.route('/health')
    def health():
        """Simple health check endpoint."""
        return {'status': 'ok'}

    @app.errorhandler(404)
    def not_found(e):
        return {'error': 'Not found'}, 404

    @app.errorhandler(500)
    def server_error(e):
        logger.error(f'Server error: {e}')
        return {'error': 'Internal server error'}, 500

    return app


def run_development_server():
    """Run the development server."""
    app = create_app()

    port = config.port

    logger.info(f'Starting GOPS backend on http://localhost:{port}')
    logger.info(f'If the credentials do not work, go to http://localhost:{port}/keys')

    app.run(
        host='0.0.0.0',
        port=port,
        debug=config.debug,
        use_reloader=False,  # Reloader would start a second refresh thread
        threaded=True,
    )


if __name__ == '__main__':
    run_development_server()

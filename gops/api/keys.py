"""
Credential management views.

Provides endpoints for:
- GET / - Home page with credential status and links
- GET /keys - Form to enter app_id and app_key
- POST /save-keys - Store and validate new credentials
    Body: {"app_id": str, "app_key": str}
    Response: {"success": bool, "error"?: str}
"""

import logging

from flask import Blueprint, current_app, jsonify, render_template, request

from gops.errors import InvalidInput

logger = logging.getLogger(__name__)

keys_bp = Blueprint('keys', __name__)


@keys_bp.route('/', methods=['GET'])
def home():
    """Serve home/status page."""
    service = current_app.config['FLIGHT_DATA_SERVICE']
    return render_template('home.html', configured=service.credentials.is_configured)


@keys_bp.route('/keys', methods=['GET'])
def keys_form():
    """Serve credentials entry form."""
    return render_template('keys.html')


@keys_bp.route('/save-keys', methods=['POST'])
def save_keys():
    """
    Save new credentials and validate them against the DAA API.

    Credentials stay stored even if validation fails; the operator is
    expected to submit a working pair.
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    app_id = data.get('app_id')
    app_key = data.get('app_key')
    if not isinstance(app_id, str) or not isinstance(app_key, str):
        app_id = app_key = ''

    service = current_app.config['FLIGHT_DATA_SERVICE']
    try:
        valid = service.save_credentials(app_id, app_key)
    except InvalidInput as e:
        return jsonify({'success': False, 'error': str(e)}), 400

    if not valid:
        return jsonify({'success': False, 'error': 'Credentials rejected by DAA API'})

    return jsonify({'success': True})

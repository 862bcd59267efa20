import time
from datetime import datetime, timezone
from flask import Blueprint, jsonify, current_app

health_bp = Blueprint('health', __name__)

_STARTED_AT = time.monotonic()

API_ENDPOINTS = {
    'GET /api/weather': 'Get all weather data',
    'GET /api/weather/:city': 'Get weather data by city',
    'POST /api/weather': 'Add new weather data',
    'PUT /api/weather/:id': 'Update weather data by ID',
    'DELETE /api/weather/:id': 'Delete weather data by ID',
    'GET /api/weather/search/:query': 'Search weather data by city name',
}


@health_bp.route('/')
def index():
    """API index."""
    return jsonify({
        'message': 'Weather API Server',
        'version': current_app.config.get('API_VERSION', '1.0.0'),
        'endpoints': API_ENDPOINTS,
        'dashboard': '/dashboard',
    })


@health_bp.route('/health')
def health():
    return jsonify({
        'status': 'OK',
        'timestamp': datetime.now(timezone.utc).isoformat(),
        'uptime': round(time.monotonic() - _STARTED_AT, 3),
    })


@health_bp.route('/ready')
def ready():
    db_ok = current_app.extensions['weather_store'].ping()
    status = 'ready' if db_ok else 'not_ready'
    code = 200 if db_ok else 503
    return jsonify({'status': status, 'db': db_ok}), code

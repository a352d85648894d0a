"""
Status Routes - Health check and backend self-test
"""

import time
from datetime import datetime, timezone
from flask import jsonify, current_app
from utils.notifications import email_configured
from . import status_bp

PROCESS_STARTED_AT = time.monotonic()


def get_uptime():
    """Seconds since this process imported the status blueprint"""
    return time.monotonic() - PROCESS_STARTED_AT


@status_bp.route('/health')
def health_check():
    return jsonify({'ok': True, 'uptime': get_uptime()})


@status_bp.route('/test')
def self_test():
    """Debugging endpoint: confirms the backend is reachable and how it is configured"""
    return jsonify({
        'ok': True,
        'message': 'Backend is working!',
        'timestamp': datetime.now(timezone.utc).isoformat(),
        'emailConfigured': email_configured(),
        'backend': current_app.config.get('CONTACT_BACKEND'),
    })

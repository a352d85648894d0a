"""
Status Blueprint - Liveness and diagnostics
Handles: Health check, backend self-test
"""

from flask import Blueprint

status_bp = Blueprint('status', __name__, url_prefix='')

from . import routes

"""
Contact Blueprint - Contact form relay
Handles: Validating submissions and relaying them to the configured backend
"""

from flask import Blueprint

contact_bp = Blueprint('contact', __name__, url_prefix='')

from . import routes

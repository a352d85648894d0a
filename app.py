"""
Portfolio Contact Relay - Main Application Entry Point
Application Factory Pattern

This module initializes the Flask application with its extensions,
configuration and middleware. Route handling is delegated to blueprints.
"""

import os
from flask import Flask
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException
from config import get_config
from extensions import db, cors
from utils.helpers import json_error
from utils.security import add_security_headers

# Import all blueprints
from blueprints.contact import contact_bp
from blueprints.status import status_bp


def create_app(config_name=None):
    """
    Application Factory Pattern
    Creates and configures Flask application instance

    Args:
        config_name (str): Configuration environment name (optional,
            defaults to FLASK_ENV)

    Returns:
        Flask: Configured Flask application instance
    """

    app = Flask(__name__)

    # Load configuration
    conf = get_config(config_name)
    app.config.from_object(conf)
    app.logger.setLevel(str(app.config.get('LOG_LEVEL') or 'INFO').upper())

    # Initialize extensions with app
    initialize_extensions(app)

    # Register blueprints
    register_blueprints(app)

    # Register error handlers
    register_error_handlers(app)

    # Register request/response hooks
    register_hooks(app)

    app.logger.info(
        f"✓ Contact relay ready (backend: {app.config.get('CONTACT_BACKEND')})")
    return app


def initialize_extensions(app):
    """Initialize Flask extensions with the app instance"""
    db.init_app(app)

    origins = app.config.get('ALLOWED_ORIGINS') or []
    if origins and '*' not in origins:
        cors.init_app(app, origins=origins)
    else:
        # Allow all if not specified
        cors.init_app(app)

    if app.config.get('CONTACT_BACKEND') != 'database':
        return

    # Create tables if they don't exist; the relay retries on demand
    with app.app_context():
        try:
            db.create_all()
            # Verify connection
            db.session.execute(text('SELECT 1'))
            app.extensions['contacts_table_ready'] = True
            app.logger.info("✓ Database initialized successfully")
        except SQLAlchemyError as e:
            app.logger.warning(
                f"✗ Database initialization failed, contacts will not be saved until it is reachable: {str(e)}")


def register_blueprints(app):
    """Register all application blueprints"""
    app.register_blueprint(contact_bp)
    app.register_blueprint(status_bp)


def register_error_handlers(app):
    """Register JSON error handlers"""

    @app.errorhandler(400)
    def bad_request(e):
        return json_error('Bad request', 400)

    @app.errorhandler(404)
    def page_not_found(e):
        return json_error('Not found', 404)

    @app.errorhandler(405)
    def method_not_allowed(e):
        return json_error('Method not allowed', 405)

    @app.errorhandler(413)
    def payload_too_large(e):
        return json_error('Payload too large', 413)

    @app.errorhandler(500)
    def internal_server_error(e):
        original = getattr(e, 'original_exception', None) or e
        app.logger.error(f"Unhandled error in request pipeline: {str(original)}")
        return json_error('Internal server error', 500)

    @app.errorhandler(HTTPException)
    def http_error(e):
        return json_error(e.description or e.name, e.code)


def register_hooks(app):
    """Register request/response hooks"""
    app.after_request(add_security_headers)


if __name__ == '__main__':
    # Get environment
    env = os.environ.get('FLASK_ENV', 'development')

    # Create app
    app = create_app(env)

    # Run development server
    app.run(
        host='0.0.0.0',
        port=app.config.get('PORT', 5000),
        debug=(env == 'development')
    )

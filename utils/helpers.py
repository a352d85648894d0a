"""
Helpers Module - Utility functions shared by blueprints and error handlers
"""

from flask import current_app, jsonify


def json_error(message, status):
    """Build the ``{ok: false, error}`` response every failure path returns"""
    return jsonify({'ok': False, 'error': message}), status


def client_error_message(message, detail=None):
    """Append the underlying error for the client when EXPOSE_ERROR_DETAILS is on"""
    if detail and current_app.config.get('EXPOSE_ERROR_DETAILS'):
        return f"{message} ({detail})"
    return message


__all__ = ['json_error', 'client_error_message']

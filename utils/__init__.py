"""
Utils Package - Centralized utility modules initialization
"""

from .helpers import json_error, client_error_message
from .notifications import get_smtp_config, email_configured, send_email
from .relays import (
    RelayError,
    relay_submission,
    save_to_database,
    send_via_email,
    send_via_form_api
)
from .security import get_client_ip, check_rate_limit, add_security_headers
from .validation import (
    ContactValidationError,
    is_valid_email,
    is_valid_phone,
    sanitize_input,
    validate_contact
)

__all__ = [
    # Helpers
    'json_error',
    'client_error_message',

    # Notifications
    'get_smtp_config',
    'email_configured',
    'send_email',

    # Relays
    'RelayError',
    'relay_submission',
    'save_to_database',
    'send_via_email',
    'send_via_form_api',

    # Security
    'get_client_ip',
    'check_rate_limit',
    'add_security_headers',

    # Validation
    'ContactValidationError',
    'is_valid_email',
    'is_valid_phone',
    'sanitize_input',
    'validate_contact'
]

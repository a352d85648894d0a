"""
Contact Routes - Public contact form endpoint
Handles: Validation, spam protection, relay to database / email / form API
"""

from flask import request, jsonify, current_app
from werkzeug.exceptions import BadRequest
from utils.helpers import json_error, client_error_message
from utils.relays import RelayError, GENERIC_FAILURE, relay_submission
from utils.security import check_rate_limit, get_client_ip
from utils.validation import ContactValidationError, validate_contact
from . import contact_bp

HONEYPOT_FIELD = 'website'


def _read_payload():
    """Decode the request body; JSON is expected but plain form posts work too"""
    if request.is_json:
        if not request.get_data(cache=True):
            return {}
        # Raises BadRequest on malformed JSON
        return request.get_json()
    return request.form.to_dict()


@contact_bp.route('/contact', methods=['POST'])
def contact():
    """Validate a contact submission and relay it exactly once"""
    try:
        payload = _read_payload()
    except BadRequest as e:
        current_app.logger.warning(f"Invalid JSON payload received: {e.description}")
        return json_error('Invalid JSON payload', 400)

    # Honeypot spam protection
    if isinstance(payload, dict) and payload.get(HONEYPOT_FIELD):
        current_app.logger.warning(f"Honeypot triggered from {get_client_ip()}")
        return jsonify({'ok': True})

    if not check_rate_limit('contact'):
        current_app.logger.warning(f"Rate limit exceeded for {get_client_ip()}")
        return json_error('Too many requests. Please try again later.', 429)

    try:
        submission = validate_contact(payload)
    except ContactValidationError as e:
        current_app.logger.warning(f"Contact form rejected: {str(e)}")
        return json_error(str(e), 400)

    try:
        relay_submission(submission)
    except RelayError as e:
        return json_error(client_error_message(e.message, e.detail), 500)
    except Exception as e:
        current_app.logger.exception("Error handling /contact")
        return json_error(client_error_message(GENERIC_FAILURE, str(e)), 500)

    return jsonify({'ok': True, 'message': 'Message submitted successfully.'})

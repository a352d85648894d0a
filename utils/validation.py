"""
Validation Module - Normalization and validation of contact submissions
"""

import re

from models import NAME_MAX_LENGTH, EMAIL_MAX_LENGTH, MESSAGE_MIN_LENGTH, MESSAGE_MAX_LENGTH

EMAIL_PATTERN = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]{2,}$', re.IGNORECASE)
PHONE_PATTERN = re.compile(r'^[0-9+()\s-]{7,20}$')
NEWLINES_PATTERN = re.compile(r'[\r\n]+')

REQUIRED_FIELDS = ('name', 'email', 'message')


class ContactValidationError(ValueError):
    """Raised when a submission is rejected; the message is safe to show to the client."""


def is_non_empty_string(value):
    return isinstance(value, str) and len(value.strip()) > 0


def is_valid_email(email):
    return bool(EMAIL_PATTERN.fullmatch(email or ''))


def is_valid_phone(phone):
    return bool(PHONE_PATTERN.fullmatch(phone or ''))


def sanitize_input(value):
    """Collapse line breaks into a single space and trim, so header-bound fields stay on one line"""
    return NEWLINES_PATTERN.sub(' ', str(value)).strip()


def validate_contact(payload):
    """
    Validate and normalize a raw contact form payload.

    Args:
        payload: Decoded request body. Anything other than a dict is treated
            as an empty submission.

    Returns:
        dict: ``name``, ``email``, ``message`` and, when supplied, ``phone``.

    Raises:
        ContactValidationError: with the first failing rule's message.
    """
    if not isinstance(payload, dict):
        payload = {}

    if not all(is_non_empty_string(payload.get(field)) for field in REQUIRED_FIELDS):
        raise ContactValidationError('All fields (name, email, message) are required.')

    name = sanitize_input(payload['name'])
    email = sanitize_input(payload['email']).lower()
    message = payload['message'].strip()

    if len(name) > NAME_MAX_LENGTH:
        raise ContactValidationError('Name is too long.')
    if len(email) > EMAIL_MAX_LENGTH or not is_valid_email(email):
        raise ContactValidationError('Invalid email format.')
    if len(message) < MESSAGE_MIN_LENGTH:
        raise ContactValidationError('Message is too short.')
    if len(message) > MESSAGE_MAX_LENGTH:
        raise ContactValidationError('Message is too long.')

    submission = {'name': name, 'email': email, 'message': message}

    phone = payload.get('phone')
    if phone is not None:
        phone = str(phone).strip()
        if phone:
            if not is_valid_phone(phone):
                raise ContactValidationError('Invalid phone number.')
            submission['phone'] = phone

    return submission


__all__ = [
    'ContactValidationError',
    'is_non_empty_string',
    'is_valid_email',
    'is_valid_phone',
    'sanitize_input',
    'validate_contact',
]

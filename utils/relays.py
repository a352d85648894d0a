"""
Relays Module - Deliver a validated contact submission to the configured backend
Handles: database insert, SMTP email, third-party form API
"""

import smtplib
import requests
from flask import current_app
from sqlalchemy.exc import SQLAlchemyError
from extensions import db
from models import ContactSubmission
from .notifications import email_configured, send_email

GENERIC_FAILURE = 'Failed to send message. Please try again later.'


class RelayError(Exception):
    """A downstream failure. ``message`` is client-safe, ``detail`` is not."""

    def __init__(self, message, detail=None):
        super().__init__(message)
        self.message = message
        self.detail = detail


def ensure_contacts_table():
    """Create the contacts table on first use if startup could not reach the database"""
    if current_app.extensions.get('contacts_table_ready'):
        return
    try:
        db.create_all()
    except SQLAlchemyError as e:
        current_app.logger.warning(f"Database unavailable, cannot save contact: {str(e)}")
        raise RelayError('Database unavailable. Please try again later.', str(e))
    current_app.extensions['contacts_table_ready'] = True
    current_app.logger.info("Contacts table ready (on-demand)")


def save_to_database(submission):
    """Insert one row into the contacts table and return its id"""
    ensure_contacts_table()

    contact = ContactSubmission(
        name=submission['name'],
        email=submission['email'],
        message=submission['message'],
        phone=submission.get('phone'),
    )
    try:
        db.session.add(contact)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Failed to save contact to database: {str(e)}")
        raise RelayError('Failed to save contact to database.', str(e))

    current_app.logger.info(
        f"Contact form saved to DB (id={contact.id}) from {contact.name} ({contact.email})")
    return contact.id


def _email_body(submission):
    lines = [
        f"Name: {submission['name']}",
        f"Email: {submission['email']}",
    ]
    if submission.get('phone'):
        lines.append(f"Phone: {submission['phone']}")
    lines.extend(['', submission['message']])
    return '\n'.join(lines)


def send_via_email(submission):
    """Email the submission to the site owner, replying to the sender"""
    recipient = (current_app.config.get('CONTACT_RECIPIENT_EMAIL')
                 or current_app.config.get('EMAIL_USER'))
    if not email_configured() or not recipient:
        current_app.logger.error("Email relay selected but EMAIL_USER/EMAIL_PASS are not set")
        raise RelayError('Email service is not configured.')

    try:
        send_email(
            recipient=recipient,
            subject=f"New contact form submission from {submission['name']}",
            body=_email_body(submission),
            reply_to=submission['email'],
        )
    except smtplib.SMTPAuthenticationError as e:
        current_app.logger.error(f"SMTP authentication failed: {str(e)}")
        raise RelayError('Email authentication failed. Please check email configuration.', str(e))
    except TimeoutError as e:
        current_app.logger.error(f"SMTP timeout: {str(e)}")
        raise RelayError('Email server timeout. Please try again.', str(e))
    except (smtplib.SMTPConnectError, smtplib.SMTPServerDisconnected, ConnectionError) as e:
        current_app.logger.error(f"SMTP connection error: {str(e)}")
        raise RelayError('Unable to connect to email server.', str(e))
    except (smtplib.SMTPException, OSError) as e:
        current_app.logger.error(f"Error sending contact email: {str(e)}")
        raise RelayError(GENERIC_FAILURE, str(e))

    current_app.logger.info(
        f"Contact form emailed to {recipient} from {submission['name']} ({submission['email']})")


def send_via_form_api(submission):
    """Forward the submission to a Web3Forms-compatible form API"""
    access_key = current_app.config.get('FORM_API_ACCESS_KEY')
    url = current_app.config.get('FORM_API_URL')
    if not access_key or not url:
        current_app.logger.error("Form API relay selected but FORM_API_ACCESS_KEY is not set")
        raise RelayError('Form service is not configured.')

    payload = {
        'access_key': access_key,
        'subject': f"New contact form submission from {submission['name']}",
        'from_name': submission['name'],
        **submission,
    }
    try:
        response = requests.post(
            url,
            json=payload,
            headers={'Accept': 'application/json'},
            timeout=current_app.config.get('FORM_API_TIMEOUT', 10))
    except requests.Timeout as e:
        current_app.logger.error(f"Form API timeout: {str(e)}")
        raise RelayError('Form service timeout. Please try again.', str(e))
    except requests.RequestException as e:
        current_app.logger.error(f"Form API request error: {str(e)}")
        raise RelayError('Unable to reach form service.', str(e))

    try:
        body = response.json()
    except ValueError:
        body = {}
    if not response.ok or (isinstance(body, dict) and body.get('success') is False):
        detail = body.get('message') if isinstance(body, dict) else None
        current_app.logger.error(
            f"Form API rejected submission: {response.status_code} {detail or ''}".rstrip())
        raise RelayError('Form service rejected the submission.',
                         detail or f"HTTP {response.status_code}")

    current_app.logger.info(
        f"Contact form forwarded to form API from {submission['name']} ({submission['email']})")


RELAYS = {
    'database': save_to_database,
    'email': send_via_email,
    'formapi': send_via_form_api,
}


def relay_submission(submission):
    """Deliver the submission exactly once through the backend named by CONTACT_BACKEND"""
    backend = current_app.config.get('CONTACT_BACKEND', 'database')
    relay = RELAYS.get(backend)
    if relay is None:
        current_app.logger.error(f"Unknown CONTACT_BACKEND: {backend!r}")
        raise RelayError(GENERIC_FAILURE, f"unknown contact backend {backend!r}")
    return relay(submission)


__all__ = [
    'RelayError',
    'RELAYS',
    'ensure_contacts_table',
    'relay_submission',
    'save_to_database',
    'send_via_email',
    'send_via_form_api',
]

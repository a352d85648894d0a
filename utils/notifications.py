"""
Notifications Module - SMTP email delivery
"""

import smtplib
from email.mime.text import MIMEText
from email.mime.multipart import MIMEMultipart
from flask import current_app


def get_smtp_config():
    """Load SMTP settings from the application config"""
    return {
        'host': current_app.config.get('SMTP_HOST', ''),
        'port': current_app.config.get('SMTP_PORT', 587),
        'email': current_app.config.get('EMAIL_USER', ''),
        'password': current_app.config.get('EMAIL_PASS', ''),
        'timeout': current_app.config.get('SMTP_TIMEOUT', 10),
    }


def email_configured():
    """True when SMTP credentials are present"""
    smtp_config = get_smtp_config()
    return bool(smtp_config.get('email') and smtp_config.get('password'))


def send_email(recipient, subject, body, reply_to=None):
    """
    Send a plain-text email using the configured SMTP account.

    Unlike the fire-and-forget notifications this is synchronous: the caller
    needs the outcome, so SMTP and socket errors propagate.

    Args:
        recipient (str): Email recipient
        subject (str): Email subject
        body (str): Email body
        reply_to (str, optional): Address replies should go to
    """
    smtp_config = get_smtp_config()

    msg = MIMEMultipart('alternative')
    msg['Subject'] = subject
    msg['From'] = smtp_config['email']
    msg['To'] = recipient
    if reply_to:
        msg['Reply-To'] = reply_to
    msg.attach(MIMEText(body, 'plain', 'utf-8'))

    with smtplib.SMTP(smtp_config['host'],
                      int(smtp_config['port']),
                      timeout=smtp_config['timeout']) as server:
        server.starttls()
        server.login(smtp_config['email'], smtp_config['password'])
        server.send_message(msg)

    current_app.logger.info(f"Email sent to {recipient} via {smtp_config['host']}")


__all__ = ['get_smtp_config', 'email_configured', 'send_email']

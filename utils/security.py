"""
Security Module - Client IP detection, rate limiting and response headers
"""

import time
from flask import request, current_app


def get_client_ip():
    """Get real client IP address"""
    forwarded = request.headers.get('X-Forwarded-For', '')
    if forwarded:
        return forwarded.split(',')[0].strip()
    return request.remote_addr or 'unknown'


def check_rate_limit(endpoint='contact'):
    """Check if IP is within rate limit"""
    requests_by_ip = current_app.extensions.setdefault('rate_limit_requests', {})
    max_requests = current_app.config.get('RATE_LIMIT_MAX_REQUESTS', 10)
    window = current_app.config.get('RATE_LIMIT_WINDOW', 60)
    client_ip = get_client_ip()
    current_time = time.time()

    # Clean old requests outside the window; forget clients with none left
    for ip in list(requests_by_ip):
        recent = [(ts, ep) for ts, ep in requests_by_ip[ip] if current_time - ts < window]
        if recent:
            requests_by_ip[ip] = recent
        else:
            del requests_by_ip[ip]
    history = requests_by_ip.get(client_ip, [])

    # Check if limit exceeded
    endpoint_requests = [ep for ts, ep in history if ep == endpoint]
    if len(endpoint_requests) >= max_requests:
        requests_by_ip[client_ip] = history
        return False

    # Add current request
    history.append((current_time, endpoint))
    requests_by_ip[client_ip] = history
    return True


def add_security_headers(response):
    """Add security headers to all responses"""
    response.headers['X-Content-Type-Options'] = 'nosniff'
    response.headers['X-Frame-Options'] = 'DENY'
    response.headers['Referrer-Policy'] = 'no-referrer'
    return response


__all__ = [
    'get_client_ip',
    'check_rate_limit',
    'add_security_headers'
]

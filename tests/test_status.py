import logging

import pytest

import config
from app import create_app


def test_health(client):
    response = client.get('/health')

    assert response.status_code == 200
    data = response.get_json()
    assert data['ok'] is True
    assert isinstance(data['uptime'], float)
    assert data['uptime'] >= 0


def test_self_test_reports_configuration(app, client):
    data = client.get('/test').get_json()

    assert data['ok'] is True
    assert data['message'] == 'Backend is working!'
    assert data['emailConfigured'] is False
    assert data['backend'] == 'database'
    assert 'T' in data['timestamp']

    app.config.update(EMAIL_USER='me@example.com', EMAIL_PASS='secret')
    assert client.get('/test').get_json()['emailConfigured'] is True


def test_unknown_route_is_json_404(client):
    response = client.get('/nope')

    assert response.status_code == 404
    assert response.get_json() == {'ok': False, 'error': 'Not found'}


def test_wrong_method_is_json_405(client):
    response = client.get('/contact')

    assert response.status_code == 405
    assert response.get_json()['ok'] is False


def test_oversized_body_rejected(client):
    response = client.post('/contact', data='x' * (1024 * 1024 + 1),
                           content_type='application/json')

    assert response.status_code == 413
    assert response.get_json() == {'ok': False, 'error': 'Payload too large'}


def test_security_headers(client):
    response = client.get('/health')

    assert response.headers['X-Content-Type-Options'] == 'nosniff'


def test_cors_allows_any_origin_by_default(client):
    response = client.get('/health', headers={'Origin': 'https://visitor.example'})

    assert response.headers['Access-Control-Allow-Origin'] in ('*', 'https://visitor.example')


@pytest.fixture
def restricted_app(monkeypatch):
    monkeypatch.setattr(config.TestingConfig, 'ALLOWED_ORIGINS', ['https://portfolio.example'])
    return create_app('testing')


def test_cors_restricted_to_allowed_origins(restricted_app):
    client = restricted_app.test_client()

    allowed = client.get('/health', headers={'Origin': 'https://portfolio.example'})
    assert allowed.headers['Access-Control-Allow-Origin'] == 'https://portfolio.example'

    denied = client.get('/health', headers={'Origin': 'https://evil.example'})
    assert 'Access-Control-Allow-Origin' not in denied.headers


def test_unhandled_error_is_json_500(app):
    app.config['PROPAGATE_EXCEPTIONS'] = False

    @app.route('/explode')
    def explode():
        raise RuntimeError('boom')

    response = app.test_client().get('/explode')

    assert response.status_code == 500
    assert response.get_json() == {'ok': False, 'error': 'Internal server error'}


def test_log_level_name_is_case_insensitive(monkeypatch):
    monkeypatch.setattr(config.TestingConfig, 'LOG_LEVEL', 'debug')

    app = create_app('testing')

    assert app.logger.level == logging.DEBUG

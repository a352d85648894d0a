import pytest

from app import create_app
from extensions import db


@pytest.fixture
def app():
    app = create_app('testing')
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def valid_payload():
    return {
        'name': 'Ada Lovelace',
        'email': 'Ada@Example.com',
        'message': 'I would like to talk about a project.',
    }

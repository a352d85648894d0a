import pytest
from sqlalchemy.exc import IntegrityError

from extensions import db
from migrations.create_contacts_table import create_contacts_table
from models import ContactSubmission


def test_defaults_and_serialization(app):
    contact = ContactSubmission(name='Ada', email='ada@example.com', message='Hello there')
    db.session.add(contact)
    db.session.commit()

    assert len(contact.id) == 36
    data = contact.to_dict()
    assert data['name'] == 'Ada'
    assert data['createdAt'] is not None
    assert 'phone' not in data


def test_table_rejects_short_message(app):
    db.session.add(ContactSubmission(name='Ada', email='ada@example.com', message='hey'))

    with pytest.raises(IntegrityError):
        db.session.commit()
    db.session.rollback()


def test_table_rejects_empty_name(app):
    db.session.add(ContactSubmission(name='', email='ada@example.com', message='Hello there'))

    with pytest.raises(IntegrityError):
        db.session.commit()
    db.session.rollback()


def test_create_contacts_table_is_rerunnable(app):
    first = create_contacts_table()
    second = create_contacts_table()

    assert first == second
    assert 'idx_contacts_email' in second
    assert 'idx_contacts_created_at' in second

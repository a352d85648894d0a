"""
Migration Script: create the contacts table
Creates the table, its length check constraints and its indexes
(email, created_at). Safe to re-run: existing tables and indexes are kept.

Usage:
    python migrations/create_contacts_table.py
    DATABASE_URL=postgresql://... python migrations/create_contacts_table.py
"""

import os
import sys
from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app import create_app
from extensions import db
from models import ContactSubmission


def create_contacts_table():
    """Ensure the contacts table and its indexes exist, returning the index names"""
    table = ContactSubmission.__table__
    table.create(bind=db.engine, checkfirst=True)
    # create(checkfirst=True) skips the indexes of a table that already exists
    for index in table.indexes:
        index.create(bind=db.engine, checkfirst=True)

    indexes = sorted(ix['name'] for ix in inspect(db.engine).get_indexes(table.name))
    print(f"Ensured table '{table.name}' (indexes: {', '.join(indexes) or 'none'}).")
    return indexes


def main():
    app = create_app()
    with app.app_context():
        print(f"Connecting to {db.engine.url.render_as_string(hide_password=True)}")
        try:
            create_contacts_table()
        except SQLAlchemyError as e:
            print(f"Failed to create contacts table: {str(e)}", file=sys.stderr)
            return 2
    return 0


if __name__ == '__main__':
    sys.exit(main())

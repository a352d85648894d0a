from extensions import db
from datetime import datetime
import uuid

NAME_MAX_LENGTH = 100
EMAIL_MAX_LENGTH = 255
PHONE_MAX_LENGTH = 20
MESSAGE_MIN_LENGTH = 5
MESSAGE_MAX_LENGTH = 5000


class ContactSubmission(db.Model):
    """A contact form submission. Written once, never updated or deleted."""
    __tablename__ = 'contacts'
    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = db.Column(db.String(NAME_MAX_LENGTH), nullable=False)
    email = db.Column(db.String(EMAIL_MAX_LENGTH), nullable=False)
    phone = db.Column(db.String(PHONE_MAX_LENGTH))
    message = db.Column(db.Text, nullable=False)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    __table_args__ = (
        db.CheckConstraint(
            f'length(name) BETWEEN 1 AND {NAME_MAX_LENGTH}',
            name='ck_contacts_name_length'),
        db.CheckConstraint(
            f'length(message) BETWEEN {MESSAGE_MIN_LENGTH} AND {MESSAGE_MAX_LENGTH}',
            name='ck_contacts_message_length'),
        db.Index('idx_contacts_email', 'email'),
        db.Index('idx_contacts_created_at', 'created_at'),
    )

    def to_dict(self):
        data = {
            'id': self.id,
            'name': self.name,
            'email': self.email,
            'message': self.message,
            'createdAt': self.created_at.isoformat() if self.created_at else None,
        }
        if self.phone:
            data['phone'] = self.phone
        return data

    def __repr__(self):
        return f'<ContactSubmission {self.id} {self.email}>'

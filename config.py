import os
from pathlib import Path
from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent
load_dotenv(BASE_DIR / '.env')


def _split_origins(raw):
    return [origin.strip() for origin in (raw or '').split(',') if origin.strip()]


class Config:
    """Base configuration"""

    # Flask Settings
    SECRET_KEY = os.environ.get('SECRET_KEY', 'CHANGE-THIS-SECRET-KEY-IN-PRODUCTION')
    PORT = int(os.environ.get('PORT', '5000'))
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').strip().upper()

    # Which relay handles contact submissions: database, email or formapi
    CONTACT_BACKEND = os.environ.get('CONTACT_BACKEND', 'database').strip().lower()

    # Database Settings
    _database_url = os.environ.get('DATABASE_URL')
    if _database_url and _database_url.startswith("postgres://"):
        _database_url = _database_url.replace("postgres://", "postgresql://", 1)

    SQLALCHEMY_DATABASE_URI = _database_url or 'sqlite:///portfolio.db'
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_recycle': 3600,
        'pool_pre_ping': True,
    }
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Email Settings
    SMTP_HOST = os.environ.get('SMTP_HOST', 'smtp.gmail.com')
    SMTP_PORT = int(os.environ.get('SMTP_PORT', '587'))
    SMTP_TIMEOUT = float(os.environ.get('SMTP_TIMEOUT', '10'))
    EMAIL_USER = os.environ.get('EMAIL_USER')
    EMAIL_PASS = os.environ.get('EMAIL_PASS')
    CONTACT_RECIPIENT_EMAIL = os.environ.get('CONTACT_RECIPIENT_EMAIL') or EMAIL_USER

    # Third-party form API Settings
    FORM_API_URL = os.environ.get('FORM_API_URL', 'https://api.web3forms.com/submit')
    FORM_API_ACCESS_KEY = os.environ.get('FORM_API_ACCESS_KEY')
    FORM_API_TIMEOUT = float(os.environ.get('FORM_API_TIMEOUT', '10'))

    # Request Settings
    MAX_CONTENT_LENGTH = 1024 * 1024  # 1MB
    ALLOWED_ORIGINS = _split_origins(os.environ.get('ALLOWED_ORIGINS'))
    RATE_LIMIT_MAX_REQUESTS = int(os.environ.get('RATE_LIMIT_MAX_REQUESTS', '10'))
    RATE_LIMIT_WINDOW = int(os.environ.get('RATE_LIMIT_WINDOW', '60'))

    # JSON Settings
    JSON_AS_ASCII = False

    # Append the underlying error to 5xx messages sent to the client
    EXPOSE_ERROR_DETAILS = False


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    TESTING = False
    EXPOSE_ERROR_DETAILS = True


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    TESTING = False
    EXPOSE_ERROR_DETAILS = False


class TestingConfig(Config):
    """Testing configuration"""
    DEBUG = True
    TESTING = True
    CONTACT_BACKEND = 'database'
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    # For in-memory SQLite during tests, keep engine options empty so the
    # single StaticPool connection is shared by every session.
    SQLALCHEMY_ENGINE_OPTIONS = {}
    EXPOSE_ERROR_DETAILS = False
    ALLOWED_ORIGINS = []
    EMAIL_USER = None
    EMAIL_PASS = None
    CONTACT_RECIPIENT_EMAIL = None
    FORM_API_ACCESS_KEY = None


# Select configuration based on environment
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config(config_name=None):
    """Get configuration by name, falling back to FLASK_ENV"""
    env = config_name or os.environ.get('FLASK_ENV', 'development')
    return config.get(env, config['default'])

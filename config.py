"""
Flask application configuration classes.
Provides configuration for development, production, and testing environments.
"""

import os
from datetime import timedelta


class Config:
    """Base configuration class with common settings."""

    # Secret key for session management and CSRF protection
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production'

    # Supabase backend (database, auth and admin API)
    SUPABASE_URL = os.environ.get('SUPABASE_URL') or 'http://localhost:54321'
    SUPABASE_SERVICE_ROLE_KEY = os.environ.get('SUPABASE_SERVICE_ROLE_KEY') or ''
    SUPABASE_ANON_KEY = os.environ.get('SUPABASE_ANON_KEY') or ''

    # Optional callable (url, key) -> client; defaults to supabase.create_client
    SUPABASE_CLIENT_FACTORY = None

    # Role claim (app_metadata.role) required to use the console
    ADMIN_ROLE = os.environ.get('ADMIN_ROLE') or 'admin'

    # Security settings
    WTF_CSRF_ENABLED = True
    WTF_CSRF_TIME_LIMIT = 3600  # CSRF token expires after 1 hour
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'
    SESSION_COOKIE_SECURE = False  # Set to True in production with HTTPS
    PERMANENT_SESSION_LIFETIME = timedelta(
        hours=int(os.environ.get('SESSION_TIMEOUT_HOURS', 8))
    )

    # Dashboard
    RECENT_ACTIVITY_LIMIT = 10

    # Timezone used for display
    TIMEZONE = 'Africa/Nairobi'

    # Application settings
    APP_NAME = 'Safari Admin'
    APP_VERSION = '1.0.0'


class DevelopmentConfig(Config):
    """Development environment configuration."""

    DEBUG = True
    TESTING = False
    TEMPLATES_AUTO_RELOAD = True
    SESSION_COOKIE_SECURE = False
    WTF_CSRF_SSL_STRICT = False


class ProductionConfig(Config):
    """Production environment configuration."""

    DEBUG = False
    TESTING = False
    SESSION_COOKIE_SECURE = os.environ.get('SESSION_COOKIE_SECURE', 'true').lower() == 'true'
    WTF_CSRF_SSL_STRICT = SESSION_COOKIE_SECURE

    SECRET_KEY = os.environ.get('SECRET_KEY') or Config.SECRET_KEY

    PREFERRED_URL_SCHEME = 'https' if SESSION_COOKIE_SECURE else 'http'

    @classmethod
    def validate(cls) -> None:
        """Validate that required production environment variables are set."""
        secret_key = os.environ.get('SECRET_KEY')
        if not secret_key:
            raise ValueError("SECRET_KEY environment variable must be set in production")
        if len(secret_key) < 32:
            raise ValueError("SECRET_KEY must be at least 32 characters in production")
        if not os.environ.get('SUPABASE_URL'):
            raise ValueError("SUPABASE_URL environment variable must be set in production")
        if not os.environ.get('SUPABASE_SERVICE_ROLE_KEY'):
            raise ValueError("SUPABASE_SERVICE_ROLE_KEY environment variable must be set in production")


class TestConfig(Config):
    """Testing environment configuration."""

    TESTING = True
    DEBUG = True
    WTF_CSRF_ENABLED = False  # Disable CSRF for tests
    SECRET_KEY = 'test-secret-key'
    SUPABASE_URL = 'http://supabase.test'
    SUPABASE_SERVICE_ROLE_KEY = 'test-service-role-key'
    SUPABASE_ANON_KEY = 'test-anon-key'


# Configuration dictionary
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'test': TestConfig,
    'default': DevelopmentConfig
}

"""
Supabase client management.
Handles client creation per application context and teardown.
"""

from flask import g, current_app
from supabase import Client, create_client


def _client_factory():
    """Return the configured client factory (tests install a fake one)."""
    return current_app.config.get('SUPABASE_CLIENT_FACTORY') or create_client


def get_db() -> Client:
    """
    Get the service-role Supabase client for the current app context.

    The client is created once per context and cached on flask.g.

    Returns:
        supabase.Client: Client with service-role privileges
    """
    if 'db' not in g:
        g.db = _client_factory()(
            current_app.config['SUPABASE_URL'],
            current_app.config['SUPABASE_SERVICE_ROLE_KEY']
        )
    return g.db


def get_auth_client() -> Client:
    """
    Create a short-lived client for end-user sign-in.

    Uses the anon key so the user's tokens never attach to the
    service-role client cached on flask.g.

    Returns:
        supabase.Client: Fresh client with the anon key
    """
    key = current_app.config['SUPABASE_ANON_KEY'] or current_app.config['SUPABASE_SERVICE_ROLE_KEY']
    return _client_factory()(current_app.config['SUPABASE_URL'], key)


def close_db(e=None):
    """
    Drop the cached client.

    Args:
        e: Exception if any (from Flask teardown context)
    """
    g.pop('db', None)

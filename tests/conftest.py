"""
Pytest configuration and fixtures.
Every test runs against an in-memory fake of the Supabase backend.
"""

import os
import pytest
from flask import g, has_app_context
from flask.testing import FlaskClient

from fake_backend import FakeSupabase

os.environ['FLASK_ENV'] = 'test'

ADMIN_EMAIL = 'admin@safari.example.com'
ADMIN_PASSWORD = 'admin-password'


class SessionUserClient(FlaskClient):
    """
    Test client that resolves current_user from the session on every request.

    Requests share the fixture's app context, so Flask-Login's cached
    user on `g` is dropped before each one.
    """

    def open(self, *args, **kwargs):
        if has_app_context():
            g.pop('_login_user', None)
        return super().open(*args, **kwargs)


@pytest.fixture
def backend():
    """Fresh fake backend with one admin account."""
    fake = FakeSupabase()
    fake.admin_user = fake.add_user(
        ADMIN_EMAIL, ADMIN_PASSWORD,
        app_metadata={'role': 'admin'},
        user_metadata={'full_name': 'Amina Otieno'}
    )
    return fake


@pytest.fixture
def app(backend):
    """Create test application wired to the fake backend."""
    from app import create_app

    app = create_app('test')
    app.config['SUPABASE_CLIENT_FACTORY'] = lambda url, key: backend
    app.test_client_class = SessionUserClient

    with app.app_context():
        yield app


@pytest.fixture
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture
def authenticated_client(client):
    """Test client signed in as the admin account."""
    response = client.post('/login', data={
        'email': ADMIN_EMAIL,
        'password': ADMIN_PASSWORD
    })
    assert response.status_code == 302
    return client


@pytest.fixture
def hotel_with_attraction(app):
    """The 'Mara Lodge' aggregate with one nearby attraction."""
    from models.hotel import create_hotel

    return create_hotel({
        'name': 'Mara Lodge',
        'rating': 4.5,
        'nearby_attractions': [
            {'id': 'client-supplied', 'name': 'Reserve Gate', 'distance': '2km', 'type': 'Park'}
        ]
    })

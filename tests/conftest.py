"""
Shared fixtures: an app on a throwaway SQLite database with the nudge
scheduler disabled.
"""

import pytest

from config.database import configure_database, init_database
from webapp.app import create_app

TEST_SECRET = "test-secret-at-least-32-bytes-long"


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite:///{tmp_path / 'tracker.db'}"


@pytest.fixture
def db(database_url):
    """Configured database for testing the stores without the web app."""
    configure_database(database_url)
    init_database()
    return database_url


@pytest.fixture
def app(database_url):
    app = create_app({
        'TESTING': True,
        'DATABASE_URL': database_url,
        'JWT_SECRET': TEST_SECRET,
        'NUDGE_SWEEP_ENABLED': False,
        'TRACKER_TIMEZONE': 'UTC',
    })
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


def make_user(client, email="a@x.com", name="Ada", password="pw123"):
    """Register a user through the API and return (token, user)."""
    response = client.post('/api/auth/register', json={
        'name': name,
        'course': 'Computer Science',
        'college': 'Example College',
        'email': email,
        'password': password,
    })
    assert response.status_code == 200, response.get_json()
    data = response.get_json()
    return data['token'], data['user']


def auth_header(token):
    return {'Authorization': f"Bearer {token}"}

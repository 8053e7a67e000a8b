"""Shared fixtures for the bookmark API tests."""
import pytest

from bookmark_api import create_app
from bookmark_api.config import TestingConfig
from bookmark_api.utils.database import BookmarkDatabase


@pytest.fixture
def app(tmp_path):
    """Application backed by a fresh database file."""
    class Config(TestingConfig):
        DATABASE_PATH = str(tmp_path / 'bookmarks.db')

    app = create_app(Config)
    yield app
    app.database.close()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def database(tmp_path):
    db = BookmarkDatabase(str(tmp_path / 'store.db'))
    yield db
    db.close()


@pytest.fixture
def created(client):
    """A bookmark created through the API."""
    response = client.post('/bookmarks', json={
        'url': 'https://example.com/article',
        'title': 'An article',
        'description': 'Worth reading',
    })
    assert response.status_code == 201
    return response.get_json()

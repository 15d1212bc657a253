import os
import sys

import pytest

# Ensure project root is on sys.path so 'app', 'config', and 'playlist_manager' import correctly
_TESTS_DIR = os.path.dirname(__file__)
_ROOT_DIR = os.path.abspath(os.path.join(_TESTS_DIR, os.pardir))
if _ROOT_DIR not in sys.path:
    sys.path.insert(0, _ROOT_DIR)

from tests.support.helpers import login, register
from tests.support.stubs import FakeYouTubeHttp


@pytest.fixture
def storage_paths(tmp_path):
    """Per-test user store document and uploads directory."""
    return {
        "USERS_DB_PATH": str(tmp_path / "database" / "users.json"),
        "UPLOADS_DIR": str(tmp_path / "uploads"),
    }


@pytest.fixture
def app(storage_paths):
    import app as app_module

    application = app_module.create_app(
        {
            **storage_paths,
            "TESTING": True,
            "SECRET_KEY": "test-secret",
            "YOUTUBE_API_KEY": "test-key",
            "STORE_SERIALIZE_WRITES": False,
        }
    )
    yield application


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def store(app):
    return app.extensions["user_store"]


@pytest.fixture
def youtube_http(app):
    fake = FakeYouTubeHttp()
    app.extensions["youtube_search"].http = fake
    return fake


@pytest.fixture
def auth_client(client):
    """Test client with a registered and logged-in user 'alice'."""
    assert register(client).status_code == 200
    assert login(client).status_code == 200
    return client

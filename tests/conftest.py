"""Shared fixtures for the Lumen tests."""
import pytest

from lumen.server import app as flask_app


@pytest.fixture
def app():
    flask_app.config.update(TESTING=True)
    yield flask_app


@pytest.fixture
def client(app):
    return app.test_client()

# tests/unit/routes/conftest.py
"""Fixtures for admin route tests.

The app is created with the in-memory content API client, so no request
leaves the process.
"""

import pytest

from portfolio import create_app
from portfolio.settings import Settings


@pytest.fixture(scope="function")
def app(fake_rpc):
    """Create a test application bound to the fake content API."""
    settings = Settings.load()
    app = create_app(settings=settings, rpc_client=fake_rpc)
    app.config["TESTING"] = True
    return app


@pytest.fixture(scope="function")
def client(app):
    """Create a test client."""
    return app.test_client()

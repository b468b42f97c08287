"""Pytest configuration and shared fixtures."""

import pytest
from pathlib import Path
import sys

# Ensure project root is on path
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture(autouse=True)
def default_auth_settings(monkeypatch):
    """Every test starts with the parity (non-enforcing) auth configuration."""
    from config import settings

    monkeypatch.setattr(settings, "auth_required", False)
    monkeypatch.setattr(settings, "webapp_show_errors", False)


@pytest.fixture(scope="session")
def app():
    """API Flask application with TESTING enabled."""
    from app import app as flask_app

    flask_app.config["TESTING"] = True
    return flask_app


@pytest.fixture
def client(app):
    """API test client."""
    return app.test_client()


@pytest.fixture(scope="session")
def webapp_app():
    """Frontend Flask application with TESTING enabled."""
    from webapp.server import app as flask_app

    flask_app.config["TESTING"] = True
    return flask_app


@pytest.fixture
def webapp_client(webapp_app):
    """Frontend test client."""
    return webapp_app.test_client()

"""Flask route registration."""

from routes.health import register_health
from routes.data import register_data


def register_all_routes(app):
    """Register all route modules on the Flask app."""
    register_health(app)
    register_data(app)

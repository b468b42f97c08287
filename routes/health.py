"""Root health check route."""

from constants import Messages, Routes
from core.logger import logger
from routes.helpers import text_response


def register_health(app):
    """Register root health check route."""

    @app.route(Routes.ROOT, methods=["GET"])
    def root():
        """Liveness check; query string and headers are ignored."""
        logger.debug("Root health check")
        return text_response(Messages.HELLO, 200)

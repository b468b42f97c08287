"""Data creation routes."""

from flask import request

from constants import Messages, Routes
from core.logger import logger
from routes.helpers import require_bearer_token, text_response


def register_data(app):
    """Register data-related routes."""

    @app.route(Routes.SOME_ENDPOINT, methods=["POST"])
    @require_bearer_token
    def some_endpoint():
        """Accept any payload. The body is not parsed or stored."""
        logger.info(f"Data received ({request.content_length or 0} bytes)")
        return text_response(Messages.DATA_CREATED, 201)

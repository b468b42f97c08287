"""Shared helpers for routes."""

import secrets
from functools import wraps
from typing import Optional

from flask import make_response, request

from config import settings
from constants import ContentTypes, Messages
from core.exceptions import AuthorizationError
from core.logger import logger


def text_response(body: str, status: int):
    """Build a plain-text response."""
    response = make_response(body, status)
    response.headers["Content-Type"] = ContentTypes.TEXT
    return response


def extract_bearer_token(auth_header: Optional[str]) -> Optional[str]:
    """Return the token from an 'Authorization: Bearer <token>' header value."""
    if not auth_header:
        return None
    scheme, _, token = auth_header.strip().partition(" ")
    if scheme.lower() != "bearer":
        return None
    return token.strip() or None


def check_bearer_token(auth_header: Optional[str], secret: Optional[str]) -> str:
    """
    Validate a bearer token against the configured secret.

    Args:
        auth_header: Raw Authorization header value (may be None)
        secret: Configured API secret key

    Returns:
        The accepted token

    Raises:
        AuthorizationError: If no secret is configured, the token is missing or it does not match
    """
    if not secret:
        raise AuthorizationError("API_SECRET_KEY is not configured")
    token = extract_bearer_token(auth_header)
    if token is None:
        raise AuthorizationError("Missing bearer token")
    if not secrets.compare_digest(token.encode("utf-8"), secret.encode("utf-8")):
        raise AuthorizationError("Invalid bearer token")
    return token


def require_bearer_token(view):
    """
    Run the bearer token policy before the view.

    With AUTH_REQUIRED unset the outcome is only logged and the view always runs.
    """

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            check_bearer_token(request.headers.get("Authorization"), settings.api_secret_key)
        except AuthorizationError as e:
            if settings.auth_required:
                logger.warning(f"Rejected {request.method} {request.path}: {e}")
                response = text_response(Messages.UNAUTHORIZED, 401)
                response.headers["WWW-Authenticate"] = "Bearer"
                return response
            logger.debug(f"Bearer check not enforced for {request.path}: {e}")
        return view(*args, **kwargs)

    return wrapper

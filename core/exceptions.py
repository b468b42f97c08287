"""Custom exceptions for the application."""


class HelloApiError(Exception):
    """Base exception for API and frontend errors."""
    pass


class AuthorizationError(HelloApiError):
    """Bearer token missing or not accepted."""
    pass


class FetchError(HelloApiError):
    """Frontend could not fetch the message from the API."""

    def __init__(self, message: str, status_code=None):
        super().__init__(message)
        self.status_code = status_code

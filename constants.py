"""Application constants."""


class Routes:
    """URL paths served by the API."""

    ROOT = "/"
    SOME_ENDPOINT = "/api/some-endpoint"


class Messages:
    """Fixed response bodies."""

    HELLO = "Hello, World!"
    DATA_CREATED = "Data created successfully"
    UNAUTHORIZED = "Unauthorized"
    FETCH_FAILED = "Could not load message: {error}"


class ContentTypes:
    """Response content types."""

    TEXT = "text/plain; charset=utf-8"

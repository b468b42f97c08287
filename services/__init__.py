"""Services package."""

from services.api_client import ApiClient

__all__ = ["ApiClient"]

"""HTTP client used by the frontend to talk to the API."""

import requests

from config import settings
from core.exceptions import FetchError
from core.logger import logger


class ApiClient:
    """Thin wrapper over requests for the API root endpoint."""

    def __init__(self, base_url: str = None, session: requests.Session = None):
        """
        Initialize API client.

        Args:
            base_url: API address, defaults to WEBAPP_API_URL
            session: Optional requests session
        """
        self.base_url = base_url or settings.webapp_api_url
        self.session = session or requests.Session()

    def get_root_message(self) -> str:
        """
        Fetch the root endpoint and return its body as text.

        Returns:
            Response body

        Raises:
            FetchError: On transport errors or a non-2xx status
        """
        try:
            response = self.session.get(self.base_url)
            response.raise_for_status()
        except requests.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else None
            raise FetchError(f"GET {self.base_url} returned {status_code}", status_code=status_code) from e
        except requests.RequestException as e:
            raise FetchError(f"GET {self.base_url} failed: {str(e)}") from e

        logger.debug(f"Fetched {len(response.text)} characters from {self.base_url}")
        return response.text

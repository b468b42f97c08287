"""Message view: fetches the API root once on mount and renders it as a heading."""
from typing import Callable, Optional

from markupsafe import Markup

from core.exceptions import FetchError
from core.logger import logger
from models.view_models import ViewState, ViewStatus


class MessageView:
    """
    View owning a single message cell.

    The cell starts empty and is written at most once, by the first
    call to mount(). Fetch failures leave it empty and mark the view failed.
    """

    def __init__(self, fetch_message: Callable[[], str]):
        """
        Initialize view.

        Args:
            fetch_message: Callable returning the message text, raising FetchError on failure
        """
        self.fetch_message = fetch_message
        self.state = ViewState()
        self._mounted = False

    @property
    def message(self) -> str:
        """Fetched message, empty until a successful mount."""
        return self.state.message

    @property
    def status(self) -> ViewStatus:
        """Current view status."""
        return self.state.status

    @property
    def error(self) -> Optional[str]:
        """Failure text when the fetch failed, otherwise None."""
        return self.state.error

    @property
    def is_mounted(self) -> bool:
        """Whether the one-time fetch effect has run."""
        return self._mounted

    def mount(self) -> ViewState:
        """Run the one-time fetch effect. Later calls return the current state unchanged."""
        if self._mounted:
            return self.state
        self._mounted = True

        try:
            message = self.fetch_message()
        except FetchError as e:
            logger.warning(f"Message fetch failed: {str(e)}")
            self.state = ViewState(status=ViewStatus.FAILED, error=str(e))
            return self.state

        self.state = ViewState(message=message, status=ViewStatus.LOADED)
        return self.state

    def render(self) -> Markup:
        """Render the message as the page heading (HTML-escaped)."""
        return Markup("<h1>{}</h1>").format(self.state.message)

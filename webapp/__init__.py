"""Single-page frontend that displays the API root message."""

from webapp.view import MessageView

__all__ = ["MessageView"]

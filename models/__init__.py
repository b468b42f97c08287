"""Models package."""

from models.view_models import ViewState, ViewStatus

__all__ = [
    "ViewState",
    "ViewStatus",
]

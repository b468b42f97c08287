"""Pydantic models for frontend view state."""
from typing import Optional
from enum import Enum
from pydantic import BaseModel, Field


class ViewStatus(str, Enum):
    """Lifecycle of a mounted view."""
    IDLE = "idle"  # Not mounted yet
    LOADED = "loaded"  # Message fetched
    FAILED = "failed"  # Fetch failed, message left empty


class ViewState(BaseModel):
    """State owned by one view instance, reset on every page load."""
    message: str = Field("", description="Most recently fetched response body")
    status: ViewStatus = Field(ViewStatus.IDLE, description="Current view status")
    error: Optional[str] = Field(None, description="Failure text when status is failed")

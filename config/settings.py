"""Application configuration and settings management."""
from pathlib import Path
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # API server
    api_host: str = "127.0.0.1"
    api_port: int = 5000

    # Bearer token for POST /api/some-endpoint.
    # Only enforced when auth_required is set; otherwise the check is logged and ignored.
    api_secret_key: Optional[str] = None
    auth_required: bool = False

    # Frontend (webapp) server
    webapp_host: str = "127.0.0.1"
    webapp_port: int = 3000
    webapp_api_url: str = "http://localhost:5000/"
    webapp_show_errors: bool = False

    # Logging
    log_level: str = "INFO"
    log_file: Optional[Path] = None

    @property
    def is_auth_configured(self) -> bool:
        """Check if a bearer secret is available."""
        return bool(self.api_secret_key)


# Global settings instance
settings = Settings()

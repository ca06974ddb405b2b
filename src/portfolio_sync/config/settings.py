"""Application settings and configuration."""

from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_HOLDINGS_ENDPOINT = "https://35dee773a9ec441e9f38d5fc249406ce.api.mockbin.io/"


def get_default_data_dir() -> Path:
    """Return the default data directory for the local snapshot database."""
    return Path.home() / ".portfolio_sync"


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PORTFOLIO_",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "Portfolio Holdings"

    # Remote holdings endpoint
    holdings_endpoint: str = DEFAULT_HOLDINGS_ENDPOINT
    request_timeout_seconds: float = 10.0

    # Snapshot cache
    snapshot_ttl_seconds: int = 300

    # Engine behavior
    search_debounce_seconds: float = 0.3

    # Data directory (snapshot database lives here)
    data_dir: Optional[Path] = None

    # Database URL (derived from data_dir if not set explicitly)
    database_url: Optional[str] = None

    log_level: str = "INFO"

    def get_data_dir(self) -> Path:
        """Get the data directory, creating it if needed."""
        data_dir = self.data_dir or get_default_data_dir()
        data_dir.mkdir(parents=True, exist_ok=True)
        return data_dir

    def get_database_url(self) -> str:
        """Get database URL, deriving from data_dir if not set."""
        if self.database_url:
            return self.database_url
        db_path = self.get_data_dir() / "snapshot.db"
        return f"sqlite:///{db_path}"


# Global settings instance (can be replaced at runtime)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the current settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Settings) -> None:
    """Set the global settings instance."""
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Reset settings to force reload."""
    global _settings
    _settings = None

"""Application settings and configuration."""

from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


def get_default_data_dir() -> Path:
    """Return the default data directory."""
    return Path.home() / ".mindtrade"


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "MindTrade"
    app_version: str = "0.1.0"

    # Data directory (database lives here unless database_url is set)
    data_dir: Optional[Path] = None
    database_url: Optional[str] = None

    log_level: str = "INFO"

    # Third-party API keys; a missing key fails the request, not startup
    fmp_api_key: Optional[str] = None
    logokit_api_key: Optional[str] = None
    finnhub_api_key: Optional[str] = None
    openai_api_key: Optional[str] = None

    fmp_base_url: str = "https://financialmodelingprep.com/api/v3"
    logokit_base_url: str = "https://img.logokit.com"
    finnhub_base_url: str = "https://finnhub.io/api/v1"
    openai_base_url: str = "https://api.openai.com/v1"
    openai_model: str = "gpt-4o-mini"
    http_timeout_seconds: float = 30.0

    # Commentary cache
    commentary_cache_ttl_seconds: int = 24 * 60 * 60
    commentary_cache_namespace: str = "openai_cache_"

    # Market indices refresh cadence
    index_refresh_interval_seconds: int = 5 * 60

    def get_data_dir(self) -> Path:
        """Get the data directory, creating it if needed."""
        data_dir = self.data_dir or get_default_data_dir()
        data_dir.mkdir(parents=True, exist_ok=True)
        return data_dir

    def get_database_url(self) -> str:
        """Get database URL, deriving from data_dir if not set."""
        if self.database_url:
            return self.database_url
        db_path = self.get_data_dir() / "mindtrade.db"
        return f"sqlite:///{db_path}"


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the current settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Settings) -> None:
    """Replace the global settings instance."""
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Reset settings to force reload."""
    global _settings
    _settings = None

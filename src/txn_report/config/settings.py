"""Application settings and configuration."""

from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DATASET_URL = "https://s3.amazonaws.com/roxiler.com/product_transaction.json"


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    app_name: str = "Transaction Reporting Service"
    app_version: str = "0.1.0"

    # Data directory (default SQLite store lives here)
    data_dir: Path = Path("./data")

    # Fixed store name; the SQLite file is <data_dir>/<database_name>.sqlite
    database_name: str = "transactionsDB"

    # Database URL (derived from data_dir/database_name if not set explicitly)
    database_url: Optional[str] = None

    # Remote dataset source
    dataset_url: str = DEFAULT_DATASET_URL
    dataset_fetch_timeout_seconds: float = 30.0

    # Month bucketing is always drawn against this year, in this timezone
    report_year: int = 2022
    report_timezone: str = "UTC"

    cors_allow_origins: list[str] = ["*"]
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    def get_data_dir(self) -> Path:
        """Get the data directory, creating it if needed."""
        self.data_dir.mkdir(parents=True, exist_ok=True)
        return self.data_dir

    def get_database_url(self) -> str:
        """Get database URL, deriving from data_dir if not set."""
        if self.database_url:
            return self.database_url
        db_path = self.get_data_dir() / f"{self.database_name}.sqlite"
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
    """Set the global settings instance (used by tests and scripts)."""
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Reset settings to force reload."""
    global _settings
    _settings = None

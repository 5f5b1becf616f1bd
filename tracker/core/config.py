"""
Configuration helpers for the habit tracker.

Exposes a Settings object that reads environment variables (storage backend,
data file, database URL, log level) so that services and repositories do not
fetch os.environ directly. Every value has a default: the widget runs with no
variables set.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os

DEFAULT_DATA_FILE = Path.home() / ".local" / "share" / "habit-tracker" / "data.json"
STORAGE_BACKENDS = ("json", "sql", "memory")


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    storage_backend: str
    data_file: Path
    database_url: str
    log_level: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _path(value: str | None, default: Path) -> Path:
        if not value or not value.strip():
            return default
        return Path(value.strip()).expanduser()

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        storage_backend=(os.getenv("HABITS_STORAGE_BACKEND") or "json").strip().lower(),
        data_file=_path(os.getenv("HABITS_DATA_FILE"), DEFAULT_DATA_FILE),
        database_url=os.getenv("DATABASE_URL", ""),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").strip().upper(),
    )

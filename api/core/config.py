"""
Configuration helpers for the Talker API.

Routers/services read a Settings object instead of fetching os.environ
directly (port, JSON file path, database URL, log level).
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os

DEFAULT_TALKER_FILE = Path(__file__).resolve().parents[1] / "talker.json"


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    host: str
    port: int
    talker_file: Path
    database_url: str
    log_level: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    talker_file = (os.getenv("TALKER_FILE") or "").strip()
    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        host=os.getenv("HOST", "0.0.0.0"),
        port=_int(os.getenv("PORT", "3001"), 3001),
        talker_file=Path(talker_file) if talker_file else DEFAULT_TALKER_FILE,
        database_url=os.getenv("DATABASE_URL", ""),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )

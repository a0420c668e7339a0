"""
Configuration helpers for the loyalty backend.

Exposes a Settings object that reads environment variables (database URL, session
secret, cookie options, log level) so that routers/services do not fetch
os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
import os


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    database_url: str
    session_secret: str
    session_ttl_seconds: int
    cookie_domain: str | None
    log_level: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        database_url=os.getenv("DATABASE_URL", "sqlite:///./loyalty_db.sqlite"),
        session_secret=os.getenv("SESSION_SECRET", ""),
        session_ttl_seconds=max(0, _int(os.getenv("SESSION_TTL_SECONDS", "0"), 0)),
        cookie_domain=(os.getenv("COOKIE_DOMAIN") or "").strip() or None,
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )

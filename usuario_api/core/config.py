"""
Configuration helpers for the usuario API.

Routers/services never read os.environ directly; they receive a Settings
instance built from the environment by get_settings().
"""

from dataclasses import dataclass
from functools import lru_cache
import logging
import os


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    database_url: str
    jwt_secret: str
    jwt_algorithm: str
    jwt_ttl_seconds: int
    log_level: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _level(value: str, default: str = "INFO") -> str:
        name = value.strip().upper()
        return name if isinstance(logging.getLevelName(name), int) else default

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        database_url=os.getenv("DATABASE_URL", "sqlite:///./usuario.db").strip(),
        jwt_secret=os.getenv("JWT_SECRET", "dev-secret-change-me"),
        jwt_algorithm=os.getenv("JWT_ALGORITHM", "HS256"),
        jwt_ttl_seconds=_int(os.getenv("JWT_TTL_SECONDS", "3600"), 3600),
        log_level=_level(os.getenv("LOG_LEVEL") or "INFO"),
    )

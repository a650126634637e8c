"""
Process configuration sourced from environment variables.

The database URL is taken from DATABASE_URL when present, otherwise it is
assembled from the individual POSTGRES_* components (all must be set).
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from sqlalchemy.engine import URL

_REQUIRED_DB_VARS = ("POSTGRES_USER", "POSTGRES_PASSWORD", "POSTGRES_HOST", "POSTGRES_DB")


@dataclass(frozen=True)
class Settings:
    database_url: str
    db_schema: Optional[str] = None
    db_max_connections: int = 10
    health_check_interval_seconds: float = 5.0
    run_migrations: bool = True


def _normalize_bool(value: str | None, default: bool = True) -> bool:
    """Return normalized boolean from environment-style value."""
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"", "0", "false", "no", "off"}:
        return False
    if normalized in {"1", "true", "yes", "on"}:
        return True
    return default


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} could not be parsed as an integer: {raw!r}")


def _get_database_url() -> str:
    # If DATABASE_URL is explicitly set, use it
    if os.getenv("DATABASE_URL"):
        return os.environ["DATABASE_URL"]

    missing = [name for name in _REQUIRED_DB_VARS if not os.getenv(name)]
    if missing:
        raise ValueError(f"Missing required database environment variables: {', '.join(missing)}")

    url = URL.create(
        "postgresql",
        username=os.environ["POSTGRES_USER"],
        password=os.environ["POSTGRES_PASSWORD"],
        host=os.environ["POSTGRES_HOST"],
        port=_int_env("POSTGRES_PORT", 5432),
        database=os.environ["POSTGRES_DB"],
    )
    return url.render_as_string(hide_password=False)


def load_settings() -> Settings:
    """Build settings from the current environment without caching."""
    return Settings(
        database_url=_get_database_url(),
        db_schema=os.getenv("DB_SCHEMA") or None,
        db_max_connections=_int_env("DB_MAX_CONNECTIONS", 10),
        health_check_interval_seconds=float(_int_env("HEALTH_CHECK_INTERVAL_SECONDS", 5)),
        run_migrations=_normalize_bool(os.getenv("RUN_MIGRATIONS"), default=True),
    )


@lru_cache(maxsize=None)
def get_settings() -> Settings:
    """Return the cached settings for this process."""
    return load_settings()


def refresh_settings_cache() -> None:
    """Invalidate cached settings (useful for tests)."""
    get_settings.cache_clear()

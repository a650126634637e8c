"""
Database engine construction.

The engine is the process-wide connection pool. It is built once by the
application factory and handed explicitly to the repository, so tests can
substitute an isolated engine (typically in-memory SQLite) per test.
"""
import logging
from typing import Optional

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import StaticPool

from todos.config import Settings

logger = logging.getLogger(__name__)


def _sqlite_kwargs(url: str) -> dict:
    kwargs = {"connect_args": {"check_same_thread": False}}
    # In-memory SQLite with StaticPool so the schema persists across connections
    if ":memory:" in url or url.rstrip("/").endswith("sqlite:"):
        kwargs["poolclass"] = StaticPool
    return kwargs


def _install_search_path(engine: Engine, schema: str) -> None:
    """Point every new connection at ``schema`` before it is handed out."""

    @event.listens_for(engine, "connect")
    def _set_search_path(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        try:
            cursor.execute(f'SET search_path = "{schema}"')
        finally:
            cursor.close()
        dbapi_connection.commit()


def create_db_engine(url: str, *, pool_size: int = 10, schema: Optional[str] = None) -> Engine:
    """Create an engine for ``url``.

    SQLite URLs (used by the test suite) skip pool sizing and search path
    handling, which only apply to PostgreSQL.
    """
    if url.startswith("sqlite"):
        return create_engine(url, **_sqlite_kwargs(url))

    engine = create_engine(url, pool_pre_ping=True, pool_size=pool_size)
    if schema:
        _install_search_path(engine, schema)
    logger.info(
        "database_engine_created: url=%s pool_size=%d schema=%s",
        make_url(url).render_as_string(hide_password=True),
        pool_size,
        schema,
    )
    return engine


def build_engine(settings: Settings) -> Engine:
    """Create the engine described by ``settings``."""
    return create_db_engine(
        settings.database_url,
        pool_size=settings.db_max_connections,
        schema=settings.db_schema,
    )

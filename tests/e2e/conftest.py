import os
import shutil
import subprocess

import pytest
from sqlalchemy import text

from todos.db.database import create_db_engine
from todos.db.migrations import run_migrations


def _docker_available() -> bool:
    if os.getenv("SKIP_DOCKER_TESTS") == "1":
        return False
    if not shutil.which("docker"):
        return False
    try:
        proc = subprocess.run(["docker", "info"], capture_output=True, text=True, timeout=5)
    except (OSError, subprocess.SubprocessError):
        return False
    return proc.returncode == 0


# Session-wide Postgres test container
@pytest.fixture(scope="session")
def postgres_url():
    explicit = os.getenv("E2E_DATABASE_URL")
    if explicit:
        yield explicit
        return
    if not _docker_available():
        pytest.skip("Docker daemon is not available; skipping e2e tests that require containers")

    from testcontainers.postgres import PostgresContainer

    image = os.getenv("TEST_POSTGRES_IMAGE", "postgres:16-alpine")
    with PostgresContainer(image) as pg:
        yield pg.get_connection_url()


# Apply Alembic migrations once
@pytest.fixture(scope="session")
def pg_engine(postgres_url):
    engine = create_db_engine(postgres_url, pool_size=4)
    run_migrations(engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def clean_pg(pg_engine):
    yield pg_engine
    with pg_engine.begin() as conn:
        conn.execute(text("TRUNCATE tasks, stories"))

"""Apply the bundled Alembic migrations to a database."""
import logging
from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy.engine import Engine

logger = logging.getLogger(__name__)

_PROJECT_ROOT = Path(__file__).resolve().parents[2]


def alembic_config() -> Config:
    """Alembic Config bound to the project's alembic.ini and migrations/ directory."""
    ini_path = _PROJECT_ROOT / "alembic.ini"
    cfg = Config(str(ini_path)) if ini_path.exists() else Config()
    cfg.set_main_option("script_location", str(_PROJECT_ROOT / "migrations"))
    return cfg


def run_migrations(engine: Engine, revision: str = "head") -> None:
    """Upgrade the database behind ``engine`` to ``revision``.

    The engine's own connection is handed to env.py so connection-level
    settings such as the schema search path apply to the migration too.
    """
    logger.info("Running migrations (target=%s)", revision)
    cfg = alembic_config()
    with engine.begin() as connection:
        cfg.attributes["connection"] = connection
        command.upgrade(cfg, revision)
    logger.info("Migrations complete")

"""
FastAPI app assembly: logging, lifespan, error handlers and router wiring.
"""
import logging
import os
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI, status
from sqlalchemy.engine import Engine
from starlette.responses import JSONResponse

from todos.api.deps import get_health_monitor
from todos.api.errors import install_error_handlers
from todos.api.todos import router as todos_router
from todos.config import Settings, get_settings
from todos.db.database import build_engine
from todos.db.migrations import run_migrations
from todos.db.repositories import TodoRepository
from todos.services import TodoService
from todos.workers.health_monitor import HealthMonitor, ServingStatus

# Configure logging
LOG_LEVEL_NAME = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_LEVEL = getattr(logging, LOG_LEVEL_NAME, logging.INFO)
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)
logger.setLevel(LOG_LEVEL)


def create_app(
    settings: Optional[Settings] = None,
    engine: Optional[Engine] = None,
    *,
    run_migrations_on_startup: Optional[bool] = None,
) -> FastAPI:
    """Build the application around an engine.

    When ``engine`` is omitted one is built from ``settings`` (or the
    environment). Tests pass their own engine and usually disable
    migrations.
    """
    if engine is None:
        settings = settings or get_settings()
        engine = build_engine(settings)
    if run_migrations_on_startup is None:
        run_migrations_on_startup = settings.run_migrations if settings else False
    interval = settings.health_check_interval_seconds if settings else 5.0

    repo = TodoRepository(engine)
    service = TodoService(repo)
    monitor = HealthMonitor(repo, interval_seconds=interval)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("app_startup: log_level=%s", LOG_LEVEL_NAME)
        if run_migrations_on_startup:
            run_migrations(engine)
        await monitor.start()
        try:
            yield
        finally:
            await monitor.stop()

    app = FastAPI(
        title="Todos Service",
        description="API for managing stories and their tasks.",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.engine = engine
    app.state.todo_service = service
    app.state.health_monitor = monitor

    install_error_handlers(app)
    app.include_router(todos_router)

    @app.get("/health")
    def health_check(health: HealthMonitor = Depends(get_health_monitor)):
        body = {"service": "todos-service", **health.snapshot()}
        if health.status is ServingStatus.SERVING:
            return body
        return JSONResponse(body, status_code=status.HTTP_503_SERVICE_UNAVAILABLE)

    return app

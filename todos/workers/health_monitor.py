"""
Background health monitor.

Periodically pings the database through the repository and records whether
the service can currently serve requests. `GET /health` reports the last
recorded state.
"""
import asyncio
import logging
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from todos.db.repositories import TodoRepository
from todos.errors import StoreError

logger = logging.getLogger(__name__)


class ServingStatus(str, Enum):
    UNKNOWN = "unknown"
    SERVING = "serving"
    NOT_SERVING = "not_serving"


class HealthMonitor:
    """Tracks database reachability on a fixed interval."""

    def __init__(self, repo: TodoRepository, interval_seconds: float = 5.0):
        self.repo = repo
        self.interval_seconds = interval_seconds
        self.status = ServingStatus.UNKNOWN
        self.last_error: Optional[str] = None
        self.last_checked_at: Optional[datetime] = None
        self._task: Optional[asyncio.Task] = None

    async def check_once(self) -> ServingStatus:
        """Run a single check and record the outcome."""
        logger.debug("HealthMonitor.check_once")
        try:
            await asyncio.to_thread(self.repo.ping)
        except StoreError as e:
            if self.status is not ServingStatus.NOT_SERVING:
                logger.error("Health check failed: %s", e)
            self._mark_not_serving(e)
        except Exception as e:
            # Anything else must not end the polling loop
            logger.exception("Unexpected health check failure: %s", e)
            self._mark_not_serving(e)
        else:
            if self.status is ServingStatus.NOT_SERVING:
                logger.info("Health check recovered")
            self.status = ServingStatus.SERVING
            self.last_error = None
        self.last_checked_at = datetime.now(timezone.utc)
        return self.status

    def _mark_not_serving(self, error: Exception) -> None:
        self.status = ServingStatus.NOT_SERVING
        self.last_error = str(error)

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self.interval_seconds)
            await self.check_once()

    async def start(self) -> None:
        """Check immediately, then keep checking in the background."""
        if self._task is not None:
            return
        logger.info("Starting health check (interval=%ss)", self.interval_seconds)
        await self.check_once()
        self._task = asyncio.create_task(self._run(), name="health-monitor")

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
        logger.info("Health check stopped")

    def snapshot(self) -> dict:
        return {
            "status": self.status.value,
            "last_checked_at": self.last_checked_at.isoformat() if self.last_checked_at else None,
            "error": self.last_error,
        }

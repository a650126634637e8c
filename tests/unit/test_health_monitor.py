import asyncio

import pytest

from todos.errors import StoreError
from todos.workers.health_monitor import HealthMonitor, ServingStatus


class _FlakyRepo:
    def __init__(self, healthy=True):
        self.healthy = healthy
        self.calls = 0

    def ping(self):
        self.calls += 1
        if not self.healthy:
            raise StoreError("ping failed: connection refused")


@pytest.mark.asyncio
async def test_check_once_tracks_reachability():
    repo = _FlakyRepo()
    monitor = HealthMonitor(repo, interval_seconds=60)
    assert monitor.status is ServingStatus.UNKNOWN

    assert await monitor.check_once() is ServingStatus.SERVING
    assert monitor.last_error is None

    repo.healthy = False
    assert await monitor.check_once() is ServingStatus.NOT_SERVING
    assert "connection refused" in monitor.snapshot()["error"]

    repo.healthy = True
    assert await monitor.check_once() is ServingStatus.SERVING
    assert monitor.snapshot()["last_checked_at"] is not None


@pytest.mark.asyncio
async def test_start_checks_on_interval_and_stop_cancels():
    repo = _FlakyRepo()
    monitor = HealthMonitor(repo, interval_seconds=0.01)
    await monitor.start()
    assert monitor.status is ServingStatus.SERVING
    await asyncio.sleep(0.1)
    await monitor.stop()
    calls = repo.calls
    assert calls > 1
    await asyncio.sleep(0.05)
    assert repo.calls == calls


@pytest.mark.asyncio
async def test_monitor_against_real_repo(repo):
    monitor = HealthMonitor(repo)
    assert await monitor.check_once() is ServingStatus.SERVING


class _BrokenRepo:
    def __init__(self):
        self.calls = 0

    def ping(self):
        self.calls += 1
        raise RuntimeError("driver exploded")


@pytest.mark.asyncio
async def test_unexpected_ping_errors_keep_polling():
    repo = _BrokenRepo()
    monitor = HealthMonitor(repo, interval_seconds=0.01)
    await monitor.start()
    assert monitor.status is ServingStatus.NOT_SERVING
    await asyncio.sleep(0.1)
    try:
        assert repo.calls > 1
        assert not monitor._task.done()
        assert monitor.snapshot()["error"] == "driver exploded"
    finally:
        await monitor.stop()

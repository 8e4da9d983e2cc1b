"""Shared fixtures for SleepTracker tests."""

import asyncio
import os
import threading
import time

import pytest

# Widgets are created without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from sleeptracker.core.database import SqlSleepDatabaseDao, get_engine  # noqa: E402


class RecordingDao(SqlSleepDatabaseDao):
    """In-memory DAO that records which write operations were called."""

    def __init__(self):
        super().__init__(get_engine())
        self.calls: list[str] = []

    def insert(self, night):
        self.calls.append("insert")
        return super().insert(night)

    def update(self, night):
        self.calls.append("update")
        super().update(night)

    def clear(self):
        self.calls.append("clear")
        super().clear()


class SlowInsertSnapshotDao(RecordingDao):
    """DAO that stalls after reading the snapshot an insert publishes.

    Stands in for a writer thread being preempted between reading the list
    of nights and handing it to observers.
    """

    def __init__(self, stall: float = 0.1):
        super().__init__()
        self._stall = stall
        self._local = threading.local()

    def insert(self, night):
        self._local.inserting = True
        try:
            return super().insert(night)
        finally:
            self._local.inserting = False

    def get_all_nights(self):
        nights = super().get_all_nights()
        if getattr(self._local, "inserting", False):
            time.sleep(self._stall)
        return nights


class FakeClock:
    """Clock returning a controllable time in epoch milliseconds."""

    def __init__(self, now: int = 1_700_000_000_000):
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, millis: int) -> None:
        self.now += millis


@pytest.fixture
def dao():
    """Create a DAO over a fresh in-memory database."""
    return RecordingDao()


@pytest.fixture
def clock():
    """Create a fake clock."""
    return FakeClock()


class FailingDao(RecordingDao):
    """DAO whose writes fail like a full disk."""

    def insert(self, night):
        raise OSError("disk full")

    def update(self, night):
        raise OSError("disk full")


@pytest.fixture
def failing_dao():
    """Create a DAO whose writes always fail."""
    return FailingDao()


@pytest.fixture
def wait_until():
    """Return a coroutine that polls ``predicate`` while the loop runs."""

    async def poll(predicate, timeout: float = 2.0) -> None:
        loop = asyncio.get_running_loop()
        deadline = loop.time() + timeout
        while not predicate():
            if loop.time() > deadline:
                raise AssertionError("condition not met before timeout")
            await asyncio.sleep(0.01)

    return poll


@pytest.fixture
def slow_snapshot_dao():
    """Create a DAO whose inserts publish their snapshot slowly."""
    return SlowInsertSnapshotDao()

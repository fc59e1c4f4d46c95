from datetime import datetime, timedelta
from typing import Callable, List
from unittest.mock import patch

import pytest

from svg_clock.clock.scheduler import Scheduler, TaskHandle
from svg_clock.clock.surface import BufferSurface
from svg_clock.config.settings import Settings


class FakeScheduler(Scheduler):
    """Scheduler that only runs callbacks when ``fire`` is called."""

    def __init__(self):
        self.active: List[TaskHandle] = []
        self.scheduled: List[TaskHandle] = []

    def schedule_repeating(self, interval: float, callback: Callable[[], None]) -> TaskHandle:
        handle = TaskHandle(interval, callback)
        self.active.append(handle)
        self.scheduled.append(handle)
        return handle

    def cancel(self, handle: TaskHandle) -> None:
        handle.cancelled = True
        if handle in self.active:
            self.active.remove(handle)

    def fire(self, times: int = 1) -> None:
        for _ in range(times):
            for handle in list(self.active):
                handle.callback()


class FakeClock:
    """Callable returning a settable time that can be advanced."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: int = 1) -> None:
        self.now += timedelta(seconds=seconds)


@pytest.fixture
def test_settings(tmp_path):
    """Settings isolated from the environment of the machine running tests."""
    return Settings(
        clock_output_path=tmp_path / "display" / "clock.svg",
        log_file=None,
    )


@pytest.fixture(autouse=True)
def mock_settings(test_settings):
    """Patch get_settings where it is used to return test settings."""
    with patch("svg_clock.cli.get_settings", return_value=test_settings), \
         patch("svg_clock.clock.service.get_settings", return_value=test_settings):
        yield test_settings


@pytest.fixture
def fake_scheduler():
    return FakeScheduler()


@pytest.fixture
def fake_clock():
    return FakeClock(datetime(2024, 1, 1, 3, 15, 30))


@pytest.fixture
def buffer():
    return BufferSurface()

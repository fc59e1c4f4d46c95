"""Cancellable repeating tasks."""

import threading
import time
from abc import ABC, abstractmethod
from typing import Callable, Optional

from svg_clock.logging.config import get_logger

logger = get_logger(__name__)


class TaskHandle:
    """Opaque handle to a scheduled repeating task."""

    def __init__(self, interval: float, callback: Callable[[], None]):
        self.interval = interval
        self.callback = callback
        self.cancelled = False


class Scheduler(ABC):
    """Abstract base class for repeating-task schedulers."""

    @abstractmethod
    def schedule_repeating(self, interval: float, callback: Callable[[], None]) -> TaskHandle:
        """
        Run ``callback`` every ``interval`` seconds until cancelled.

        The first call happens one interval after scheduling.

        Args:
            interval: Seconds between calls
            callback: Function to call

        Returns:
            Handle to pass to ``cancel``
        """
        pass

    @abstractmethod
    def cancel(self, handle: TaskHandle) -> None:
        """
        Stop a repeating task.

        Once this returns the callback is not called again.

        Args:
            handle: Handle returned by ``schedule_repeating``
        """
        pass


class _ThreadTaskHandle(TaskHandle):
    def __init__(self, interval: float, callback: Callable[[], None]):
        super().__init__(interval, callback)
        self.stop_event = threading.Event()
        # Held while the callback runs so cancel() can wait for it
        self.lock = threading.RLock()
        self.thread: Optional[threading.Thread] = None


class ThreadScheduler(Scheduler):
    """Runs each repeating task on its own daemon thread."""

    def __init__(self, monotonic: Callable[[], float] = time.monotonic):
        self._monotonic = monotonic

    def schedule_repeating(self, interval: float, callback: Callable[[], None]) -> TaskHandle:
        if interval <= 0:
            raise ValueError(f"Interval must be positive, got {interval}")

        handle = _ThreadTaskHandle(interval, callback)
        handle.thread = threading.Thread(
            target=self._run,
            args=(handle,),
            name=f"repeating-{getattr(callback, '__name__', 'task')}",
            daemon=True,
        )
        handle.thread.start()
        return handle

    def cancel(self, handle: TaskHandle) -> None:
        if not isinstance(handle, _ThreadTaskHandle):
            raise TypeError(f"Handle {handle!r} was not created by this scheduler")

        with handle.lock:
            handle.stop_event.set()
            handle.cancelled = True

        thread = handle.thread
        if thread is not None and thread is not threading.current_thread():
            thread.join()

    def _run(self, handle: _ThreadTaskHandle) -> None:
        """Call the task on a fixed cadence, skipping ticks that were missed."""
        interval = handle.interval
        deadline = self._monotonic() + interval

        while not handle.stop_event.wait(max(0.0, deadline - self._monotonic())):
            with handle.lock:
                if handle.stop_event.is_set():
                    break
                handle.callback()

            deadline += interval
            now = self._monotonic()
            if deadline <= now:
                missed = int((now - deadline) // interval) + 1
                logger.debug(f"Tick overran, skipping {missed} interval(s)")
                deadline += missed * interval

"""Clock widget controller."""

import threading
import time
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from svg_clock.clock.angles import WallClockTime
from svg_clock.clock.renderer import ClockRenderer
from svg_clock.clock.scheduler import Scheduler, TaskHandle, ThreadScheduler
from svg_clock.clock.surface import DisplaySurface
from svg_clock.clock.theme import ThemeProvider, settings_theme
from svg_clock.config import Settings, get_settings
from svg_clock.logging.config import get_logger

logger = get_logger(__name__)


@dataclass
class ClockWidgetState:
    """Whether the clock is running, and the handle of its refresh task."""

    running: bool = False
    handle: Optional[TaskHandle] = None


class ClockService:
    """
    Keeps a display surface showing the current time.

    The clock is started and stopped with ``toggle``. While running, the
    surface is refreshed every ``clock_update_interval`` seconds with a
    freshly rendered document.
    """

    def __init__(
        self,
        surface: DisplaySurface,
        scheduler: Optional[Scheduler] = None,
        settings: Optional[Settings] = None,
        theme: Optional[ThemeProvider] = None,
        clock: Callable[[], datetime] = datetime.now,
        renderer: Optional[ClockRenderer] = None,
        state: Optional[ClockWidgetState] = None,
    ):
        """
        Initialize clock service.

        Args:
            surface: Where documents are shown
            scheduler: Repeating-task scheduler (threads by default)
            settings: Settings to read the size and interval from
            theme: Colour provider, called on every tick (configured colours by default)
            clock: Returns the current local time
            renderer: Document renderer
            state: Widget state to drive
        """
        self.surface = surface
        self.scheduler = scheduler or ThreadScheduler()
        self.settings = settings or get_settings()
        self.theme = theme or settings_theme(self.settings)
        self.clock = clock
        self.renderer = renderer or ClockRenderer()
        self.state = state or ClockWidgetState()
        # Held across each start/stop; toggles can arrive on web worker threads
        self._lock = threading.Lock()

    @property
    def is_running(self) -> bool:
        return self.state.running

    def toggle(self) -> bool:
        """
        Start the clock if it is stopped, stop it if it is running.

        Returns:
            True if the clock is now running
        """
        with self._lock:
            if self.state.running:
                self._stop()
            else:
                self._start()
            return self.state.running

    def _start(self) -> None:
        self.surface.open()
        self.tick()

        interval = self.settings.clock_update_interval
        self.state.handle = self.scheduler.schedule_repeating(interval, self.tick)
        self.state.running = True
        logger.info(f"Clock started on {self.surface.name}, refreshing every {interval}s")

    def _stop(self) -> None:
        handle = self.state.handle
        self.state.handle = None
        self.state.running = False
        if handle is not None:
            self.scheduler.cancel(handle)
        logger.info("Clock stopped")

    def tick(self) -> None:
        """Render the current time and show it on the surface."""
        try:
            now = WallClockTime.from_datetime(self.clock())
            document = self.renderer.render_time(
                now,
                size=self.settings.clock_size,
                theme=self.theme(),
            )
            self.surface.show(document)
        except Exception as e:
            logger.error(f"Error updating clock: {e}", exc_info=True)

    def run_daemon(self, poll_interval: float = 0.5) -> None:
        """
        Run the clock until interrupted.

        Args:
            poll_interval: Seconds between checks that the clock is still running
        """
        if not self.state.running:
            self.toggle()

        try:
            while self.state.running:
                time.sleep(poll_interval)
        except KeyboardInterrupt:
            logger.info("Clock service interrupted")
        finally:
            if self.state.running:
                self.toggle()

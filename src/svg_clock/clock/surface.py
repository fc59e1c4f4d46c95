"""Display surfaces the clock document is shown on."""

import threading
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from svg_clock.logging.config import get_logger

logger = get_logger(__name__)


class DisplaySurface(ABC):
    """Abstract base class for clock display surfaces."""

    name: str

    @abstractmethod
    def open(self) -> None:
        """
        Create the surface if it does not exist yet.

        Calling this on an already open surface does nothing.
        """
        pass

    @abstractmethod
    def show(self, document: str) -> None:
        """
        Replace the displayed content with ``document``.

        Args:
            document: Complete SVG document
        """
        pass


class FileSurface(DisplaySurface):
    """Keeps an SVG file on disk up to date."""

    def __init__(self, path: Path):
        """
        Initialize file surface.

        Args:
            path: File to write the clock to
        """
        self.path = Path(path)
        self.name = str(self.path)
        self._opened = False

    def open(self) -> None:
        if self._opened:
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._opened = True
        logger.info(f"Display surface ready at {self.path}")

    def show(self, document: str) -> None:
        # Atomic write
        temp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        with open(temp_path, "w", encoding="utf-8") as f:
            f.write(document)

        temp_path.replace(self.path)


class BufferSurface(DisplaySurface):
    """Holds the latest document in memory for the web viewer."""

    def __init__(self, name: str = "*clock*"):
        self.name = name
        self._lock = threading.Lock()
        self._document: Optional[str] = None
        self._updates = 0
        self._opened = False

    def open(self) -> None:
        with self._lock:
            if not self._opened:
                self._opened = True
                logger.info(f"Display buffer {self.name} created")

    def show(self, document: str) -> None:
        with self._lock:
            self._document = document
            self._updates += 1

    @property
    def is_open(self) -> bool:
        with self._lock:
            return self._opened

    @property
    def document(self) -> Optional[str]:
        """Most recently shown document, or None before the first tick."""
        with self._lock:
            return self._document

    @property
    def updates(self) -> int:
        """Number of documents shown so far."""
        with self._lock:
            return self._updates

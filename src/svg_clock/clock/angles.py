"""Hand angles for a 12-hour analog dial."""

from dataclasses import dataclass
from datetime import datetime
from typing import NamedTuple

# Side length of the template's internal coordinate grid
NATIVE_SIZE = 100


@dataclass(frozen=True)
class WallClockTime:
    """A time of day as read from the system clock."""

    hour: int
    minute: int
    second: int

    @classmethod
    def from_datetime(cls, value: datetime) -> "WallClockTime":
        return cls(hour=value.hour, minute=value.minute, second=value.second)

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"


class HandAngles(NamedTuple):
    """Clockwise rotation of each hand from 12 o'clock, in degrees."""

    hour: float
    minute: float
    second: float


def hand_angles(time: WallClockTime) -> HandAngles:
    """
    Compute the rotation of each hand for a time of day.

    The hour hand creeps half a degree per minute and the minute hand a tenth
    of a degree per second. The second hand jumps in whole 6 degree steps.
    The hour hand does not take seconds into account.

    Args:
        time: Time to display

    Returns:
        Angles in degrees, each in [0, 360)
    """
    return HandAngles(
        hour=(time.hour % 12) * 30 + time.minute / 2.0,
        minute=time.minute * 6 + time.second / 10.0,
        second=float(time.second * 6),
    )


def scale_factor(size_pixels: int) -> float:
    """Uniform scale that maps the native grid onto ``size_pixels``."""
    return size_pixels / float(NATIVE_SIZE)

"""SVG Clock Renderer."""

from dataclasses import dataclass
from typing import Dict

from svg_clock.clock.angles import WallClockTime, hand_angles, scale_factor
from svg_clock.clock.template import CLOCK_TEMPLATE, render_template
from svg_clock.clock.theme import Theme
from svg_clock.logging.config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class RenderParameters:
    """Values substituted into the clock template for one tick."""

    hour_angle: float
    minute_angle: float
    second_angle: float
    size: int
    scale: float
    foreground: str
    background: str

    def placeholders(self) -> Dict[str, object]:
        """Map template placeholder names to values."""
        return {
            "SIZE": self.size,
            "SCALE": self.scale,
            "FG": self.foreground,
            "BG": self.background,
            "HOUR": self.hour_angle,
            "MINUTE": self.minute_angle,
            "SECOND": self.second_angle,
        }


class ClockRenderer:
    """Renders an analog clock as SVG."""

    def __init__(self, template: str = CLOCK_TEMPLATE):
        """
        Initialize renderer.

        Args:
            template: SVG template with %NAME% placeholders
        """
        self.template = template

    def build_parameters(self, time: WallClockTime, size: int, theme: Theme) -> RenderParameters:
        """
        Compute the render parameters for a time of day.

        Args:
            time: Time to display
            size: Clock size in pixels
            theme: Foreground and background colours

        Returns:
            Parameters for ``render``
        """
        angles = hand_angles(time)
        return RenderParameters(
            hour_angle=angles.hour,
            minute_angle=angles.minute,
            second_angle=angles.second,
            size=size,
            scale=scale_factor(size),
            foreground=theme.foreground,
            background=theme.background,
        )

    def render(self, params: RenderParameters) -> str:
        """
        Render the clock as an SVG string.

        Args:
            params: Angles, size and colours to substitute

        Returns:
            Complete SVG document
        """
        return render_template(self.template, params.placeholders())

    def render_time(self, time: WallClockTime, size: int, theme: Theme) -> str:
        """Render the clock for a time of day."""
        params = self.build_parameters(time, size, theme)
        logger.debug(
            f"Rendering {time}: hour={params.hour_angle} "
            f"minute={params.minute_angle} second={params.second_angle}"
        )
        return self.render(params)

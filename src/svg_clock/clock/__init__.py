"""Analog clock rendering and refresh."""

from svg_clock.clock.angles import HandAngles, WallClockTime, hand_angles, scale_factor
from svg_clock.clock.renderer import ClockRenderer, RenderParameters
from svg_clock.clock.scheduler import Scheduler, TaskHandle, ThreadScheduler
from svg_clock.clock.service import ClockService, ClockWidgetState
from svg_clock.clock.surface import BufferSurface, DisplaySurface, FileSurface
from svg_clock.clock.template import CLOCK_TEMPLATE, TemplateError, render_template
from svg_clock.clock.theme import Theme, color_to_hex, settings_theme, static_theme

__all__ = [
    "BufferSurface",
    "CLOCK_TEMPLATE",
    "ClockRenderer",
    "ClockService",
    "ClockWidgetState",
    "DisplaySurface",
    "FileSurface",
    "HandAngles",
    "RenderParameters",
    "Scheduler",
    "TaskHandle",
    "TemplateError",
    "Theme",
    "ThreadScheduler",
    "WallClockTime",
    "color_to_hex",
    "hand_angles",
    "render_template",
    "scale_factor",
    "settings_theme",
    "static_theme",
]

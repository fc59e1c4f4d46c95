"""Configuration for SVG Clock."""

from svg_clock.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]

"""Logging helpers for SVG Clock."""

from svg_clock.logging.config import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]

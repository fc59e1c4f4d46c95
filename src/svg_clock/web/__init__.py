"""Browser viewer for the clock."""

from svg_clock.web.app import create_app

__all__ = ["create_app"]

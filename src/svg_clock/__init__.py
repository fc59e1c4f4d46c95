"""SVG Clock - an analog clock rendered as SVG and refreshed every second."""

__version__ = "0.1.0"

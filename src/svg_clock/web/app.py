"""Web viewer for SVG Clock."""

import secrets

from fasthtml.common import *

from svg_clock.clock.service import ClockService
from svg_clock.clock.surface import BufferSurface
from svg_clock.logging.config import get_logger

logger = get_logger(__name__)


def create_app(service: ClockService, buffer: BufferSurface):
    """
    Build the viewer app for a clock service rendering into ``buffer``.

    Args:
        service: Clock controller, toggled by ``POST /toggle``
        buffer: Surface the service shows its documents on

    Returns:
        The FastHTML application
    """
    app, rt = fast_app(
        pico=False,
        secret_key=secrets.token_hex(16),
        hdrs=(
            Meta(charset="UTF-8"),
            Meta(name="viewport", content="width=device-width, initial-scale=1.0"),
            Style("""
                body {
                    margin: 0;
                    min-height: 100vh;
                    display: flex;
                    flex-direction: column;
                    align-items: center;
                    justify-content: center;
                    font-family: system-ui, sans-serif;
                }
            """),
        ),
    )

    def _clock_content():
        return NotStr(buffer.document or "")

    def _status():
        label = "running" if service.is_running else "stopped"
        return Span(f"Clock {label}", id="clock-status")

    @rt("/")
    def get():
        """Page that polls for a fresh clock every second."""
        return Div(
            Div(
                _clock_content(),
                id="clock-container",
                hx_get="/clock",
                hx_trigger="every 1s",
                hx_swap="innerHTML",
            ),
            Div(
                Button("Start / stop", hx_post="/toggle", hx_target="#clock-status", hx_swap="outerHTML"),
                _status(),
            ),
        )

    @rt("/clock")
    def get():
        return _clock_content()

    @rt("/toggle")
    def post():
        running = service.toggle()
        logger.info(f"Clock toggled from web viewer, running={running}")
        return _status()

    return app

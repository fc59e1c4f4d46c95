"""Command-line interface for SVG Clock."""

import json
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer
from rich import print as rprint
from rich.console import Console
from rich.table import Table

from svg_clock.config import get_settings
from svg_clock.logging import configure_logging, get_logger

app = typer.Typer(
    name="svgclock",
    help="SVG Clock - an analog clock face rendered as SVG, refreshed every second",
    add_completion=False,
)

console = Console()
logger = get_logger(__name__)


@app.callback()
def main(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", help="Enable debug mode"),
) -> None:
    """SVG Clock CLI."""
    settings = get_settings()
    settings.ensure_directories()
    if debug or settings.debug:
        configure_logging(log_level="DEBUG", log_file=settings.log_file)
    else:
        configure_logging(log_level=settings.log_level, log_file=settings.log_file)


# Config commands
config_app = typer.Typer(help="Configuration management")
app.add_typer(config_app, name="config")


@config_app.command("show")
def config_show(
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Show current configuration."""
    settings = get_settings()

    if json_output:
        config_dict = settings.model_dump(mode="json")
        typer.echo(json.dumps(config_dict, indent=2))
    else:
        table = Table(title="SVG Clock Configuration", show_header=True)
        table.add_column("Setting", style="cyan")
        table.add_column("Value", style="green")

        for field_name in type(settings).model_fields:
            table.add_row(field_name, str(getattr(settings, field_name)))

        console.print(table)


# Clock commands
clock_app = typer.Typer(help="Clock display")
app.add_typer(clock_app, name="clock")


def _parse_time(value: str) -> datetime:
    """Parse HH:MM or HH:MM:SS into today's datetime."""
    for fmt in ("%H:%M:%S", "%H:%M"):
        try:
            parsed = datetime.strptime(value, fmt)
        except ValueError:
            continue
        return datetime.now().replace(
            hour=parsed.hour, minute=parsed.minute, second=parsed.second, microsecond=0
        )
    raise typer.BadParameter(f"Expected HH:MM or HH:MM:SS, got {value!r}")


@clock_app.command("run")
def clock_run(
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="SVG file to keep updated"),
    size: Optional[int] = typer.Option(None, "--size", min=1, help="Clock size in pixels"),
) -> None:
    """Run the clock, refreshing an SVG file every second until interrupted."""
    from svg_clock.clock import ClockService, FileSurface

    settings = get_settings()
    if size is not None:
        settings.clock_size = size

    path = output or settings.clock_output_path
    service = ClockService(FileSurface(path), settings=settings)

    rprint(f"[green]Clock running, writing {path} (Ctrl+C to stop)[/green]")
    service.run_daemon()


@clock_app.command("render")
def clock_render(
    at: Optional[str] = typer.Option(None, "--at", help="Time to show (HH:MM[:SS]), default now"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write to file instead of stdout"),
    size: Optional[int] = typer.Option(None, "--size", min=1, help="Clock size in pixels"),
) -> None:
    """Render a single clock face."""
    from svg_clock.clock import ClockRenderer, WallClockTime, settings_theme

    settings = get_settings()
    moment = _parse_time(at) if at else datetime.now()

    svg = ClockRenderer().render_time(
        WallClockTime.from_datetime(moment),
        size=size or settings.clock_size,
        theme=settings_theme(settings)(),
    )

    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(svg, encoding="utf-8")
        rprint(f"[green]Wrote clock for {moment:%H:%M:%S} to {output}[/green]")
    else:
        typer.echo(svg, nl=False)


@app.command("serve")
def serve(
    host: Optional[str] = typer.Option(None, "--host", help="Interface to bind"),
    port: Optional[int] = typer.Option(None, "--port", help="Port to listen on"),
) -> None:
    """Serve the clock in a browser page."""
    import uvicorn

    from svg_clock.clock import BufferSurface, ClockService
    from svg_clock.web import create_app

    settings = get_settings()
    buffer = BufferSurface()
    service = ClockService(buffer, settings=settings)
    web_app = create_app(service, buffer)

    host = host or settings.web_host
    port = port or settings.web_port

    service.toggle()
    logger.info(f"Serving clock on http://{host}:{port}")
    try:
        uvicorn.run(web_app, host=host, port=port)
    finally:
        if service.is_running:
            service.toggle()


if __name__ == "__main__":
    app()

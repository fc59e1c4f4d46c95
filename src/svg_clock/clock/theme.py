"""Foreground and background colours for the dial."""

from typing import TYPE_CHECKING, Callable, NamedTuple, Sequence, Union

if TYPE_CHECKING:
    from svg_clock.config.settings import Settings


class Theme(NamedTuple):
    """Colour pair used to paint the clock."""

    foreground: str
    background: str


ThemeProvider = Callable[[], Theme]

Color = Union[str, Sequence[int]]


def color_to_hex(value: Color, depth: int = 8) -> str:
    """
    Format a colour as a hex triplet.

    Strings are returned unchanged. An ``(r, g, b)`` sequence is written with
    ``depth // 4`` hex digits per channel, so 8-bit channels give ``#rrggbb``
    and 16-bit channels give ``#rrrrggggbbbb``.
    """
    if isinstance(value, str):
        return value

    digits = max(1, depth // 4)
    red, green, blue = value
    return "#" + "".join(f"{channel:0{digits}x}" for channel in (red, green, blue))


def static_theme(foreground: Color, background: Color, depth: int = 8) -> ThemeProvider:
    """Theme provider that always returns the same colours."""
    theme = Theme(color_to_hex(foreground, depth), color_to_hex(background, depth))

    def provider() -> Theme:
        return theme

    return provider


def settings_theme(settings: "Settings") -> ThemeProvider:
    """Theme provider that reads the configured colours on every call."""

    def provider() -> Theme:
        return Theme(settings.foreground_color, settings.background_color)

    return provider

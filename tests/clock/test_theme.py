"""Tests for theme colours."""

from svg_clock.clock.theme import Theme, color_to_hex, settings_theme, static_theme
from svg_clock.config.settings import Settings


def test_color_string_passes_through():
    assert color_to_hex("#123abc") == "#123abc"
    assert color_to_hex("not-a-colour") == "not-a-colour"


def test_color_tuple_8_bit():
    assert color_to_hex((255, 0, 16)) == "#ff0010"


def test_color_tuple_16_bit():
    assert color_to_hex((65535, 0, 4096), depth=16) == "#ffff00001000"


def test_static_theme():
    provider = static_theme((0, 0, 0), "#ffffff")
    assert provider() == Theme("#000000", "#ffffff")


def test_settings_theme_follows_changes():
    settings = Settings(foreground_color="#111111", background_color="#eeeeee")
    provider = settings_theme(settings)

    assert provider() == Theme("#111111", "#eeeeee")

    settings.foreground_color = "#ff0000"
    assert provider().foreground == "#ff0000"

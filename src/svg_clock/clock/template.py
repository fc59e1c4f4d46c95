"""SVG template for the clock face and placeholder substitution."""

from decimal import Decimal
from importlib import resources
from typing import Mapping

PLACEHOLDERS = ("SIZE", "FG", "BG", "HOUR", "MINUTE", "SECOND", "SCALE")

TOKEN_DELIMITER = "%"


class TemplateError(ValueError):
    """Raised when a value cannot be substituted into a template."""


def load_template(name: str = "clock.svg") -> str:
    """Read a template shipped in ``svg_clock/clock/templates``."""
    return (
        resources.files("svg_clock.clock")
        .joinpath("templates")
        .joinpath(name)
        .read_text(encoding="utf-8")
    )


def token(name: str) -> str:
    """Return the marker written in templates for placeholder ``name``."""
    return f"{TOKEN_DELIMITER}{name}{TOKEN_DELIMITER}"


def format_value(value: object) -> str:
    """
    Format a substitution value as template text.

    Integers are written as plain integers, floats as plain decimals (never in
    exponent notation) and strings verbatim.

    Raises:
        TemplateError: If the value has an unsupported type or its text
            contains the token delimiter.
    """
    if isinstance(value, bool):
        raise TemplateError(f"Cannot substitute boolean value {value!r}")

    if isinstance(value, int):
        text = str(value)
    elif isinstance(value, float):
        text = repr(value)
        if "e" in text or "E" in text:
            text = format(Decimal(text), "f")
            if "." not in text:
                text += ".0"
    elif isinstance(value, str):
        text = value
    else:
        raise TemplateError(f"Cannot substitute value of type {type(value).__name__}")

    # Replacement text must never be able to form another token
    if TOKEN_DELIMITER in text:
        raise TemplateError(f"Substitution value {text!r} contains {TOKEN_DELIMITER!r}")
    return text


def render_template(template: str, values: Mapping[str, object]) -> str:
    """
    Substitute placeholder values into a template.

    Every occurrence of each ``%NAME%`` token is replaced. Tokens without a
    value are left as they are.

    Args:
        template: Template text
        values: Mapping from placeholder name to value

    Returns:
        The substituted document
    """
    document = template
    for name, value in values.items():
        document = document.replace(token(name), format_value(value))
    return document


CLOCK_TEMPLATE = load_template()

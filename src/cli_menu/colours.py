"""Colour validation against terminal capabilities.

Colours use Rich's colour syntax ("red", "bright_cyan", "grey50",
"#ff8800", "color(208)"). A bare number such as "208" is read as a
256-colour palette code.
"""

from __future__ import annotations

from rich.color import Color, ColorParseError, ColorType

from .errors import InvalidArgumentError
from .terminal import EIGHT_BIT_COLOURS, TRUE_COLOURS, Terminal


def parse_colour(colour: str) -> Color:
    """Parse a colour string, raising InvalidArgumentError when malformed."""
    if not isinstance(colour, str):
        raise InvalidArgumentError(f"Colour must be a string, got {type(colour).__name__}")

    value = f"color({colour})" if colour.isdigit() else colour
    try:
        return Color.parse(value)
    except ColorParseError as exc:
        raise InvalidArgumentError(f"Invalid colour: {colour!r}") from exc


def required_colour_support(colour: Color) -> int:
    """Minimum colour support a terminal needs to render ``colour``."""
    if colour.type == ColorType.EIGHT_BIT:
        return EIGHT_BIT_COLOURS
    if colour.type == ColorType.TRUECOLOR:
        return TRUE_COLOURS
    # Default and the 16 standard colours need no particular support.
    return 0


def is_renderable(terminal: Terminal, colour: str) -> bool:
    return terminal.colour_support >= required_colour_support(parse_colour(colour))


def validate_colour(terminal: Terminal, colour: str, fallback: str | None = None) -> str:
    """Return a colour the terminal can render.

    Args:
        terminal: Terminal the menu will be drawn on.
        colour: Desired colour.
        fallback: Colour to use when the terminal cannot render ``colour``.

    Returns:
        ``colour`` when renderable, otherwise ``fallback``.

    Raises:
        InvalidArgumentError: If either colour is malformed, or neither can be
            rendered.
    """
    if is_renderable(terminal, colour):
        return colour

    if fallback is None:
        raise InvalidArgumentError(
            f"Colour {colour!r} needs a terminal with "
            f"{required_colour_support(parse_colour(colour))} colours "
            f"(has {terminal.colour_support}) and no fallback was given"
        )

    if not is_renderable(terminal, fallback):
        raise InvalidArgumentError(
            f"Neither colour {colour!r} nor fallback {fallback!r} can be rendered "
            f"on a terminal with {terminal.colour_support} colours"
        )
    return fallback

"""Terminal capability layer.

Menus only need two facts about the terminal they will be drawn on: how wide
it is and how many colours it can show. ``RichTerminal`` answers both from a
Rich ``Console``; anything with the same two attributes can stand in for it.
"""

from __future__ import annotations

import logging
import os
from typing import Protocol

from rich.console import Console

logger = logging.getLogger(__name__)

NO_COLOURS = 0
STANDARD_COLOURS = 8
EIGHT_BIT_COLOURS = 256
TRUE_COLOURS = 16_777_216

_COLOUR_SUPPORT = {
    None: NO_COLOURS,
    "standard": STANDARD_COLOURS,
    "windows": STANDARD_COLOURS,
    "256": EIGHT_BIT_COLOURS,
    "truecolor": TRUE_COLOURS,
}

COLOR_SYSTEM_ENV = "CLI_MENU_COLOR_SYSTEM"
WIDTH_ENV = "CLI_MENU_WIDTH"


class Terminal(Protocol):
    """What the builder needs to know about the output terminal."""

    @property
    def width(self) -> int: ...

    @property
    def colour_support(self) -> int: ...


class RichTerminal:
    """Terminal capabilities backed by a Rich Console.

    Args:
        console: Console to query (auto-created if not provided).
    """

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    @property
    def width(self) -> int:
        return self.console.width

    @property
    def colour_support(self) -> int:
        """Number of colours the console can render (0 when colour is off)."""
        return _COLOUR_SUPPORT.get(self.console.color_system, STANDARD_COLOURS)

    def __repr__(self) -> str:
        return f"RichTerminal(width={self.width}, colour_support={self.colour_support})"


def _color_system_from_env() -> str | None:
    """Return the Rich color_system argument honoring the env override."""
    value = os.environ.get(COLOR_SYSTEM_ENV)
    if not value:
        return "auto"

    key = value.strip().lower()
    if key == "none":
        return None
    if key in _COLOUR_SUPPORT:
        return key

    logger.warning(f"Ignoring {COLOR_SYSTEM_ENV}={value!r}: unknown colour system")
    return "auto"


def _width_from_env() -> int | None:
    value = os.environ.get(WIDTH_ENV)
    if not value:
        return None
    try:
        width = int(value)
    except ValueError:
        logger.warning(f"Ignoring {WIDTH_ENV}={value!r}: not an integer")
        return None
    if width <= 0:
        logger.warning(f"Ignoring {WIDTH_ENV}={value!r}: must be positive")
        return None
    return width


def terminal_from_system() -> RichTerminal:
    """Build the terminal for the current process environment."""
    console = Console(color_system=_color_system_from_env(), width=_width_from_env())
    return RichTerminal(console)

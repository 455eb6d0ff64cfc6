"""Menu styles and the parent-to-child style cascade.

A builder keeps its style as a flat mapping of option values
(``DEFAULT_STYLE_VALUES`` pre-populated). At build time that mapping is turned
into an immutable ``MenuStyle``, or, for an untouched submenu, replaced by the
style its parent resolved.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from .colours import validate_colour
from .errors import InvalidArgumentError
from .terminal import Terminal

if TYPE_CHECKING:
    from .builder import MenuBuilder

logger = logging.getLogger(__name__)


DEFAULT_STYLE_VALUES: dict[str, Any] = {
    "fg": "white",
    "bg": "blue",
    "width": 100,
    "padding_top_bottom": 1,
    "padding_left_right": 2,
    "margin": 2,
    "margin_auto": False,
    "selected_marker": "●",
    "unselected_marker": "○",
    "item_extra": "✔",
    "displays_extra": False,
    "title_separator": "=",
    "border_top_width": 0,
    "border_right_width": 0,
    "border_bottom_width": 0,
    "border_left_width": 0,
    "border_colour": "white",
    "border_colour_fallback": None,
}


def default_style_values() -> dict[str, Any]:
    """Return a fresh copy of the default option set."""
    return dict(DEFAULT_STYLE_VALUES)


@dataclass(frozen=True)
class MenuStyle:
    """Resolved visual style handed to a built menu.

    Attributes:
        terminal: Terminal the style was resolved against.
        fg: Foreground colour (Rich colour syntax).
        bg: Background colour.
        width: Menu width in columns, never wider than the terminal.
        padding_top_bottom: Blank rows above and below the items.
        padding_left_right: Blank columns beside the items.
        margin: Columns left of the menu (ignored when ``margin_auto``).
        margin_auto: Center the menu horizontally.
        selected_marker: Marker drawn beside selected checkbox/radio items.
        unselected_marker: Marker drawn beside unselected ones.
        item_extra: Text shown at the right of items that show extra.
        displays_extra: Whether any item in the menu shows the extra text.
        title_separator: Character repeated under the title.
        border_*_width: Border thickness per side.
        border_colour: Border colour (already validated).
    """

    terminal: Terminal = field(repr=False, compare=False)
    fg: str = "white"
    bg: str = "blue"
    width: int = 100
    padding_top_bottom: int = 1
    padding_left_right: int = 2
    margin: int = 2
    margin_auto: bool = False
    selected_marker: str = "●"
    unselected_marker: str = "○"
    item_extra: str = "✔"
    displays_extra: bool = False
    title_separator: str = "="
    border_top_width: int = 0
    border_right_width: int = 0
    border_bottom_width: int = 0
    border_left_width: int = 0
    border_colour: str = "white"

    @property
    def resolved_margin(self) -> int:
        """Left margin in columns, centering the menu when margin is auto."""
        if self.margin_auto:
            return max(0, (self.terminal.width - self.width) // 2)
        return self.margin

    @property
    def content_width(self) -> int:
        """Columns available for item text inside borders and padding."""
        inner = (
            self.width
            - self.padding_left_right * 2
            - self.border_left_width
            - self.border_right_width
        )
        if self.displays_extra:
            inner -= len(self.item_extra) + 2
        return max(0, inner)

    @property
    def has_border(self) -> bool:
        return any(
            (
                self.border_top_width,
                self.border_right_width,
                self.border_bottom_width,
                self.border_left_width,
            )
        )


def build_style(terminal: Terminal, values: dict[str, Any]) -> MenuStyle:
    """Create a fresh MenuStyle from an option mapping.

    Raises:
        InvalidArgumentError: If the border colour cannot be rendered.
    """
    width = values["width"]
    if width < 0:
        raise InvalidArgumentError(f"Width must be positive, got {width}")
    width = min(width, terminal.width)

    border_colour = validate_colour(
        terminal, values["border_colour"], values["border_colour_fallback"]
    )

    margin_auto = bool(values["margin_auto"])

    return MenuStyle(
        terminal=terminal,
        fg=values["fg"],
        bg=values["bg"],
        width=width,
        padding_top_bottom=values["padding_top_bottom"],
        padding_left_right=values["padding_left_right"],
        selected_marker=values["selected_marker"],
        unselected_marker=values["unselected_marker"],
        item_extra=values["item_extra"],
        displays_extra=values["displays_extra"],
        title_separator=values["title_separator"],
        border_top_width=values["border_top_width"],
        border_right_width=values["border_right_width"],
        border_bottom_width=values["border_bottom_width"],
        border_left_width=values["border_left_width"],
        border_colour=border_colour,
        margin=0 if margin_auto else values["margin"],
        margin_auto=margin_auto,
    )


def resolve_style(builder: MenuBuilder) -> MenuStyle:
    """Resolve the style a builder's menu should use.

    A root builder always owns its style. A submenu builder whose options are
    still exactly the defaults borrows the style of its parent (recursively);
    changing any option makes the submenu own a complete fresh style.
    """
    if builder.parent is None:
        return builder.own_style()

    if builder.style_values != DEFAULT_STYLE_VALUES:
        return builder.own_style()

    logger.debug("Submenu style unchanged from defaults, using parent style")
    return resolve_style(builder.parent)

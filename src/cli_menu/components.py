"""Menu item components.

This module provides the building blocks a menu is made of:
- MenuItem: Base class for all items
- SelectableItem: Label bound to an action
- CheckboxItem / RadioItem: Selectable items with a checked state
- StaticItem: Plain, non-selectable text
- LineBreakItem: Repeated break character spanning one or more rows
- AsciiArtItem: Multi-line art aligned left, center or right
- SplitItem: Items laid out side by side
- MenuMenuItem: Entry point into a submenu

Drawing these items is left to the renderer; the classes only carry what a
renderer needs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Callable

from .actions import EnterSubMenuAction
from .errors import InvalidArgumentError

if TYPE_CHECKING:
    from .menu import Menu

MenuAction = Callable[["Menu"], object]


@dataclass
class MenuItem:
    """Base class for menu items.

    Attributes:
        text: Display text for this item.
    """

    text: str

    def can_select(self) -> bool:
        """Whether the cursor can land on this item."""
        return False

    def shows_item_extra(self) -> bool:
        """Whether the style's item-extra text is drawn beside this item."""
        return False

    def get_selectable_action(self) -> MenuAction | None:
        """Callable invoked with the owning menu when the item is activated."""
        return None


@dataclass
class SelectableItem(MenuItem):
    """Item bound to an action.

    Attributes:
        action: Invoked with the menu when the item is activated.
        show_item_extra: Draw the item-extra text beside this item.
        disabled: Visible but not selectable.
    """

    action: MenuAction | None = None
    show_item_extra: bool = False
    disabled: bool = False

    def can_select(self) -> bool:
        return not self.disabled

    def shows_item_extra(self) -> bool:
        return self.show_item_extra

    def get_selectable_action(self) -> MenuAction | None:
        return self.action


@dataclass
class CheckboxItem(SelectableItem):
    """Selectable item with an on/off state.

    Attributes:
        checked: Current state.
    """

    checked: bool = False

    def toggle(self) -> None:
        self.checked = not self.checked


@dataclass
class RadioItem(SelectableItem):
    """Selectable item that is checked exclusively among its neighbours.

    Attributes:
        checked: Current state.
    """

    checked: bool = False

    def select(self, siblings: list[MenuItem]) -> None:
        """Check this item and uncheck every other radio item in ``siblings``."""
        for item in siblings:
            if isinstance(item, RadioItem) and item is not self:
                item.checked = False
        self.checked = True


@dataclass
class StaticItem(MenuItem):
    """Non-selectable text."""


@dataclass
class LineBreakItem(MenuItem):
    """Visual divider repeating ``text`` across ``lines`` rows."""

    text: str = " "
    lines: int = 1

    def __post_init__(self):
        if self.lines < 1:
            raise InvalidArgumentError(f"Line break needs at least one line, got {self.lines}")


class AsciiArtPosition(str, Enum):
    """Horizontal alignment of ascii art."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"

    def __str__(self) -> str:
        return self.value


@dataclass
class AsciiArtItem(MenuItem):
    """Multi-line ascii art.

    Attributes:
        text: The art itself, lines separated by newlines.
        position: Alignment within the menu.
        alt: Text used instead when the art is wider than the menu.
    """

    position: AsciiArtPosition = AsciiArtPosition.CENTER
    alt: str = ""

    def __post_init__(self):
        try:
            self.position = AsciiArtPosition(self.position)
        except ValueError as exc:
            raise InvalidArgumentError(
                f"Invalid ascii art position: {self.position!r}"
            ) from exc

    @property
    def art_width(self) -> int:
        return max((len(line) for line in self.text.split("\n")), default=0)


@dataclass
class SplitItem(MenuItem):
    """Items drawn side by side in one row.

    Attributes:
        items: The nested items, in declaration order.
        gutter: Columns between neighbouring items.
    """

    text: str = ""
    items: tuple[MenuItem, ...] = field(default_factory=tuple)
    gutter: int = 2

    def __post_init__(self):
        self.items = tuple(self.items)
        if any(isinstance(item, SplitItem) for item in self.items):
            raise InvalidArgumentError("Cannot add a SplitItem to a SplitItem")

    def can_select(self) -> bool:
        return any(item.can_select() for item in self.items)

    def shows_item_extra(self) -> bool:
        return any(item.shows_item_extra() for item in self.items)


@dataclass
class MenuMenuItem(MenuItem):
    """Entry point into a submenu.

    Attributes:
        submenu: The built child menu.
        disabled: The submenu is shown but cannot be entered.
    """

    submenu: Menu | None = None
    disabled: bool = False

    def can_select(self) -> bool:
        return not self.disabled

    def get_selectable_action(self) -> MenuAction:
        return EnterSubMenuAction(self.submenu, disabled=self.disabled)

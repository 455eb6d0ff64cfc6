"""Fluent builders that turn item declarations into a Menu tree.

Example:
    from cli_menu import MenuBuilder

    builder = (
        MenuBuilder()
        .set_title("Main")
        .add_item("Say hi", lambda menu: print("hi"))
        .set_border(1, 2, "yellow")
    )
    settings = builder.add_submenu("Settings").set_title("Settings")
    settings.add_checkbox_item("Debug", toggle_debug)

    panel = builder.add_split_panel()
    panel.add_item("Left", on_left).add_item("Right", on_right)

    menu = builder.build()
    builder.get_submenu("Settings")  # the built Settings menu

Declarations may nest in any order. ``build()`` builds nested builders first,
appends the default "Go Back"/"Exit" items, resolves the style cascade and
finally wires every submenu's parent to the freshly built menu.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable

from .actions import ExitAction, GoBackAction
from .colours import validate_colour
from .components import (
    AsciiArtItem,
    AsciiArtPosition,
    CheckboxItem,
    LineBreakItem,
    MenuAction,
    MenuItem,
    MenuMenuItem,
    RadioItem,
    SelectableItem,
    SplitItem,
    StaticItem,
)
from .errors import InvalidArgumentError, InvalidStateError
from .menu import Menu
from .registry import Entry, ItemRegistry, PlaceholderKind, PlaceholderToken
from .style import MenuStyle, build_style, default_style_values, resolve_style
from .terminal import Terminal, terminal_from_system

logger = logging.getLogger(__name__)

DEFAULT_GO_BACK_TEXT = "Go Back"
DEFAULT_EXIT_TEXT = "Exit"


def _is_width(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _check_size(name: str, value: Any) -> int:
    if not _is_width(value):
        raise InvalidArgumentError(f"{name} must be an integer, got {value!r}")
    if value < 0:
        raise InvalidArgumentError(f"{name} must not be negative, got {value}")
    return value


def _items_have_extra(items: Iterable[MenuItem]) -> bool:
    return any(item.shows_item_extra() for item in items)


class _ItemDeclarations:
    """Item declarations shared by menu and split-panel builders."""

    _registry: ItemRegistry
    _submenus: dict[str, Menu]

    def _submenu_parent(self) -> MenuBuilder:
        """Menu builder that owns submenus declared here.

        Subclasses must override this.
        """
        raise NotImplementedError

    def add_menu_item(self, item: MenuItem):
        """Add an already constructed item."""
        self._registry.add(item)
        return self

    def add_item(
        self,
        text: str,
        action: MenuAction,
        show_item_extra: bool = False,
        disabled: bool = False,
    ):
        return self.add_menu_item(SelectableItem(text, action, show_item_extra, disabled))

    def add_items(self, items: Iterable[tuple]):
        """Add several selectable items, each given as ``add_item`` arguments."""
        for args in items:
            self.add_item(*args)
        return self

    def add_checkbox_item(
        self,
        text: str,
        action: MenuAction,
        show_item_extra: bool = False,
        disabled: bool = False,
    ):
        return self.add_menu_item(CheckboxItem(text, action, show_item_extra, disabled))

    def add_radio_item(
        self,
        text: str,
        action: MenuAction,
        show_item_extra: bool = False,
        disabled: bool = False,
    ):
        return self.add_menu_item(RadioItem(text, action, show_item_extra, disabled))

    def add_static_item(self, text: str):
        return self.add_menu_item(StaticItem(text))

    def add_line_break(self, break_char: str = " ", lines: int = 1):
        return self.add_menu_item(LineBreakItem(break_char, lines))

    def add_submenu(self, key: str, builder: MenuBuilder | None = None) -> MenuBuilder:
        """Declare a submenu at the current position.

        Args:
            key: Label of the entry item, also used by ``get_submenu``.
            builder: Existing builder to use (a new child builder if None).

        Returns:
            The submenu's builder, for declaring its contents.

        Raises:
            InvalidArgumentError: If ``key`` is already used by the owning menu
                or any of its split panels.
        """
        if self._submenu_parent().declares_submenu(key):
            raise InvalidArgumentError(f"Submenu {key!r} is already declared")

        if builder is None:
            builder = MenuBuilder(self._submenu_parent())
        self._registry.reserve(PlaceholderKind.SUBMENU, builder, key=key)
        return builder

    def _build_submenu(self, token: PlaceholderToken, builder: MenuBuilder) -> MenuMenuItem:
        menu = builder.build()
        self._submenus[token.key] = menu
        return MenuMenuItem(token.key, submenu=menu, disabled=builder.is_menu_disabled())


class SplitItemBuilder(_ItemDeclarations):
    """Builder for a row of items drawn side by side.

    Created by ``MenuBuilder.add_split_panel()``. Submenus declared here
    belong to the menu that declared the split panel: they inherit its
    terminal and style and get a "Go Back" item leading to it.
    """

    def __init__(self, parent: MenuBuilder):
        self.parent = parent
        self._registry = ItemRegistry()
        self._submenus: dict[str, Menu] = {}
        self._gutter = 2

    def _submenu_parent(self) -> MenuBuilder:
        return self.parent

    def add_menu_item(self, item: MenuItem) -> SplitItemBuilder:
        if isinstance(item, SplitItem):
            raise InvalidArgumentError("Cannot add a SplitItem to a SplitItem")
        return super().add_menu_item(item)

    def set_gutter(self, gutter: int) -> SplitItemBuilder:
        self._gutter = _check_size("Gutter", gutter)
        return self

    def get_terminal(self) -> Terminal:
        return self.parent.get_terminal()

    def end(self) -> MenuBuilder:
        """Return the builder that declared this split panel."""
        return self.parent

    def items_have_extra(self) -> bool:
        """Whether any declared item shows extra (submenu entries never do)."""
        return _items_have_extra(
            entry for entry in self._registry.entries() if isinstance(entry, MenuItem)
        )

    def build(self) -> SplitItem:
        self._submenus = {}
        items = self._registry.resolve(
            self._registry.entries(), PlaceholderKind.SUBMENU, self._build_submenu
        )
        return SplitItem(items=items, gutter=self._gutter)

    def set_submenu_parents(self, menu: Menu) -> None:
        for submenu in self._submenus.values():
            submenu.set_parent(menu)


class MenuBuilder(_ItemDeclarations):
    """Fluent builder for a menu and, recursively, its submenus.

    Every setter returns the builder itself so calls can be chained. Nested
    declarations (``add_submenu``, ``add_split_panel``) return the nested
    builder instead.

    Args:
        parent: Builder of the enclosing menu (None for the root menu).
        terminal: Terminal to build for. Defaults to the parent's terminal, or
            one detected from the environment for a root builder.
    """

    def __init__(self, parent: MenuBuilder | None = None, terminal: Terminal | None = None):
        self.parent = parent
        if terminal is not None:
            self._terminal = terminal
        elif parent is not None:
            self._terminal = parent.get_terminal()
        else:
            self._terminal = terminal_from_system()

        self._registry = ItemRegistry()
        self._submenus: dict[str, Menu] = {}
        self._style = default_style_values()
        self._own_style: MenuStyle | None = None
        self._title: str | None = None
        self._go_back_text = DEFAULT_GO_BACK_TEXT
        self._exit_text = DEFAULT_EXIT_TEXT
        self._disable_default_items = False
        self._disabled = False
        self._is_built = False

    def _submenu_parent(self) -> MenuBuilder:
        return self

    @property
    def is_built(self) -> bool:
        return self._is_built

    @property
    def style_values(self) -> dict[str, Any]:
        """Copy of the current style option set."""
        return dict(self._style)

    def _set_style(self, name: str, value: Any) -> MenuBuilder:
        self._style[name] = value
        self._own_style = None
        return self

    # -- declarations ------------------------------------------------------

    def set_title(self, title: str) -> MenuBuilder:
        self._title = title
        return self

    def add_ascii_art(
        self,
        art: str,
        position: AsciiArtPosition | str = AsciiArtPosition.CENTER,
        alt: str = "",
    ) -> MenuBuilder:
        return self.add_menu_item(AsciiArtItem(art, position, alt))

    def add_split_panel(self) -> SplitItemBuilder:
        """Declare a split panel at the current position and return its builder."""
        builder = SplitItemBuilder(self)
        self._registry.reserve(PlaceholderKind.SPLIT, builder)
        return builder

    def end(self) -> MenuBuilder:
        """Return the parent builder, for chaining back out of a submenu."""
        if self.parent is None:
            raise InvalidStateError("The root menu has no parent builder")
        return self.parent

    def disable_menu(self) -> MenuBuilder:
        """Show this submenu's entry item but refuse to enter it.

        Raises:
            InvalidStateError: If called on the root menu's builder.
        """
        if self.parent is None:
            raise InvalidStateError("You can't disable the root menu")
        self._disabled = True
        return self

    def is_menu_disabled(self) -> bool:
        return self._disabled

    def set_go_back_button_text(self, text: str) -> MenuBuilder:
        self._go_back_text = text
        return self

    def set_exit_button_text(self, text: str) -> MenuBuilder:
        self._exit_text = text
        return self

    def disable_default_items(self) -> MenuBuilder:
        self._disable_default_items = True
        return self

    # -- terminal ----------------------------------------------------------

    def set_terminal(self, terminal: Terminal) -> MenuBuilder:
        self._terminal = terminal
        self._own_style = None
        return self

    def get_terminal(self) -> Terminal:
        return self._terminal

    # -- style -------------------------------------------------------------

    def set_foreground_colour(self, colour: str, fallback: str | None = None) -> MenuBuilder:
        return self._set_style("fg", validate_colour(self._terminal, colour, fallback))

    def set_background_colour(self, colour: str, fallback: str | None = None) -> MenuBuilder:
        return self._set_style("bg", validate_colour(self._terminal, colour, fallback))

    def set_width(self, width: int) -> MenuBuilder:
        return self._set_style("width", _check_size("Width", width))

    def set_padding(self, top_bottom: int, left_right: int | None = None) -> MenuBuilder:
        if left_right is None:
            left_right = top_bottom
        _check_size("Padding", top_bottom)
        _check_size("Padding", left_right)
        self.set_padding_top_bottom(top_bottom)
        return self.set_padding_left_right(left_right)

    def set_padding_top_bottom(self, top_bottom: int) -> MenuBuilder:
        return self._set_style("padding_top_bottom", _check_size("Padding", top_bottom))

    def set_padding_left_right(self, left_right: int) -> MenuBuilder:
        return self._set_style("padding_left_right", _check_size("Padding", left_right))

    def set_margin_auto(self) -> MenuBuilder:
        return self._set_style("margin_auto", True)

    def set_margin(self, margin: int) -> MenuBuilder:
        _check_size("Margin", margin)
        self._set_style("margin_auto", False)
        return self._set_style("margin", margin)

    def set_selected_marker(self, marker: str) -> MenuBuilder:
        return self._set_style("selected_marker", marker)

    def set_unselected_marker(self, marker: str) -> MenuBuilder:
        return self._set_style("unselected_marker", marker)

    def set_item_extra(self, extra: str) -> MenuBuilder:
        return self._set_style("item_extra", extra)

    def set_title_separator(self, separator: str) -> MenuBuilder:
        return self._set_style("title_separator", separator)

    def set_border(
        self,
        top_width: int,
        right_width: int | str | None = None,
        bottom_width: int | str | None = None,
        left_width: int | str | None = None,
        colour: str | None = None,
    ) -> MenuBuilder:
        """Set border widths and colour with CSS-like shorthand.

        The first non-integer argument after ``top_width`` is taken as the
        colour, and the sides it left unset copy the sides already given:
        right from top, bottom from top, left from right.

            set_border(1)                  # 1 1 1 1
            set_border(1, "red")           # 1 1 1 1, red
            set_border(1, 2, "red")        # 1 2 1 2, red
            set_border(1, 2, 3, "red")     # 1 2 3 2, red
            set_border(1, 2, 3, 4, "red")  # 1 2 3 4, red

        Raises:
            InvalidArgumentError: If ``top_width`` is not an integer or the
                colour is neither a string nor None.
        """
        _check_size("Border width", top_width)

        if not _is_width(right_width):
            colour = right_width
            right_width = bottom_width = left_width = top_width
        elif not _is_width(bottom_width):
            colour = bottom_width
            bottom_width = top_width
            left_width = right_width
        elif not _is_width(left_width):
            colour = left_width
            left_width = right_width

        if colour is not None and not isinstance(colour, str):
            raise InvalidArgumentError(f"Invalid colour: {colour!r}")
        for width in (right_width, bottom_width, left_width):
            _check_size("Border width", width)

        self.set_border_top_width(top_width)
        self.set_border_right_width(right_width)
        self.set_border_bottom_width(bottom_width)
        self.set_border_left_width(left_width)

        if colour is not None:
            self._set_style("border_colour", colour)
        return self

    def set_border_top_width(self, width: int) -> MenuBuilder:
        return self._set_style("border_top_width", _check_size("Border width", width))

    def set_border_right_width(self, width: int) -> MenuBuilder:
        return self._set_style("border_right_width", _check_size("Border width", width))

    def set_border_bottom_width(self, width: int) -> MenuBuilder:
        return self._set_style("border_bottom_width", _check_size("Border width", width))

    def set_border_left_width(self, width: int) -> MenuBuilder:
        return self._set_style("border_left_width", _check_size("Border width", width))

    def set_border_colour(self, colour: str, fallback: str | None = None) -> MenuBuilder:
        """Set the border colour; it is checked against the terminal at build time."""
        self._set_style("border_colour", colour)
        return self._set_style("border_colour_fallback", fallback)

    def own_style(self) -> MenuStyle:
        """Style built from this builder's own options, ignoring the cascade."""
        if self._own_style is None:
            self._own_style = build_style(self._terminal, self._style)
        return self._own_style

    def get_menu_style(self) -> MenuStyle:
        """Style this builder's menu will use after the parent cascade."""
        return resolve_style(self)

    # -- build -------------------------------------------------------------

    def _default_items(self) -> list[MenuItem]:
        items: list[MenuItem] = []
        if self.parent is not None:
            items.append(SelectableItem(self._go_back_text, GoBackAction()))
        items.append(SelectableItem(self._exit_text, ExitAction()))
        return items

    def _entry_shows_extra(self, entry: Entry) -> bool:
        if isinstance(entry, MenuItem):
            return entry.shows_item_extra()
        if entry.kind == PlaceholderKind.SPLIT:
            return self._registry.builder_for(entry).items_have_extra()
        return False

    def _build_split_item(self, token: PlaceholderToken, builder: SplitItemBuilder) -> SplitItem:
        return builder.build()

    def declares_submenu(self, key: str) -> bool:
        """Whether ``key`` is declared here or in one of this menu's split panels."""
        if self._registry.has_key(PlaceholderKind.SUBMENU, key):
            return True
        return any(
            split_builder._registry.has_key(PlaceholderKind.SUBMENU, key)
            for _, split_builder in self._registry.builders(PlaceholderKind.SPLIT)
        )

    def get_submenu(self, key: str) -> Menu:
        """Return the built submenu declared under ``key``.

        Raises:
            InvalidStateError: If the menu has not been built since ``key``
                was declared.
            InvalidArgumentError: If no submenu was declared under ``key``.
        """
        if key in self._submenus:
            return self._submenus[key]
        for _, split_builder in self._registry.builders(PlaceholderKind.SPLIT):
            if key in split_builder._submenus:
                return split_builder._submenus[key]

        if not self._is_built or self.declares_submenu(key):
            raise InvalidStateError(f'Menu: "{key}" cannot be retrieved until menu has been built')
        raise InvalidArgumentError(f"No submenu declared with key {key!r}")

    def build(self) -> Menu:
        """Build the menu, its split panels and submenus.

        Can be called again; each call rebuilds the whole tree from the
        current declarations.
        """
        self._is_built = True
        self._submenus = {}
        self._own_style = None

        entries = self._registry.entries()
        if not self._disable_default_items:
            entries.extend(self._default_items())
        logger.debug(f"Building menu {self._title!r} from {len(entries)} entries")

        # Nested builders defer to this style, so it must be final before they build.
        self._style["displays_extra"] = any(self._entry_shows_extra(entry) for entry in entries)
        style = self.get_menu_style()

        entries = self._registry.resolve(entries, PlaceholderKind.SPLIT, self._build_split_item)
        items = self._registry.resolve(entries, PlaceholderKind.SUBMENU, self._build_submenu)

        menu = Menu(self._title, items, self._terminal, style)

        for submenu in self._submenus.values():
            submenu.set_parent(menu)
        for _, split_builder in self._registry.builders(PlaceholderKind.SPLIT):
            split_builder.set_submenu_parents(menu)

        return menu

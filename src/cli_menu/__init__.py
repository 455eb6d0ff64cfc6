"""Declarative builder for styled terminal menus.

Describe a menu with chained builder calls and get back an immutable tree of
items, split panels and submenus with their styles resolved.

Example:
    from cli_menu import MenuBuilder

    builder = MenuBuilder().set_title("Main").add_item("Run", run)
    builder.add_submenu("Options").add_checkbox_item("Verbose", toggle_verbose)
    menu = builder.build()
    options = builder.get_submenu("Options")
"""

from .actions import EnterSubMenuAction, ExitAction, GoBackAction
from .builder import MenuBuilder, SplitItemBuilder
from .colours import validate_colour
from .components import (
    AsciiArtItem,
    AsciiArtPosition,
    CheckboxItem,
    LineBreakItem,
    MenuItem,
    MenuMenuItem,
    RadioItem,
    SelectableItem,
    SplitItem,
    StaticItem,
)
from .errors import CliMenuError, InvalidArgumentError, InvalidStateError, MenuDisabledError
from .menu import Menu
from .registry import ItemRegistry, PlaceholderKind, PlaceholderToken
from .style import DEFAULT_STYLE_VALUES, MenuStyle, default_style_values, resolve_style
from .terminal import RichTerminal, Terminal, terminal_from_system

__all__ = [
    # Builders
    "MenuBuilder",
    "SplitItemBuilder",
    "Menu",
    # Components
    "MenuItem",
    "SelectableItem",
    "CheckboxItem",
    "RadioItem",
    "StaticItem",
    "LineBreakItem",
    "AsciiArtItem",
    "AsciiArtPosition",
    "SplitItem",
    "MenuMenuItem",
    # Actions
    "GoBackAction",
    "ExitAction",
    "EnterSubMenuAction",
    # Styling
    "MenuStyle",
    "DEFAULT_STYLE_VALUES",
    "default_style_values",
    "resolve_style",
    "validate_colour",
    # Terminal
    "Terminal",
    "RichTerminal",
    "terminal_from_system",
    # Registry
    "ItemRegistry",
    "PlaceholderKind",
    "PlaceholderToken",
    # Errors
    "CliMenuError",
    "InvalidStateError",
    "InvalidArgumentError",
    "MenuDisabledError",
]

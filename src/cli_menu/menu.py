"""The built menu tree.

A ``Menu`` is what ``MenuBuilder.build()`` returns: a title, an ordered tuple
of items, the terminal and the resolved style. Its structure never changes
after construction; only the parent back-reference is wired afterwards, by the
builder that built the parent.
"""

from __future__ import annotations

from typing import Iterator

from .components import MenuItem, MenuMenuItem, SplitItem
from .errors import InvalidStateError
from .style import MenuStyle, build_style, default_style_values
from .terminal import Terminal, terminal_from_system


class Menu:
    """A built, immutable menu.

    Args:
        title: Menu title, or None for an untitled menu.
        items: Items in display order.
        terminal: Terminal to draw on (detected from the environment if None).
        style: Resolved style (default style if None).

    Raises:
        InvalidStateError: If ``items`` contains anything that is not a built
            MenuItem, such as an unresolved placeholder.
    """

    def __init__(
        self,
        title: str | None,
        items: list[MenuItem],
        terminal: Terminal | None = None,
        style: MenuStyle | None = None,
    ):
        unresolved = [item for item in items if not isinstance(item, MenuItem)]
        if unresolved:
            raise InvalidStateError(f"Menu contains unresolved entries: {unresolved!r}")

        self.title = title
        self._items = tuple(items)
        self.terminal = terminal or terminal_from_system()
        self.style = style or build_style(self.terminal, default_style_values())
        self._parent: Menu | None = None
        self._open = False

    @property
    def items(self) -> tuple[MenuItem, ...]:
        return self._items

    @property
    def parent(self) -> Menu | None:
        return self._parent

    def set_parent(self, parent: Menu) -> None:
        self._parent = parent

    def submenus(self) -> Iterator[Menu]:
        """Yield direct submenus, including those nested in split items."""
        for item in self._items:
            if isinstance(item, MenuMenuItem):
                yield item.submenu
            elif isinstance(item, SplitItem):
                for nested in item.items:
                    if isinstance(nested, MenuMenuItem):
                        yield nested.submenu

    def selectable_items(self) -> list[MenuItem]:
        return [item for item in self._items if item.can_select()]

    # -- navigation state --------------------------------------------------

    @property
    def is_open(self) -> bool:
        return self._open

    def open(self) -> None:
        self._open = True

    def close_this(self) -> None:
        """Close this menu only."""
        self._open = False

    def close(self) -> None:
        """Close this menu and all of its ancestors."""
        menu: Menu | None = self
        while menu is not None:
            menu.close_this()
            menu = menu.parent

    def __repr__(self) -> str:
        return f"Menu(title={self.title!r}, items={len(self._items)})"

"""Built-in item actions.

Actions are callables receiving the menu whose item was activated. They only
move the open/closed navigation state around; drawing the newly opened menu
is the job of whatever loop invoked them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .errors import MenuDisabledError

if TYPE_CHECKING:
    from .menu import Menu


class GoBackAction:
    """Close the current menu and reopen its parent."""

    def __call__(self, menu: Menu) -> Menu | None:
        parent = menu.parent
        if parent is None:
            return None
        menu.close_this()
        parent.open()
        return parent

    def __eq__(self, other: object) -> bool:
        return isinstance(other, GoBackAction)

    def __hash__(self) -> int:
        return hash(GoBackAction)


class ExitAction:
    """Close the current menu and every menu above it."""

    def __call__(self, menu: Menu) -> None:
        menu.close()

    def __eq__(self, other: object) -> bool:
        return isinstance(other, ExitAction)

    def __hash__(self) -> int:
        return hash(ExitAction)


class EnterSubMenuAction:
    """Leave the current menu for a submenu.

    Raises:
        MenuDisabledError: If the submenu was declared disabled.
    """

    def __init__(self, submenu: Menu, disabled: bool = False):
        self.submenu = submenu
        self.disabled = disabled

    def __call__(self, menu: Menu) -> Menu:
        if self.disabled:
            raise MenuDisabledError(self.submenu.title)
        menu.close_this()
        self.submenu.open()
        return self.submenu

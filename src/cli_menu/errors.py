"""Exceptions raised while declaring and building menus."""

from __future__ import annotations


class CliMenuError(Exception):
    """Base error for menu construction."""


class InvalidStateError(CliMenuError, RuntimeError):
    """Raised when an operation is not allowed in the builder's current state."""


class InvalidArgumentError(CliMenuError, ValueError):
    """Raised when a declaration receives a value it cannot use."""


class MenuDisabledError(CliMenuError):
    """Raised when navigating into a submenu that was declared disabled."""

    def __init__(self, title: str | None):
        self.title = title
        super().__init__(f"Menu is disabled: {title or '<untitled>'}")

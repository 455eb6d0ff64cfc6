"""Pytest fixtures for cli-menu tests."""

from dataclasses import dataclass

import pytest


@dataclass
class FakeTerminal:
    """Terminal with fixed capabilities."""

    width: int = 120
    colour_support: int = 256


@pytest.fixture
def terminal():
    """A 120 column, 256 colour terminal."""
    return FakeTerminal()


@pytest.fixture
def basic_terminal():
    """A 120 column terminal limited to the 8 standard colours."""
    return FakeTerminal(colour_support=8)


@pytest.fixture
def make_builder(terminal):
    """Factory for root builders bound to the fake terminal."""
    from cli_menu import MenuBuilder

    def _make():
        return MenuBuilder(terminal=terminal)

    return _make


@pytest.fixture
def noop():
    """Action that does nothing."""
    return lambda menu: None

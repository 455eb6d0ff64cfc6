from __future__ import annotations

import pytest

from cli_menu import InvalidArgumentError, validate_colour
from conftest import FakeTerminal


def test_standard_colour_renders_everywhere():
    assert validate_colour(FakeTerminal(colour_support=0), "red") == "red"


def test_256_colour_on_capable_terminal(terminal):
    assert validate_colour(terminal, "208") == "208"
    assert validate_colour(terminal, "grey50") == "grey50"


def test_256_colour_uses_fallback_on_basic_terminal(basic_terminal):
    assert validate_colour(basic_terminal, "208", "yellow") == "yellow"


def test_256_colour_without_fallback_fails(basic_terminal):
    with pytest.raises(InvalidArgumentError, match="no fallback"):
        validate_colour(basic_terminal, "208")


def test_unrenderable_fallback_fails(basic_terminal):
    with pytest.raises(InvalidArgumentError):
        validate_colour(basic_terminal, "#ff8800", "grey50")


def test_truecolor_needs_truecolor_terminal(terminal):
    assert validate_colour(terminal, "#ff8800", "208") == "208"
    assert validate_colour(FakeTerminal(colour_support=16_777_216), "#ff8800") == "#ff8800"


@pytest.mark.parametrize("colour", ["not-a-colour", "300", ""])
def test_malformed_colour_fails(terminal, colour):
    with pytest.raises(InvalidArgumentError):
        validate_colour(terminal, colour)


def test_builder_validates_foreground_immediately(make_builder, basic_terminal):
    from cli_menu import MenuBuilder

    builder = MenuBuilder(terminal=basic_terminal)
    with pytest.raises(InvalidArgumentError):
        builder.set_foreground_colour("grey50")

    builder.set_background_colour("grey50", "black")
    assert builder.style_values["bg"] == "black"

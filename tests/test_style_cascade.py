from __future__ import annotations

import pytest

from cli_menu import (
    DEFAULT_STYLE_VALUES,
    InvalidArgumentError,
    MenuBuilder,
    MenuStyle,
    resolve_style,
)
from conftest import FakeTerminal


def test_root_builder_owns_fresh_style(make_builder):
    style = make_builder().get_menu_style()
    assert isinstance(style, MenuStyle)
    assert style.fg == DEFAULT_STYLE_VALUES["fg"]
    assert style.bg == DEFAULT_STYLE_VALUES["bg"]


def test_unstyled_submenu_shares_parent_style_object(make_builder):
    root = make_builder().set_background_colour("red")
    root.add_submenu("Child")

    menu = root.build()
    child = root.get_submenu("Child")

    assert child.style is menu.style


def test_unstyled_chain_shares_nearest_styled_ancestor(make_builder):
    root = make_builder().set_foreground_colour("green")
    middle = root.add_submenu("Middle").set_width(60)
    leaf = middle.add_submenu("Leaf")

    root.build()
    middle_menu = root.get_submenu("Middle")
    leaf_menu = middle.get_submenu("Leaf")

    assert middle_menu.style is not root.get_menu_style()
    assert leaf_menu.style is middle_menu.style
    assert resolve_style(leaf) is resolve_style(middle)


def test_single_override_pins_whole_style(make_builder):
    root = make_builder().set_foreground_colour("green").set_padding(4)
    child = root.add_submenu("Child").set_width(50)

    root.build()
    style = root.get_submenu("Child").style

    # No merging with the parent: everything except the width is a default.
    assert style.width == 50
    assert style.fg == DEFAULT_STYLE_VALUES["fg"]
    assert style.padding_top_bottom == DEFAULT_STYLE_VALUES["padding_top_bottom"]
    assert child.style_values != DEFAULT_STYLE_VALUES


def test_submenu_with_extra_items_owns_style(make_builder, noop):
    root = make_builder()
    root.add_submenu("Child").add_item("Extra", noop, show_item_extra=True)

    menu = root.build()
    child = root.get_submenu("Child")

    assert child.style is not menu.style
    assert child.style.displays_extra is True
    assert menu.style.displays_extra is False


def test_displays_extra_false_without_extra_items(make_builder, noop):
    menu = make_builder().add_item("One", noop).add_item("Two", noop).build()
    assert menu.style.displays_extra is False


def test_displays_extra_true_with_extra_item(make_builder, noop):
    menu = make_builder().add_item("One", noop).add_item("Two", noop, True).build()
    assert menu.style.displays_extra is True


def test_displays_extra_sees_items_inside_split_panel(make_builder, noop):
    builder = make_builder()
    builder.add_split_panel().add_item("Left", noop).add_item("Right", noop, True)
    assert builder.build().style.displays_extra is True


def test_style_is_cached_until_option_changes(make_builder):
    builder = make_builder()
    first = builder.get_menu_style()
    assert builder.get_menu_style() is first

    builder.set_width(40)
    assert builder.get_menu_style() is not first
    assert builder.get_menu_style().width == 40


def test_width_clamped_to_terminal():
    builder = MenuBuilder(terminal=FakeTerminal(width=60)).set_width(200)
    assert builder.build().style.width == 60


def test_margin_auto_and_explicit_margin_are_exclusive(make_builder):
    builder = make_builder().set_width(100).set_margin_auto()
    style = builder.build().style
    assert style.margin_auto is True
    assert style.resolved_margin == 10

    style = builder.set_margin(5).build().style
    assert style.margin_auto is False
    assert style.resolved_margin == 5


def test_padding_shorthand(make_builder):
    values = make_builder().set_padding(3).style_values
    assert (values["padding_top_bottom"], values["padding_left_right"]) == (3, 3)

    values = make_builder().set_padding(1, 6).style_values
    assert (values["padding_top_bottom"], values["padding_left_right"]) == (1, 6)


def test_content_width_accounts_for_padding_border_and_extra(make_builder, noop):
    builder = (
        make_builder()
        .set_width(50)
        .set_padding(1, 2)
        .set_border(1)
        .set_item_extra("[!]")
        .add_item("Flagged", noop, show_item_extra=True)
    )
    style = builder.build().style
    assert style.content_width == 50 - 4 - 2 - (3 + 2)


def test_marker_and_separator_setters(make_builder):
    style = (
        make_builder()
        .set_selected_marker(">")
        .set_unselected_marker(" ")
        .set_title_separator("-")
        .build()
        .style
    )
    assert (style.selected_marker, style.unselected_marker) == (">", " ")
    assert style.title_separator == "-"


def test_negative_width_rejected(make_builder):
    with pytest.raises(InvalidArgumentError):
        make_builder().set_width(-1)


def test_style_values_returns_copy(make_builder):
    builder = make_builder()
    builder.style_values["fg"] = "red"
    assert builder.style_values["fg"] == DEFAULT_STYLE_VALUES["fg"]


def test_set_margin_rejects_negative_without_partial_update(make_builder):
    builder = make_builder().set_margin_auto()
    with pytest.raises(InvalidArgumentError):
        builder.set_margin(-1)
    assert builder.style_values["margin_auto"] is True
    assert builder.style_values["margin"] == DEFAULT_STYLE_VALUES["margin"]


def test_set_padding_rejects_negative_without_partial_update(make_builder):
    builder = make_builder()
    with pytest.raises(InvalidArgumentError):
        builder.set_padding(5, -1)
    assert builder.style_values == DEFAULT_STYLE_VALUES


def test_failed_setter_keeps_submenu_inheriting_parent_style(make_builder):
    root = make_builder().set_width(80)
    child = root.add_submenu("Child")
    with pytest.raises(InvalidArgumentError):
        child.set_margin(-3)

    menu = root.build()
    assert root.get_submenu("Child").style is menu.style

from __future__ import annotations

import pytest

from cli_menu import (
    AsciiArtItem,
    CheckboxItem,
    InvalidArgumentError,
    LineBreakItem,
    MenuItem,
    RadioItem,
    SelectableItem,
    SplitItem,
    StaticItem,
)


def test_base_item_is_inert():
    item = MenuItem("plain")
    assert not item.can_select()
    assert not item.shows_item_extra()
    assert item.get_selectable_action() is None


def test_static_item_not_selectable():
    assert not StaticItem("text").can_select()


def test_selectable_item(noop):
    item = SelectableItem("Go", noop, show_item_extra=True)
    assert item.can_select()
    assert item.shows_item_extra()
    assert item.get_selectable_action() is noop


def test_disabled_selectable_item(noop):
    assert not SelectableItem("Go", noop, disabled=True).can_select()


def test_checkbox_toggle(noop):
    item = CheckboxItem("Debug", noop)
    item.toggle()
    assert item.checked is True
    item.toggle()
    assert item.checked is False


def test_radio_select_unchecks_siblings(noop):
    first = RadioItem("A", noop, checked=True)
    second = RadioItem("B", noop)
    other = CheckboxItem("C", noop, checked=True)

    second.select([first, second, other])

    assert (first.checked, second.checked) == (False, True)
    assert other.checked is True


def test_line_break_needs_a_line():
    with pytest.raises(InvalidArgumentError):
        LineBreakItem("-", 0)


def test_ascii_art_width():
    assert AsciiArtItem("ab\nabcd\n").art_width == 4


def test_split_item_aggregates_children(noop):
    split = SplitItem(items=[StaticItem("a"), SelectableItem("b", noop, show_item_extra=True)])
    assert isinstance(split.items, tuple)
    assert split.can_select()
    assert split.shows_item_extra()


def test_split_item_with_only_static_children():
    split = SplitItem(items=[StaticItem("a"), StaticItem("b")])
    assert not split.can_select()
    assert not split.shows_item_extra()

import dataclasses

import pytest

from ytt.overlay import strip_ansi
from ytt.style import (
    Style,
    hangul_filler_border,
    height,
    join_horizontal,
    join_vertical,
    normal_border,
    width,
)


def test_hangul_border_uses_filler_everywhere():
    border = hangul_filler_border()
    values = {getattr(border, f.name) for f in dataclasses.fields(border)}
    assert values == {"ㅤ"}


def test_normal_border_corners():
    border = normal_border()
    assert border.top == "─"
    assert (border.top_left, border.bottom_right) == ("┌", "┘")


def test_plain_style_leaves_text_unchanged():
    assert Style().render("abc\nde") == "abc\nde" + " "


def test_colours_are_invisible_in_width():
    rendered = Style(foreground="#ff0000", background="#000000", underline=True).render("abc")
    assert strip_ansi(rendered) == "abc"
    assert rendered != "abc"
    assert width(rendered) == len("abc")


def test_invalid_colour_is_ignored():
    assert Style(foreground="not-a-colour").render("abc") == "abc"


def test_padding_adds_cells_and_lines():
    rendered = Style(padding=(1, 2, 1, 3)).render("abc")
    assert width(rendered) == 3 + len("abc") + 2
    assert height(rendered) == 1 + 1 + 1
    assert strip_ansi(rendered).split("\n")[1].strip() == "abc"


def test_border_wraps_block():
    rendered = Style(border=normal_border()).render("ab\ncd")
    lines = rendered.split("\n")
    assert height(rendered) == 2 + 2
    assert lines[0].startswith("┌") and lines[0].endswith("┐")
    assert lines[1] == "│ab│"
    assert lines[-1].startswith("└") and lines[-1].endswith("┘")


@pytest.mark.parametrize("size", [5, 10])
def test_minimum_width_and_height(size):
    rendered = Style(width=size, height=size).render("x")
    assert width(rendered) == size
    assert height(rendered) == size


def test_margin_surrounds_block():
    rendered = Style(margin=(1, 1, 1, 2)).render("ab")
    lines = rendered.split("\n")
    assert lines[1] == "  ab "
    assert lines[0].strip() == "" and lines[2].strip() == ""


def test_height_counts_lines():
    assert height("a\nb\nc") == len(["a", "b", "c"])


def test_join_horizontal_pads_blocks():
    joined = join_horizontal("ab\nc", "X\nY\nZ")
    assert joined.split("\n") == ["abX", "c Y", "  Z"]
    assert width(joined) == width("ab") + width("X")


def test_join_vertical_aligns_left():
    joined = join_vertical("abc", "d")
    assert joined.split("\n") == ["abc", "d  "]
    assert height(joined) == height("abc") + height("d")


def test_join_empty():
    assert join_horizontal() == ""
    assert join_vertical() == ""
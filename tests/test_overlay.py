import pytest

from ytt.overlay import overlay, overlay_center, string_width, strip_ansi, truncate


def test_strip_ansi_removes_sgr():
    assert strip_ansi("\x1b[31mred\x1b[0m") == "red"


def test_string_width_ignores_escapes():
    assert string_width("\x1b[1mabc\x1b[0m") == len("abc")


def test_string_width_counts_wide_characters():
    assert string_width("漢") == 2


def test_truncate_keeps_escape_sequences():
    assert truncate("\x1b[31mhello\x1b[0m", 3) == "\x1b[31mhel\x1b[0m"


def test_truncate_to_zero_is_empty():
    assert truncate("hello", 0) == ""


def test_truncate_shorter_text_is_unchanged():
    assert truncate("abc", 10) == "abc"


def test_overlay_replaces_cells():
    bg = "hello world"
    assert overlay(bg, "XY", 0, 2, False) == bg[:2] + "XY" + bg[4:]


def test_overlay_pads_short_background_line():
    assert overlay("ab", "Z", 0, 5, False) == "ab" + " " * 3 + "Z"


def test_overlay_adds_missing_rows():
    assert overlay("a", "b", 2, 0, False) == "a\n\nb"


def test_overlay_multiline():
    bg = "aaaa\nbbbb\ncccc"
    result = overlay(bg, "X\nY", 1, 1, False).split("\n")
    assert result == ["aaaa", "bXbb", "cYcc"]


def test_margin_whitespace_shows_background():
    bg = "abcdef"
    assert overlay(bg, " X ", 0, 1, True) == bg[:2] + "X" + bg[3:]


def test_margin_whitespace_overwrites_when_not_ignored():
    bg = "abcdef"
    assert overlay(bg, " X ", 0, 1, False) == bg[:1] + " X " + bg[4:]


def test_blank_overlay_with_ignore_keeps_background():
    assert overlay("abcdef", "   ", 0, 1, True) == "abcdef"


def test_overlay_carries_style_to_right_part():
    bg = "\x1b[31mabcdef\x1b[0m"
    result = overlay(bg, "XY", 0, 2, False)
    assert strip_ansi(result) == "abXYef"
    assert result.split("XY")[1].startswith("\x1b[31m")


@pytest.mark.parametrize("col", [0, 3, 9, 15])
def test_overlay_width_invariant(col):
    bg = "0123456789"
    ov = "abc"
    result = overlay(bg, ov, 0, col, False)
    assert string_width(result) == max(len(bg), col + len(ov))
    assert result.startswith(bg[:col])


def test_overlay_center():
    bg = "\n".join(["....."] * 5)
    lines = overlay_center(bg, "X", False).split("\n")
    assert lines[2] == "." * 2 + "X" + "." * 2
    assert [line for i, line in enumerate(lines) if i != 2] == ["....."] * 4


def test_negative_row_raises():
    with pytest.raises(ValueError):
        overlay("a", "b", -1, 0, False)
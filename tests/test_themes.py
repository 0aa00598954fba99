import json
from pathlib import Path

import pytest

import ytt.themes as themes_module
from ytt.themes import Color, Theme, ThemeState, default_themes_path

KEYS = [
    "name", "black", "red", "green", "yellow", "blue", "purple", "cyan", "white",
    "brightBlack", "brightRed", "brightGreen", "brightYellow", "brightBlue",
    "brightPurple", "brightCyan", "brightWhite", "background", "foreground",
    "cursorColor", "selectionBackground",
]


def theme_data(name):
    data = {key: f"#{index:06x}" for index, key in enumerate(KEYS)}
    data["name"] = name
    return data


@pytest.fixture
def state(tmp_path):
    path = tmp_path / "themes.json"
    path.write_text(json.dumps([theme_data("Dracula"), theme_data("Nord")]), encoding="utf-8")
    s = ThemeState()
    s.load(path)
    return s


def test_from_dict_reads_camel_case_keys():
    data = theme_data("Dracula")
    theme = Theme.from_dict(data)
    assert theme.bright_black == data["brightBlack"]
    assert theme.cursor_color == data["cursorColor"]
    assert theme.selection_background == data["selectionBackground"]


def test_dict_round_trip():
    data = theme_data("Dracula")
    assert Theme.from_dict(data).to_dict() == data


def test_missing_keys_are_empty():
    theme = Theme.from_dict({"name": "Bare"})
    assert theme.name == "Bare"
    assert theme.red == ""


def test_load_and_activate(state):
    assert [t.name for t in state.themes] == ["Dracula", "Nord"]
    assert state.active().name == "Dracula"
    assert state.activate("Nord") is True
    assert state.active().name == "Nord"
    assert state.activate("Missing") is False
    assert state.active().name == "Nord"


def test_load_rejects_non_list(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"name": "x"}), encoding="utf-8")
    with pytest.raises(ValueError):
        ThemeState().load(path)


def test_active_without_themes_raises():
    with pytest.raises(IndexError):
        ThemeState().active()


@pytest.mark.parametrize(
    "choice, attribute",
    [
        (Color.THEME_DEFAULT, "red"),
        (Color.PINK, "red"),
        ("", "red"),
        (Color.BLUE, "blue"),
        (Color.BRIGHT_CYAN, "bright_cyan"),
    ],
)
def test_accent_color(state, choice, attribute):
    state.accent = choice
    assert state.accent_color() == getattr(state.active(), attribute)


@pytest.mark.parametrize(
    "choice, attribute",
    [
        (Color.THEME_DEFAULT, "cursor_color"),
        (Color.PINK, "cursor_color"),
        ("Nonsense", "cursor_color"),
        (Color.RED, "red"),
        (Color.BRIGHT_YELLOW, "bright_yellow"),
    ],
)
def test_selection_color(state, choice, attribute):
    state.selection = choice
    assert state.selection_color() == getattr(state.active(), attribute)


def test_color_values_are_names():
    assert Color("BrightCyan") is Color.BRIGHT_CYAN
    assert Color("ThemeDefault") is Color.THEME_DEFAULT


def test_default_themes_path_is_in_package():
    assert default_themes_path().parent == Path(themes_module.__file__).resolve().parent
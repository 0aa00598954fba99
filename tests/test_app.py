import pytest

from ytt import app
from ytt.app import Model, parse_input
from ytt.cli import HELP_MESSAGE
from ytt.config import Config
from ytt.menu import MENU_ZONE
from ytt.messages import (
    KeyMsg,
    MouseButton,
    MouseClickMsg,
    MouseMotionMsg,
    MouseWheelMsg,
    QuitMsg,
    TickMsg,
    ViewMsg,
    WindowSizeMsg,
)
from ytt.overlay import strip_ansi
from ytt.playlists import Playlist
from ytt.themes import Theme, ThemeState
from ytt.zones import ZoneManager


@pytest.fixture
def setup(tmp_path):
    state = ThemeState(
        themes=[Theme(name="Dark", background="#000000", foreground="#ffffff",
                      red="#ff0000", cursor_color="#00ff00")]
    )
    zones = ZoneManager()
    playlists = [
        Playlist(id="PL" + "a" * 32, title="Morning Mix", channel="Alice"),
        Playlist(id="PL" + "b" * 32, title="Evening Jazz", channel="Bob"),
    ]
    model = Model(state, zones, playlists, Config(), tmp_path / "config.toml")
    return model, zones


def test_parse_keys():
    assert parse_input("q") == [KeyMsg("q")]
    assert parse_input("\x03") == [KeyMsg("ctrl+c")]
    assert parse_input("\x1b[A\x1b[B") == [KeyMsg("up"), KeyMsg("down")]
    assert parse_input("\t\x1b[Z\r") == [KeyMsg("tab"), KeyMsg("shift+tab"), KeyMsg("enter")]
    assert parse_input("\x1b") == [KeyMsg("esc")]
    assert parse_input(" ") == [KeyMsg("space")]


def test_parse_mouse():
    assert parse_input("\x1b[<2;5;3M") == [MouseClickMsg(4, 2, MouseButton.RIGHT)]
    assert parse_input("\x1b[<0;1;1M") == [MouseClickMsg(0, 0, MouseButton.LEFT)]
    assert parse_input("\x1b[<64;1;1M") == [MouseWheelMsg(0, 0, MouseButton.WHEEL_UP)]
    assert parse_input("\x1b[<65;2;2M") == [MouseWheelMsg(1, 1, MouseButton.WHEEL_DOWN)]
    assert parse_input("\x1b[<35;3;4M") == [MouseMotionMsg(2, 3, MouseButton.NONE)]
    assert parse_input("\x1b[<0;1;1m") == []


def test_menu_starts_open_and_esc_closes(setup):
    model, _ = setup
    assert model.menu_opened is True
    model.update(KeyMsg("esc"))
    assert model.menu_opened is False


def test_space_toggles_menu(setup):
    model, _ = setup
    model.update(KeyMsg("space"))
    assert model.menu_opened is False
    model.update(KeyMsg(" "))
    assert model.menu_opened is True
    assert model.open_at_center is True


def test_quit_keys(setup):
    model, _ = setup
    assert model.update(KeyMsg("q"))() == QuitMsg()
    assert model.update(KeyMsg("ctrl+c"))() == QuitMsg()


def test_tick_schedules_tick(setup):
    model, _ = setup
    command = model.update(TickMsg())
    assert command() == TickMsg()


def test_view_msg_switches_and_closes_menu(setup):
    model, _ = setup
    assert model.update(ViewMsg.CHANGE_THEME) is None
    assert model.current_view == ViewMsg.CHANGE_THEME
    assert model.menu_opened is False
    assert "Accent Color" in strip_ansi(model.view())


def test_menu_key_returns_goto(setup):
    model, _ = setup
    command = model.update(KeyMsg("t"))
    assert command() == ViewMsg.CHANGE_THEME


def test_right_click_opens_menu_at_pointer(setup):
    model, _ = setup
    model.update(MouseClickMsg(5, 3, MouseButton.RIGHT))
    assert model.menu_opened is False
    model.update(MouseClickMsg(5, 3, MouseButton.RIGHT))
    assert model.menu_opened is True
    assert model.open_at_center is False
    assert (model.open_at_x, model.open_at_y) == (5, 3)
    assert "Right Click" in strip_ansi(model.view())


def test_centered_menu_view(setup):
    model, zones = setup
    model.update(WindowSizeMsg(80, 30))
    text = strip_ansi(model.view())
    assert "Go to playlist picker" in text
    assert "Space" in text
    assert not zones.get(MENU_ZONE).is_zero()


def test_closed_menu_not_drawn(setup):
    model, zones = setup
    model.update(WindowSizeMsg(80, 30))
    model.update(KeyMsg("esc"))
    text = strip_ansi(model.view())
    assert "Go to playlist picker" not in text
    assert "Morning Mix" in text
    assert zones.get(MENU_ZONE).is_zero()


def test_left_click_outside_menu_closes(setup):
    model, zones = setup
    model.update(WindowSizeMsg(80, 30))
    model.view()
    assert not zones.get(MENU_ZONE).contains(79, 29)
    model.update(MouseClickMsg(79, 29))
    assert model.menu_opened is False


def test_left_click_inside_menu_keeps_open(setup):
    model, zones = setup
    model.update(WindowSizeMsg(80, 30))
    model.view()
    zone = zones.get(MENU_ZONE)
    model.update(MouseClickMsg(zone.start_x, zone.start_y))
    assert model.menu_opened is True


def test_keys_reach_view_when_menu_closed(setup):
    model, _ = setup
    model.update(WindowSizeMsg(80, 30))
    model.update(KeyMsg("esc"))
    model.update(KeyMsg("down"))
    assert model.playlist_view.list_view.cursor == 1


def test_main_help(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    assert app.main(["help"]) == 0
    assert HELP_MESSAGE in capsys.readouterr().out
    assert (tmp_path / ".config" / "ytt" / "config.toml").exists()
import dataclasses

import pytest

from ytt.messages import (
    KeyMsg,
    MouseButton,
    MouseClickMsg,
    MouseWheelMsg,
    ViewMsg,
    WindowSizeMsg,
    goto,
)


def test_view_ids_follow_declaration_order():
    assert goto(ViewMsg(0))() is ViewMsg.PLAYLISTS
    assert goto(ViewMsg(1))() is ViewMsg.CHANGE_THEME
    assert [int(view) for view in ViewMsg] == [0, 1]


@pytest.mark.parametrize("view", list(ViewMsg))
def test_goto_returns_command_yielding_view(view):
    command = goto(view)
    assert command() is view


def test_key_msg_string_is_key_name():
    assert str(KeyMsg("ctrl+c")) == "ctrl+c"


def test_messages_compare_by_value():
    assert MouseClickMsg(3, 4, MouseButton.RIGHT) == MouseClickMsg(3, 4, MouseButton.RIGHT)
    assert MouseClickMsg(3, 4, MouseButton.RIGHT) != MouseClickMsg(3, 4, MouseButton.LEFT)


def test_messages_are_immutable():
    msg = WindowSizeMsg(80, 24)
    with pytest.raises(dataclasses.FrozenInstanceError):
        msg.width = 100
    assert msg.width == 80
    assert msg == WindowSizeMsg(80, 24)


def test_wheel_message_defaults_to_wheel_down():
    assert MouseWheelMsg(0, 0).button is MouseButton.WHEEL_DOWN
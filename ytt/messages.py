"""Messages passed between the event loop and the views."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Callable


class ViewMsg(IntEnum):
    """Identifies which main view is shown."""

    PLAYLISTS = 0
    CHANGE_THEME = 1


class MouseButton(Enum):
    """Mouse buttons and wheel directions."""

    NONE = "none"
    LEFT = "left"
    MIDDLE = "middle"
    RIGHT = "right"
    WHEEL_UP = "wheelup"
    WHEEL_DOWN = "wheeldown"


@dataclass(frozen=True)
class TickMsg:
    """Periodic redraw request."""


@dataclass(frozen=True)
class QuitMsg:
    """Request to leave the program."""


@dataclass(frozen=True)
class KeyMsg:
    """A key press, named the way the terminal layer reports it (e.g. "ctrl+c")."""

    key: str

    def __str__(self) -> str:
        return self.key


@dataclass(frozen=True)
class MouseClickMsg:
    """A mouse button press at a cell."""

    x: int
    y: int
    button: MouseButton = MouseButton.LEFT


@dataclass(frozen=True)
class MouseMotionMsg:
    """The mouse moved to a cell."""

    x: int
    y: int
    button: MouseButton = MouseButton.NONE


@dataclass(frozen=True)
class MouseWheelMsg:
    """A wheel turn at a cell."""

    x: int
    y: int
    button: MouseButton = MouseButton.WHEEL_DOWN


@dataclass(frozen=True)
class WindowSizeMsg:
    """The terminal was resized."""

    width: int
    height: int


def goto(view: ViewMsg) -> Callable[[], ViewMsg]:
    """Return a command that switches to ``view`` when run."""

    def command() -> ViewMsg:
        return view

    return command
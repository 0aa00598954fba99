"""The terminal application: the top-level model, input parsing and the event loop."""

from __future__ import annotations

import os
import queue
import re
import select
import sys
import time
from concurrent.futures import Future, ThreadPoolExecutor
from pathlib import Path
from typing import Callable, Iterable

from blessed import Terminal

from ytt.cli import handle_args
from ytt.config import CONFIG_FILE_NAME, Config, config_dir
from ytt.menu import MENU_ZONE, Menu
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
from ytt.overlay import overlay, overlay_center
from ytt.player import Playback
from ytt.playlists import Playlist, PlaylistStore
from ytt.themes import Color, ThemeState, default_themes_path
from ytt.views import ChangeThemeView, PlaylistView
from ytt.ytdlp import YtDlpError, download_ytdlp
from ytt.zones import ZoneManager, zone_collision

TICK_INTERVAL = 0.25
SEEK_STEP = 10.0

Command = Callable[[], object]


def _cmd_tick() -> TickMsg:
    time.sleep(TICK_INTERVAL)
    return TickMsg()


def _quit() -> QuitMsg:
    return QuitMsg()


def _cmd_seek(playback: Playback, forward: bool) -> None:
    playback.seek(SEEK_STEP if forward else -SEEK_STEP)


class Model:
    """Top-level state: the current view and the global menu drawn over it."""

    def __init__(
        self,
        theme_state: ThemeState,
        zones: ZoneManager,
        playlists: Iterable[Playlist] = (),
        config: Config | None = None,
        config_path: str | Path | None = None,
    ) -> None:
        self.theme_state = theme_state
        self.zones = zones
        self.playlist_view = PlaylistView(playlists, theme_state, zones)
        self.change_theme_view = ChangeThemeView(theme_state, zones, config, config_path)
        self.menu = Menu(theme_state, zones)
        self.width = 0
        self.height = 0
        self.current_view = ViewMsg.PLAYLISTS
        self.menu_opened = True
        self.open_at_center = True
        self.open_at_x = 0
        self.open_at_y = 0

    def _active_view(self) -> PlaylistView | ChangeThemeView:
        if self.current_view == ViewMsg.CHANGE_THEME:
            return self.change_theme_view
        return self.playlist_view

    def update(self, msg: object) -> Command | None:
        """Apply a message; return a command to run next, or None."""
        if isinstance(msg, TickMsg):
            return _cmd_tick
        if isinstance(msg, ViewMsg):
            self.current_view = msg
            self.menu_opened = False
            return None
        if isinstance(msg, MouseClickMsg):
            if msg.button is MouseButton.RIGHT:
                self.open_at_center = False
                self.menu_opened = not self.menu_opened
                self.open_at_x, self.open_at_y = msg.x, msg.y
            elif msg.button is MouseButton.LEFT and self.menu_opened:
                if not zone_collision(self.zones.get(MENU_ZONE), msg):
                    self.menu_opened = False
        elif isinstance(msg, KeyMsg):
            key = str(msg)
            if key in (" ", "space"):
                self.open_at_center = True
                self.menu_opened = not self.menu_opened
            elif key == "esc":
                self.menu_opened = False
            elif key in ("q", "ctrl+c"):
                return _quit
        elif isinstance(msg, WindowSizeMsg):
            self.width, self.height = msg.width, msg.height
            self.menu.update(msg)
            self.playlist_view.update(msg)
            self.change_theme_view.update(msg)

        if not self.menu_opened:
            return self._active_view().update(msg)
        return self.menu.update(msg)

    def view(self) -> str:
        """Render the screen with the menu on top when it is open."""
        screen = overlay("", self._active_view().view(), 0, 0, True)
        if self.menu_opened:
            if self.open_at_center:
                screen = overlay_center(screen, self.menu.view(False), True)
            else:
                screen = overlay(
                    screen, self.menu.view(True), self.open_at_y, self.open_at_x, True
                )
        return self.zones.scan(screen)


_SGR_MOUSE = re.compile(r"\x1b\[<(\d+);(\d+);(\d+)([Mm])")
_SEQUENCES = {
    "\x1b[A": "up",
    "\x1b[B": "down",
    "\x1b[C": "right",
    "\x1b[D": "left",
    "\x1bOA": "up",
    "\x1bOB": "down",
    "\x1bOC": "right",
    "\x1bOD": "left",
    "\x1b[Z": "shift+tab",
}
_CONTROL = {
    "\r": "enter",
    "\n": "enter",
    "\t": "tab",
    "\x7f": "backspace",
    "\x08": "backspace",
    " ": "space",
    "\x1b": "esc",
}
_BUTTONS = {0: MouseButton.LEFT, 1: MouseButton.MIDDLE, 2: MouseButton.RIGHT}


def _mouse(code: int, x: int, y: int, pressed: bool) -> object | None:
    x -= 1
    y -= 1
    if code & 64:
        button = MouseButton.WHEEL_DOWN if code & 1 else MouseButton.WHEEL_UP
        return MouseWheelMsg(x, y, button) if pressed else None
    button = _BUTTONS.get(code & 3, MouseButton.NONE)
    if code & 32:
        return MouseMotionMsg(x, y, button)
    if not pressed:
        return None
    return MouseClickMsg(x, y, button)


def _key_name(ch: str) -> str:
    if ch in _CONTROL:
        return _CONTROL[ch]
    code = ord(ch)
    if 1 <= code <= 26:
        return "ctrl+" + chr(code + 96)
    return ch


def parse_input(data: str) -> list[object]:
    """Turn raw terminal input (keys and SGR mouse reports) into messages."""
    messages: list[object] = []
    pos = 0
    while pos < len(data):
        match = _SGR_MOUSE.match(data, pos)
        if match:
            code, x, y = (int(match.group(i)) for i in (1, 2, 3))
            msg = _mouse(code, x, y, match.group(4) == "M")
            if msg is not None:
                messages.append(msg)
            pos = match.end()
            continue
        for sequence, name in _SEQUENCES.items():
            if data.startswith(sequence, pos):
                messages.append(KeyMsg(name))
                pos += len(sequence)
                break
        else:
            messages.append(KeyMsg(_key_name(data[pos])))
            pos += 1
    return messages


_MOUSE_ON = "\x1b[?1002h\x1b[?1006h"
_MOUSE_OFF = "\x1b[?1002l\x1b[?1006l"


def _run(model: Model) -> None:
    term = Terminal()
    events: queue.Queue[object] = queue.Queue()
    pool = ThreadPoolExecutor(max_workers=4)

    def deliver(future: Future) -> None:
        if future.cancelled() or future.exception() is not None:
            return
        result = future.result()
        if result is not None:
            events.put(result)

    def dispatch(command: Command) -> None:
        pool.submit(command).add_done_callback(deliver)

    fd = sys.stdin.fileno()
    out = sys.stdout
    with term.fullscreen(), term.cbreak(), term.hidden_cursor():
        out.write(_MOUSE_ON)
        out.flush()
        try:
            size = (term.width, term.height)
            events.put(WindowSizeMsg(*size))
            events.put(TickMsg())
            while True:
                current = (term.width, term.height)
                if current != size:
                    size = current
                    events.put(WindowSizeMsg(*size))
                ready, _, _ = select.select([fd], [], [], 0.016)
                if ready:
                    data = os.read(fd, 4096).decode("utf-8", errors="replace")
                    for msg in parse_input(data):
                        events.put(msg)
                changed = False
                while True:
                    try:
                        msg = events.get_nowait()
                    except queue.Empty:
                        break
                    if isinstance(msg, QuitMsg):
                        return
                    command = model.update(msg)
                    changed = True
                    if command is not None:
                        dispatch(command)
                if changed:
                    out.write(term.home + term.clear + model.view())
                    out.flush()
        finally:
            out.write(_MOUSE_OFF)
            out.flush()
            pool.shutdown(wait=False, cancel_futures=True)


def main(argv: list[str] | None = None) -> int:
    """Start ytt; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    config_path = config_dir() / CONFIG_FILE_NAME
    config = Config.load(config_path)
    if not handle_args(args, config, config_path):
        return 0

    theme_state = ThemeState()
    try:
        theme_state.load(default_themes_path())
    except (OSError, ValueError) as exc:
        print("themes:", exc)
        return 1
    if not theme_state.themes:
        print("themes: no themes found")
        return 1

    try:
        download_ytdlp()
    except (YtDlpError, OSError) as exc:
        print(exc)
        return 1

    store = PlaylistStore()
    with ThreadPoolExecutor() as pool:
        futures = [pool.submit(store.fetch, playlist_id) for playlist_id in config.playlists]
    for future in futures:
        try:
            future.result()
        except (YtDlpError, ValueError) as exc:
            print(exc)
    playlists = [store.playlists[p] for p in config.playlists if p in store.playlists]

    theme_state.activate(config.theme_name)
    theme_state.selection = config.theme_accent or Color.THEME_DEFAULT
    theme_state.accent = config.theme_accent or Color.THEME_DEFAULT

    zones = ZoneManager()
    model = Model(theme_state, zones, playlists, config, config_path)
    try:
        _run(model)
    except OSError as exc:
        print("Error running program:", exc)
        return 1
    return 0
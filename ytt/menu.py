"""The global menu for switching between views."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Callable

from ytt.messages import KeyMsg, MouseClickMsg, MouseMotionMsg, ViewMsg, WindowSizeMsg, goto
from ytt.overlay import overlay
from ytt.style import Style, normal_border
from ytt.themes import ThemeState
from ytt.zones import ZoneManager, zone_collision

MENU_ZONE = "menu"


@dataclass(frozen=True)
class MenuEntry:
    """A key and what pressing it does."""

    key: str
    description: str


def _default_entries() -> list[MenuEntry]:
    return [
        MenuEntry("p", "Go to playlist picker"),
        MenuEntry("t", "Go to theme picker"),
    ]


_VIEWS = {"p": ViewMsg.PLAYLISTS, "t": ViewMsg.CHANGE_THEME}


def _goto_view(key: str) -> Callable[[], ViewMsg] | None:
    view = _VIEWS.get(key)
    return goto(view) if view is not None else None


class Menu:
    """A boxed list of entries; keys or clicks pick a view."""

    def __init__(
        self,
        theme_state: ThemeState,
        zones: ZoneManager,
        entries: list[MenuEntry] | None = None,
    ) -> None:
        self.theme_state = theme_state
        self.zones = zones
        self.entries = entries if entries is not None else _default_entries()
        self.width = 0
        self.height = 0
        self.mouse_hovered_on = -1

    def update(self, msg: object) -> Callable[[], ViewMsg] | None:
        """Handle a message; return a command switching views, or None."""
        if isinstance(msg, WindowSizeMsg):
            self.width, self.height = msg.width, msg.height
        elif isinstance(msg, MouseClickMsg):
            for entry in self.entries:
                if zone_collision(self.zones.get(entry.description), msg):
                    return _goto_view(entry.key)
        elif isinstance(msg, MouseMotionMsg):
            for index, entry in enumerate(self.entries):
                if zone_collision(self.zones.get(entry.description), msg):
                    self.mouse_hovered_on = index
                    return None
            self.mouse_hovered_on = -1
        elif isinstance(msg, KeyMsg):
            return _goto_view(str(msg))
        return None

    def view(self, click: bool) -> str:
        """Render the menu, labelled for opening by right click or by space."""
        theme = self.theme_state.active()
        base = Style(foreground=theme.foreground, background=theme.background)
        text_style = replace(base, padding=(0, 1, 0, 1))

        rows: list[str] = []
        for index, entry in enumerate(self.entries):
            content = self.zones.mark(entry.description, f"{entry.key}  {entry.description}")
            style = text_style
            if index == self.mouse_hovered_on:
                style = replace(style, foreground=self.theme_state.selection_color())
            rows.append(style.render(content))

        boxed = replace(
            base,
            border=normal_border(),
            border_foreground=theme.foreground,
            border_background=theme.background,
        ).render("\n".join(rows))

        label = base.render("Right Click" if click else "Space")
        boxed = overlay(boxed, label, 0, 1, False)
        return self.zones.mark(MENU_ZONE, boxed)
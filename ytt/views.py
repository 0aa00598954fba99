"""The playlist picker and the theme picker screens."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Callable, Iterable

from ytt.config import Config
from ytt.listview import ListEntry, ListView
from ytt.messages import (
    KeyMsg,
    MouseButton,
    MouseClickMsg,
    MouseMotionMsg,
    MouseWheelMsg,
    WindowSizeMsg,
)
from ytt.playlists import Playlist
from ytt.style import Style, join_horizontal, join_vertical, normal_border
from ytt.themes import Color, ThemeState
from ytt.zones import ZoneManager, zone_collision

TAB_THEMES = "Themes"
TAB_ACCENT = "Accent Color"
TAB_SELECTION = "Selection Color"
TABS = (TAB_THEMES, TAB_ACCENT, TAB_SELECTION)

_MOUSE_MESSAGES = (MouseClickMsg, MouseMotionMsg, MouseWheelMsg)


class PlaylistView:
    """Lists the known playlists by title and channel."""

    def __init__(
        self,
        playlists: Iterable[Playlist],
        theme_state: ThemeState,
        zones: ZoneManager,
    ) -> None:
        rows = [ListEntry(p.title, p.channel, p.id) for p in playlists]
        self.list_view = ListView(rows, "Playlists")
        self.theme_state = theme_state
        self.zones = zones
        self.width = 0
        self.height = 0

    def update(self, msg: object) -> None:
        """Apply a message to the view."""
        if isinstance(msg, WindowSizeMsg):
            self.width, self.height = msg.width, msg.height
        self.list_view.update(msg)
        return None

    def view(self) -> str:
        """Render the view filling the window."""
        theme = self.theme_state.active()
        style = Style(
            background=theme.background,
            width=self.width,
            height=self.height,
            padding=(0, 0, 0, 2),
        )
        return style.render(self.list_view.view(self.theme_state, self.zones))


class ChangeThemeView:
    """Tabs for choosing the theme, the accent colour and the selection colour."""

    def __init__(
        self,
        theme_state: ThemeState,
        zones: ZoneManager,
        config: Config | None = None,
        config_path: str | Path | None = None,
    ) -> None:
        self.theme_state = theme_state
        self.zones = zones
        self.config = config if config is not None else Config()
        self.config_path = config_path

        self.themes_list = ListView(
            [ListEntry(theme.name) for theme in theme_state.themes], "Themes"
        )
        self.accents_list = ListView([ListEntry(c.value) for c in Color], "Accent Colors")
        self.selection_list = ListView(
            [ListEntry(c.value) for c in Color], "Selection Colors"
        )

        if theme_state.themes:
            self.themes_list.selected_name = theme_state.active().name
        self.accents_list.selected_name = str(theme_state.accent)
        self.selection_list.selected_name = str(theme_state.selection)

        self.tabs = list(TABS)
        self.selected_tab = 0
        self.width = 0
        self.height = 0

    def _current(self) -> tuple[ListView, Callable[[ListEntry], None]]:
        return {
            TAB_THEMES: (self.themes_list, self._update_theme),
            TAB_ACCENT: (self.accents_list, self._update_accent),
            TAB_SELECTION: (self.selection_list, self._update_selection),
        }[self.tabs[self.selected_tab]]

    def update(self, msg: object) -> None:
        """Apply a message: switch tabs, move in the lists, pick entries."""
        if isinstance(msg, WindowSizeMsg):
            self.width, self.height = msg.width, msg.height
            for list_view in (self.themes_list, self.accents_list, self.selection_list):
                list_view.update(msg)
        elif isinstance(msg, _MOUSE_MESSAGES):
            left = msg.button is MouseButton.LEFT
            for index, label in enumerate(self.tabs):
                if left and zone_collision(self.zones.get(label), msg):
                    self.selected_tab = index
            list_view, apply = self._current()
            entry = list_view.mouse_hovered(msg, self.zones)
            if entry is not None and left:
                apply(entry)
        elif isinstance(msg, KeyMsg):
            key = str(msg)
            if key == "tab":
                self.selected_tab = (self.selected_tab + 1) % len(self.tabs)
            elif key == "shift+tab":
                self.selected_tab = (self.selected_tab - 1) % len(self.tabs)
            elif key == "enter":
                list_view, apply = self._current()
                entry = list_view.hovered()
                if entry is not None:
                    apply(entry)

        self._current()[0].update(msg)
        return None

    def _save(self) -> None:
        if self.config_path is not None:
            self.config.save(self.config_path)

    def _update_theme(self, entry: ListEntry) -> None:
        self.themes_list.selected_name = entry.name
        self.theme_state.activate(entry.name)
        self.config.theme_name = entry.name
        self._save()

    def _update_accent(self, entry: ListEntry) -> None:
        self.accents_list.selected_name = entry.name
        self.theme_state.accent = entry.name
        self.config.theme_accent = entry.name
        self._save()

    def _update_selection(self, entry: ListEntry) -> None:
        self.selection_list.selected_name = entry.name
        self.theme_state.selection = entry.name
        self.config.theme_selection_color = entry.name
        self._save()

    def view(self) -> str:
        """Render the tab bar above the list of the selected tab."""
        theme = self.theme_state.active()
        base = Style(background=theme.background)
        tab_style = replace(base, border=normal_border(), border_background=theme.background)

        tabs: list[str] = []
        for index, label in enumerate(self.tabs):
            style = tab_style
            if index == self.selected_tab:
                style = replace(
                    tab_style,
                    border_foreground=self.theme_state.accent_color(),
                    foreground=self.theme_state.selection_color(),
                )
            tabs.append(self.zones.mark(label, style.render(label)))

        tab_bar = replace(base, width=self.width).render(join_horizontal(*tabs))
        list_style = replace(
            base, width=self.width, height=self.height, padding=(0, 0, 0, 2)
        )
        visible = self._current()[0]
        body = list_style.render(visible.view(self.theme_state, self.zones))
        return base.render(join_vertical(tab_bar, body))
"""A paginated, searchable list of named entries."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Any, Iterable

from ytt.messages import KeyMsg, MouseButton, MouseWheelMsg, WindowSizeMsg
from ytt.style import Style, hangul_filler_border
from ytt.themes import ThemeState
from ytt.zones import ZoneManager

_NAME_LIMIT = 40


@dataclass
class ListEntry:
    """One row of the list: a name, an optional description and caller data."""

    name: str = ""
    desc: str = ""
    custom_data: Any = None


@dataclass
class Paginator:
    """Page state for a list shown ``per_page`` items at a time."""

    page: int = 0
    per_page: int = 1
    total_pages: int = 1
    active_dot: str = "◉"
    inactive_dot: str = "○"

    def set_total_pages(self, items: int) -> int:
        """Compute the page count for ``items``; fewer than one item leaves it as is."""
        if items < 1:
            return self.total_pages
        self.total_pages = -(-items // self.per_page)
        return self.total_pages

    def prev_page(self) -> None:
        """Go back one page, stopping at the first."""
        if self.page > 0:
            self.page -= 1

    def next_page(self) -> None:
        """Go forward one page, stopping at the last."""
        if not self.on_last_page():
            self.page += 1

    def on_last_page(self) -> bool:
        """True if the current page is the last one."""
        return self.page == self.total_pages - 1

    def slice_bounds(self, total: int) -> tuple[int, int]:
        """Start and end indexes of the current page within ``total`` items."""
        start = self.page * self.per_page
        end = min(start + self.per_page, total)
        return start, end

    def items_on_page(self, total: int) -> int:
        """Number of items shown on the current page."""
        if total < 1:
            return 0
        start, end = self.slice_bounds(total)
        return end - start

    def view(self) -> str:
        """One dot per page, the current page's dot filled."""
        return "".join(
            self.active_dot if index == self.page else self.inactive_dot
            for index in range(self.total_pages)
        )


class _TextInput:
    """Single-line input that only appends and deletes at the end."""

    prompt = "> "

    def __init__(self) -> None:
        self.value = ""
        self.focused = False

    def focus(self) -> None:
        self.focused = True

    def update(self, msg: object) -> None:
        if not self.focused or not isinstance(msg, KeyMsg):
            return
        key = str(msg)
        if key == "backspace":
            self.value = self.value[:-1]
        elif key == "space":
            self.value += " "
        elif len(key) == 1 and key.isprintable():
            self.value += key

    def view(self) -> str:
        return self.prompt + self.value


class ListView:
    """Paginated list with keyboard, wheel and mouse navigation and search."""

    def __init__(self, data: Iterable[ListEntry], title: str) -> None:
        self.all_data: list[ListEntry] = list(data)
        self.title = title
        self.filtered_data: list[ListEntry] = []
        self.search_query = ""
        self.is_searching = False
        self._search_changed = False
        self.cursor = 0
        self.selected_name = ""
        self.width = 0
        self.height = 0
        self.view_height = 0
        self.paginator = Paginator()
        self.paginator.set_total_pages(len(self.all_data))
        self._input = _TextInput()

    def _refresh_filter(self) -> None:
        if not self.is_searching:
            self.paginator.set_total_pages(len(self.all_data))
            self.filtered_data = list(self.all_data)
        elif self._search_changed:
            self._search_changed = False
            query = self.search_query.lower()
            self.filtered_data = [
                entry
                for entry in self.all_data
                if not query or query in (entry.name + entry.desc).lower()
            ]
            self.paginator.set_total_pages(len(self.filtered_data))

    def _handle_key(self, key: str) -> bool:
        """React to a key; True if the update should stop here."""
        if key == "/":
            self.is_searching = not self.is_searching
            if self.is_searching:
                self.search_query = ""
                self._input.focus()
                return True
        elif key == "esc":
            self.is_searching = False
        elif key in ("left", "h"):
            self.paginator.prev_page()
        elif key in ("right", "l"):
            self.paginator.next_page()
        elif key in ("up", "k"):
            self.cursor -= 1
        elif key in ("down", "j"):
            if self.cursor < len(self.all_data) - 1:
                self.cursor += 1
        return False

    def _wrap_cursor(self) -> None:
        count = len(self.filtered_data)
        on_page = self.paginator.items_on_page(count)
        if self.cursor >= on_page:
            if self.paginator.on_last_page():
                self.cursor = on_page - 1
            else:
                self.paginator.next_page()
                self.cursor = 0
        if self.cursor < 0:
            if self.paginator.page > 0:
                self.paginator.prev_page()
                self.cursor = self.paginator.items_on_page(count) - 1
            else:
                self.cursor = 0
        self.cursor = int(math.fmod(self.cursor, count + 1))

    def update(self, msg: object) -> None:
        """Apply a message to the list state."""
        self._refresh_filter()

        if isinstance(msg, WindowSizeMsg):
            self.width = msg.width
            self.height = msg.height
            self.view_height = max(max(msg.height, 1) * 80 // 100, 1)
            self.paginator.per_page = max(self.view_height * 35 // 100, 1)
        elif isinstance(msg, MouseWheelMsg):
            if msg.button is MouseButton.WHEEL_UP:
                self.paginator.prev_page()
            elif msg.button is MouseButton.WHEEL_DOWN:
                self.paginator.next_page()
        elif isinstance(msg, KeyMsg):
            if self._handle_key(str(msg)):
                return

        self._wrap_cursor()

        if self.is_searching:
            self._input.update(msg)
            if self._input.value != self.search_query:
                self.cursor = 0
                self.paginator.page = 0
                self.search_query = self._input.value
                self._search_changed = True

    def _page(self) -> list[ListEntry]:
        start, end = self.paginator.slice_bounds(len(self.filtered_data))
        return self.filtered_data[start:end]

    def view(self, theme_state: ThemeState, zones: ZoneManager) -> str:
        """Render the list; every visible name is marked as a zone named after it."""
        theme = theme_state.active()
        accent = theme_state.accent_color()
        selection = theme_state.selection_color()
        base = Style(background=theme.background)

        title = replace(base, foreground=accent, underline=True).render(self.title)

        rows: list[str] = []
        for index, entry in enumerate(self._page()):
            marker = " "
            name_color = accent
            if index == self.cursor:
                marker = Style(foreground=theme.cursor_color).render("│")
                name_color = selection

            display = entry.name
            if len(display) > _NAME_LIMIT:
                display = display[:_NAME_LIMIT] + "…"

            name = replace(
                base, foreground=name_color, blink=self.selected_name == display
            ).render(display)
            element = zones.mark(entry.name, marker + name) + "\n"
            if entry.desc:
                desc = replace(
                    base, margin=(0, 0, 1, 0), foreground=theme.foreground
                ).render(entry.desc)
                element += marker + desc + "\n"
            else:
                element += "\n"
            rows.append(element)

        search = self._input.view() + "\n" if self.is_searching else ""
        frame = replace(
            base,
            padding=(1, 0, 0, 0),
            border=hangul_filler_border(),
            border_background=theme.background,
            border_foreground=theme.foreground,
        )
        return frame.render(
            title + "\n" + search + self.paginator.view() + "\n\n" + "".join(rows)
        )

    def mouse_hovered(self, msg: object, zones: ZoneManager) -> ListEntry | None:
        """The visible entry under the mouse, which also becomes the cursor; else None."""
        if not self.filtered_data:
            return None
        for index, entry in enumerate(self._page()):
            zone = zones.get(entry.name)
            if zone.is_zero():
                break
            if zone.contains(msg.x, msg.y):
                self.cursor = index
                return entry
        return None

    def hovered(self) -> ListEntry | None:
        """The entry under the cursor, or None if there is none."""
        page = self._page()
        if not self.filtered_data or not 0 <= self.cursor < len(page):
            return None
        return page[self.cursor]
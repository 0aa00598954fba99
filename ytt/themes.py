"""Terminal colour themes and the accent and selection colour choices."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field, fields
from enum import StrEnum
from pathlib import Path
from typing import Any


class Color(StrEnum):
    """Named palette slot a user may pick as accent or selection colour."""

    THEME_DEFAULT = "ThemeDefault"
    RED = "Red"
    GREEN = "Green"
    BLUE = "Blue"
    WHITE = "White"
    PURPLE = "Purple"
    YELLOW = "Yellow"
    PINK = "Pink"
    CYAN = "Cyan"
    BRIGHT_WHITE = "BrightWhite"
    BRIGHT_PURPLE = "BrightPurple"
    BRIGHT_RED = "BrightRed"
    BRIGHT_GREEN = "BrightGreen"
    BRIGHT_BLUE = "BrightBlue"
    BRIGHT_YELLOW = "BrightYellow"
    BRIGHT_CYAN = "BrightCyan"


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


@dataclass
class Theme:
    """A terminal colour scheme; colours are strings such as "#282a36"."""

    name: str = ""
    black: str = ""
    red: str = ""
    green: str = ""
    yellow: str = ""
    blue: str = ""
    purple: str = ""
    cyan: str = ""
    white: str = ""
    bright_black: str = ""
    bright_red: str = ""
    bright_green: str = ""
    bright_yellow: str = ""
    bright_blue: str = ""
    bright_purple: str = ""
    bright_cyan: str = ""
    bright_white: str = ""
    background: str = ""
    foreground: str = ""
    cursor_color: str = ""
    selection_background: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Theme:
        """Build a theme from a mapping with camelCase keys; missing keys stay empty."""
        return cls(**{f.name: str(data.get(_camel(f.name), "")) for f in fields(cls)})

    def to_dict(self) -> dict[str, str]:
        """Mapping with camelCase keys, the inverse of from_dict."""
        return {_camel(key): value for key, value in asdict(self).items()}


_PALETTE_FIELDS: dict[str, str] = {
    Color.RED: "red",
    Color.GREEN: "green",
    Color.BLUE: "blue",
    Color.WHITE: "white",
    Color.PURPLE: "purple",
    Color.CYAN: "cyan",
    Color.YELLOW: "yellow",
    Color.BRIGHT_WHITE: "bright_white",
    Color.BRIGHT_PURPLE: "bright_purple",
    Color.BRIGHT_RED: "bright_red",
    Color.BRIGHT_GREEN: "bright_green",
    Color.BRIGHT_BLUE: "bright_blue",
    Color.BRIGHT_CYAN: "bright_cyan",
    Color.BRIGHT_YELLOW: "bright_yellow",
}


def default_themes_path() -> Path:
    """Location of the theme collection shipped with the package."""
    return Path(__file__).resolve().parent / "themes.json"


@dataclass
class ThemeState:
    """The loaded themes, which one is active, and the chosen accent colours."""

    themes: list[Theme] = field(default_factory=list)
    active_id: int = 0
    accent: str = Color.THEME_DEFAULT
    selection: str = Color.THEME_DEFAULT

    def load(self, path: str | Path) -> None:
        """Read a JSON list of themes from ``path``."""
        data = json.loads(Path(path).read_text(encoding="utf-8"))
        if not isinstance(data, list):
            raise ValueError(f"{path}: expected a list of themes")
        self.themes = [Theme.from_dict(item) for item in data]

    def active(self) -> Theme:
        """The active theme."""
        return self.themes[self.active_id]

    def activate(self, name: str) -> bool:
        """Make the theme called ``name`` active; False if there is none."""
        for index, theme in enumerate(self.themes):
            if theme.name == name:
                self.active_id = index
                return True
        return False

    def accent_color(self) -> str:
        """Colour of the chosen accent; red for the default or unknown choices."""
        return getattr(self.active(), _PALETTE_FIELDS.get(str(self.accent), "red"))

    def selection_color(self) -> str:
        """Colour of the chosen selection; the cursor colour for default or unknown choices."""
        return getattr(self.active(), _PALETTE_FIELDS.get(str(self.selection), "cursor_color"))
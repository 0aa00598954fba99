"""User configuration stored as TOML in the config directory."""

from __future__ import annotations

import re
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import tomli_w

CONFIG_FILE_NAME = "config.toml"

_PLAYLIST_ID = re.compile(r"PL[A-Za-z0-9_-]{32}")


def is_valid_playlist_id(playlist_id: str) -> bool:
    """True if ``playlist_id`` has the shape of a YouTube playlist id."""
    return _PLAYLIST_ID.fullmatch(playlist_id) is not None


def config_dir() -> Path:
    """The configuration directory, created if it does not exist."""
    directory = Path.home() / ".config" / "ytt"
    directory.mkdir(parents=True, exist_ok=True)
    return directory


def _text(data: dict[str, Any], key: str) -> str:
    value = data.get(key, "")
    return value if isinstance(value, str) else ""


@dataclass
class Config:
    """Theme choices and the playlists the user follows."""

    theme_name: str = ""
    theme_accent: str = ""
    theme_selection_color: str = ""
    playlists: list[str] = field(default_factory=list)

    @classmethod
    def load(cls, path: str | Path) -> Config:
        """Read the configuration at ``path``, creating an empty file if there is none.

        A file that is not valid TOML gives the default configuration.
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.touch(exist_ok=True)
        try:
            data = tomllib.loads(path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError:
            return cls()
        playlists = data.get("Playlists", [])
        if not isinstance(playlists, list):
            playlists = []
        return cls(
            theme_name=_text(data, "ThemeName"),
            theme_accent=_text(data, "ThemeAccent"),
            theme_selection_color=_text(data, "ThemeSelectionColor"),
            playlists=[item for item in playlists if isinstance(item, str)],
        )

    def save(self, path: str | Path) -> None:
        """Write the configuration to ``path`` as TOML."""
        document = {
            "ThemeName": self.theme_name,
            "ThemeAccent": self.theme_accent,
            "ThemeSelectionColor": self.theme_selection_color,
            "Playlists": list(self.playlists),
        }
        Path(path).write_text(tomli_w.dumps(document), encoding="utf-8")

    def add_playlists(self, *args: str) -> list[str]:
        """Add the valid, not yet known ids; return the ids that are invalid."""
        invalid: list[str] = []
        for playlist_id in args:
            if not is_valid_playlist_id(playlist_id):
                invalid.append(playlist_id)
                continue
            if playlist_id not in self.playlists:
                self.playlists.append(playlist_id)
        return invalid

    def remove_playlist(self, playlist_id: str) -> None:
        """Forget ``playlist_id``; unknown ids are ignored."""
        if playlist_id in self.playlists:
            self.playlists.remove(playlist_id)
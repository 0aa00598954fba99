"""Command-line sub-commands handled before the player starts."""

from __future__ import annotations

import platform
import subprocess
from pathlib import Path
from typing import Sequence

from ytt import ytdlp
from ytt.config import Config

HELP_MESSAGE = """ytt - play YouTube playlists in the terminal

usage: ytt [command] [arguments]

commands:
  help, -h               show this message
  refresh, -r            clear the playlist cache, then start
  config, -c             open the configuration directory
  add, -a ID [ID ...]    add YouTube playlist ids, then start

Without a command ytt starts the player."""


def handle_args(args: Sequence[str], config: Config, config_path: str | Path) -> bool:
    """Run the sub-command in ``args``; True if the player should start afterwards."""
    if not args:
        return True
    command, *rest = args
    if command in ("help", "-h"):
        print(HELP_MESSAGE)
    elif command in ("refresh", "-r"):
        return refresh_cache(ytdlp.cache_dir())
    elif command in ("config", "-c"):
        open_config_dir(Path(config_path).parent)
    elif command in ("add", "-a"):
        return add_playlists(rest, config, config_path)
    else:
        print(HELP_MESSAGE)
    return False


def refresh_cache(directory: str | Path) -> bool:
    """Delete the cached playlists in ``directory``; False if it cannot be read."""
    try:
        files = list(Path(directory).iterdir())
    except OSError as exc:
        print(exc)
        return False
    for path in files:
        if path.suffix == ".json":
            try:
                path.unlink()
            except OSError as exc:
                print(f"err: {exc}")
    return True


def add_playlists(ids: Sequence[str], config: Config, config_path: str | Path) -> bool:
    """Add playlist ids and save; False (nothing saved) if any id is invalid."""
    if not ids:
        print("Must provide YouTube playlist IDs. See: ytt help")
        return False
    invalid = config.add_playlists(*ids)
    for playlist_id in invalid:
        print(playlist_id, "is an invalid id.")
    if invalid:
        return False
    config.save(config_path)
    return True


def open_config_dir(path: str | Path) -> None:
    """Open ``path`` in the desktop's file manager."""
    system = platform.system()
    if system == "Windows":
        opener = "explorer"
    elif system == "Darwin":
        opener = "open"
    else:
        opener = "xdg-open"
    try:
        subprocess.Popen(
            [opener, str(path)], stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL
        )
    except OSError as exc:
        print(exc)
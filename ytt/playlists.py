"""YouTube playlists fetched through yt-dlp and cached as JSON."""

from __future__ import annotations

import json
import threading
import time
from dataclasses import asdict, dataclass, field
from datetime import timedelta
from pathlib import Path
from typing import Any, Callable

from ytt import ytdlp

PLAYLIST_URL = "https://www.youtube.com/playlist?list="


def _str(data: dict[str, Any], key: str) -> str:
    value = data.get(key)
    return "" if value is None else str(value)


def _int(data: dict[str, Any], key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    return int(value)


@dataclass
class Entry:
    """One video of a playlist."""

    id: str = ""
    url: str = ""
    title: str = ""
    duration: int = 0
    duration_string: str = ""
    channel_url: str = ""
    uploader: str = ""
    view_count: int = 0


def _entry_from_dict(data: dict[str, Any]) -> Entry:
    return Entry(
        id=_str(data, "id"),
        url=_str(data, "url"),
        title=_str(data, "title"),
        duration=_int(data, "duration"),
        duration_string=_str(data, "duration_string"),
        channel_url=_str(data, "channel_url"),
        uploader=_str(data, "uploader"),
        view_count=_int(data, "view_count"),
    )


@dataclass
class Playlist:
    """A playlist with its videos, as reported by yt-dlp."""

    id: str = ""
    title: str = ""
    description: str = ""
    channel: str = ""
    entries: list[Entry] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Playlist:
        """Build a playlist from yt-dlp's JSON; null or missing fields become empty."""
        if not isinstance(data, dict):
            raise ValueError("playlist data must be a JSON object")
        entries = data.get("entries") or []
        return cls(
            id=_str(data, "id"),
            title=_str(data, "title"),
            description=_str(data, "description"),
            channel=_str(data, "channel"),
            entries=[_entry_from_dict(item) for item in entries if isinstance(item, dict)],
        )

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready mapping, the inverse of from_dict."""
        return asdict(self)


class PlaylistStore:
    """Known playlists, backed by a JSON cache directory and yt-dlp."""

    def __init__(
        self,
        cache_dir: str | Path | None = None,
        runner: Callable[..., str] | None = None,
    ) -> None:
        self.cache_dir = Path(cache_dir) if cache_dir is not None else ytdlp.cache_dir()
        self._runner = runner or ytdlp.run_ytdlp
        self.playlists: dict[str, Playlist] = {}
        self._lock = threading.Lock()

    def _cache_file(self, playlist_id: str) -> Path:
        return self.cache_dir / f"{playlist_id}.json"

    def fetch(self, playlist_id: str) -> Playlist:
        """Return the playlist, from the cache if possible, else through yt-dlp."""
        playlist = self.load_from_cache(playlist_id)
        if playlist is None:
            output = self._runner("--flat-playlist", "--dump-single-json", PLAYLIST_URL + playlist_id)
            playlist = Playlist.from_dict(json.loads(output))
            self.save_to_cache(playlist)
        with self._lock:
            self.playlists[playlist_id] = playlist
        return playlist

    def load_from_cache(self, playlist_id: str) -> Playlist | None:
        """The cached playlist, or None if it is not cached."""
        try:
            text = self._cache_file(playlist_id).read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        try:
            return Playlist.from_dict(json.loads(text))
        except ValueError as exc:
            raise ValueError(f"unable to decode cached file {playlist_id}.json: {exc}") from exc

    def save_to_cache(self, playlist: Playlist) -> bool:
        """Write ``playlist`` to the cache; False if it was already cached."""
        self.cache_dir.mkdir(parents=True, exist_ok=True)
        try:
            with open(self._cache_file(playlist.id), "x", encoding="utf-8") as out:
                json.dump(playlist.to_dict(), out)
        except FileExistsError:
            return False
        return True


@dataclass
class FetchedUrl:
    """An audio URL and when it was obtained."""

    url: str
    fetched_at: float = field(default_factory=time.monotonic)

    def expired(self, expiry: timedelta | float) -> bool:
        """True once ``expiry`` (a timedelta or seconds) has passed since fetching."""
        seconds = expiry.total_seconds() if isinstance(expiry, timedelta) else float(expiry)
        return time.monotonic() - self.fetched_at >= seconds
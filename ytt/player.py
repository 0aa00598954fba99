"""Playback control over an audio player and its decoding reader."""

from __future__ import annotations

import threading
import time
from typing import Callable, Protocol

SEEK_DEBOUNCE = 0.25
MAX_VOLUME = 150.0


class AudioPlayer(Protocol):
    def play(self) -> None: ...

    def pause(self) -> None: ...

    def is_playing(self) -> bool: ...

    def set_volume(self, volume: float) -> None: ...

    def volume(self) -> float: ...


class AudioReader(Protocol):
    progress: float

    def seek(self, position: float) -> None: ...


def format_timestamp(seconds: float) -> str:
    """Format a duration in seconds as HH:MM:SS."""
    total = int(seconds)
    hours, rest = divmod(total, 3600)
    minutes, secs = divmod(rest, 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"


class Playback:
    """Thread-safe control of the current track: position, pause and volume."""

    def __init__(
        self,
        player: AudioPlayer | None = None,
        reader: AudioReader | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.player = player
        self.reader = reader
        self._clock = clock
        self._lock = threading.Lock()
        self._last_seek = clock()

    def timestamp(self) -> str:
        """Current position as HH:MM:SS; zero when nothing is loaded."""
        with self._lock:
            progress = self.reader.progress if self.reader is not None else 0.0
        return format_timestamp(progress)

    def seek(self, offset: float) -> None:
        """Move by ``offset`` seconds; calls closer together than the debounce are ignored.

        Forward jumps are halved and backward jumps doubled to compensate for
        imprecise seeking in the stream.
        """
        with self._lock:
            now = self._clock()
            if now - self._last_seek < SEEK_DEBOUNCE:
                return
            self._last_seek = now
            if self.reader is None:
                return
            if offset > 0:
                offset /= 2
            elif offset < 0:
                offset *= 2
            self.reader.seek(self.reader.progress + offset)
            self.reader.progress += offset

    def toggle(self) -> None:
        """Pause if playing, resume if paused."""
        with self._lock:
            if self.player is None:
                return
            if self.player.is_playing():
                self.player.pause()
            else:
                self.player.play()

    def is_playing(self) -> bool:
        """True if a track is loaded and playing."""
        with self._lock:
            return self.player is not None and self.player.is_playing()

    def set_volume(self, n: float) -> None:
        """Set the volume, clamped to 0..150."""
        with self._lock:
            if self.player is None:
                return
            self.player.set_volume(min(max(n, 0.0), MAX_VOLUME))

    def volume(self) -> float:
        """Current volume; zero when nothing is loaded."""
        with self._lock:
            if self.player is None:
                return 0.0
            return self.player.volume()
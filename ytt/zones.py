"""Clickable regions marked inside rendered terminal text."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Protocol

from ytt.overlay import string_width

_MARKER = re.compile(r"\x1b\[(\d+)z")
_FIRST_MARKER = 10000


class _Positioned(Protocol):
    x: int
    y: int


@dataclass(frozen=True)
class ZoneInfo:
    """Cell bounds of a zone, both ends inclusive."""

    zone_id: str = ""
    start_x: int = 0
    start_y: int = 0
    end_x: int = 0
    end_y: int = 0

    def is_zero(self) -> bool:
        """True if this zone was never found in a scan."""
        return not self.zone_id

    def contains(self, x: int, y: int) -> bool:
        """True if the cell (x, y) lies inside the zone's bounds."""
        if self.is_zero():
            return False
        return self.start_x <= x <= self.end_x and self.start_y <= y <= self.end_y


class ZoneManager:
    """Marks zones in text and records where they end up after rendering."""

    def __init__(self) -> None:
        self._numbers: dict[str, int] = {}
        self._names: dict[int, str] = {}
        self._zones: dict[str, ZoneInfo] = {}

    def _marker(self, zone_id: str) -> str:
        number = self._numbers.get(zone_id)
        if number is None:
            number = _FIRST_MARKER + len(self._numbers)
            self._numbers[zone_id] = number
            self._names[number] = zone_id
        return f"\x1b[{number}z"

    def mark(self, zone_id: str, text: str) -> str:
        """Wrap ``text`` in invisible markers for ``zone_id``."""
        if not zone_id:
            return text
        marker = self._marker(zone_id)
        return marker + text + marker

    def scan(self, text: str) -> str:
        """Record the position of every marked zone and return the text without markers."""
        found: dict[str, ZoneInfo] = {}
        pending: dict[str, tuple[int, int]] = {}
        out_lines: list[str] = []
        for y, line in enumerate(text.split("\n")):
            x = 0
            pieces: list[str] = []
            pos = 0
            for match in _MARKER.finditer(line):
                segment = line[pos:match.start()]
                pieces.append(segment)
                x += string_width(segment)
                pos = match.end()
                name = self._names.get(int(match.group(1)))
                if name is None:
                    pieces.append(match.group())
                    continue
                if name in pending:
                    start_x, start_y = pending.pop(name)
                    found[name] = ZoneInfo(name, start_x, start_y, x - 1, y)
                else:
                    pending[name] = (x, y)
            pieces.append(line[pos:])
            out_lines.append("".join(pieces))
        self._zones = found
        return "\n".join(out_lines)

    def get(self, zone_id: str) -> ZoneInfo:
        """Bounds of ``zone_id`` from the last scan; a zero zone if it was not there."""
        return self._zones.get(zone_id, ZoneInfo())


def zone_collision(zone: ZoneInfo | None, msg: _Positioned) -> bool:
    """True if the mouse message lies inside ``zone``."""
    if zone is None:
        return False
    return zone.contains(msg.x, msg.y)
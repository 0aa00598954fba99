"""Placing one block of terminal text on top of another, ANSI aware."""

from __future__ import annotations

import re
from typing import Iterator

from wcwidth import wcwidth

_ESCAPE = re.compile(
    r"\x1b(?:\[[0-?]*[ -/]*[@-~]|\][^\x07\x1b]*(?:\x07|\x1b\\)|[@-Z\\-_])"
)
_SGR = re.compile(r"\x1b[[\d;]*m")


def _char_width(ch: str) -> int:
    return max(wcwidth(ch), 0)


def _tokens(text: str) -> Iterator[tuple[bool, str]]:
    """Yield (is_escape, piece) pairs: escape sequences whole, other text per character."""
    pos = 0
    for match in _ESCAPE.finditer(text):
        for ch in text[pos:match.start()]:
            yield False, ch
        yield True, match.group()
        pos = match.end()
    for ch in text[pos:]:
        yield False, ch


def strip_ansi(text: str) -> str:
    """Remove escape sequences from ``text``."""
    return _ESCAPE.sub("", text)


def string_width(text: str) -> int:
    """Cell width of ``text`` on a terminal, ignoring escape sequences."""
    return sum(_char_width(ch) for ch in strip_ansi(text))


def truncate(text: str, width: int) -> str:
    """Cut ``text`` to ``width`` cells, keeping every escape sequence."""
    if width <= 0:
        return ""
    out: list[str] = []
    used = 0
    ignoring = False
    for is_escape, piece in _tokens(text):
        if is_escape:
            out.append(piece)
            continue
        if ignoring:
            continue
        w = _char_width(piece)
        if used + w > width:
            ignoring = True
            continue
        used += w
        out.append(piece)
    return "".join(out)


def _truncate_left(line: str, padding: int) -> str:
    """Drop the first ``padding`` cells of ``line``, carrying over the last SGR style."""
    if "\n" in line:
        raise ValueError("line must not contain newline")
    if padding < 1:
        return ""
    tokens = list(_tokens(line))
    used = 0
    split = None
    for index, (is_escape, piece) in enumerate(tokens):
        if is_escape:
            continue
        w = _char_width(piece)
        if used + w > padding:
            split = index
            break
        used += w
    if split is None:
        return ""
    head = "".join(piece for _, piece in tokens[:split])
    rest = "".join(piece for _, piece in tokens[split:])
    styles = _SGR.findall(head)
    return (styles[-1] if styles else "") + rest


def _read_escapes(text: str) -> Iterator[tuple[bool, str]]:
    """Split text into escape runs (ESC up to a letter) and single characters."""
    seq: list[str] = []
    in_escape = False
    for ch in text:
        if ch == "\x1b":
            in_escape = True
            seq.append(ch)
            continue
        if in_escape:
            seq.append(ch)
            if ch.isascii() and ch.isalpha():
                in_escape = False
                yield True, "".join(seq)
                seq.clear()
            continue
        yield False, ch


def _bg_char_at(bg_line: str, visual_index: int) -> str:
    result: list[str] = []
    shown = 0
    for is_escape, piece in _read_escapes(bg_line):
        if is_escape:
            result.append(piece)
            continue
        w = _char_width(piece)
        if shown + w > visual_index:
            result.append(piece)
            break
        shown += w
    return "".join(result) or " "


def _remove_margin_whitespace(bg_line: str, overlay_line: str, col: int) -> str:
    first = -1
    last = -1
    pos = 0
    for ch in strip_ansi(overlay_line):
        w = _char_width(ch)
        if not ch.isspace():
            if first == -1:
                first = pos
            last = pos + w - 1
        pos += w
    if first == -1:
        first, last = 0, -1

    result: list[str] = []
    pos = 0
    for is_escape, piece in _read_escapes(overlay_line):
        if is_escape:
            result.append(piece)
            continue
        w = _char_width(piece)
        in_margin = pos < first or pos > last
        if piece.isspace() and in_margin:
            result.extend(_bg_char_at(bg_line, col + pos + k) for k in range(w))
        else:
            result.append(piece)
        pos += w
    return "".join(result)


def overlay(
    bg: str,
    overlay_text: str,
    row: int,
    col: int,
    ignore_margin_whitespace: bool,
) -> str:
    """Write ``overlay_text`` onto ``bg`` with its top-left corner at (row, col).

    With ``ignore_margin_whitespace`` the leading and trailing blanks of each
    overlay line let the background show through.
    """
    if row < 0:
        raise ValueError(f"row must not be negative, got {row}")
    bg_lines = bg.split("\n")
    for offset, line in enumerate(overlay_text.split("\n")):
        target = row + offset
        while len(bg_lines) <= target:
            bg_lines.append("")
        bg_line = bg_lines[target]
        bg_width = string_width(bg_line)
        if bg_width < col:
            bg_line += " " * (col - bg_width)
        if ignore_margin_whitespace:
            line = _remove_margin_whitespace(bg_line, line, col)
        left = truncate(bg_line, col)
        right = _truncate_left(bg_line, col + string_width(line))
        bg_lines[target] = left + line + right
    return "\n".join(bg_lines)


def _block_size(text: str) -> tuple[int, int]:
    lines = text.split("\n")
    return max(string_width(line) for line in lines), len(lines)


def overlay_center(bg: str, overlay_text: str, ignore_margin_whitespace: bool) -> str:
    """Write ``overlay_text`` so that its middle sits on the middle of ``bg``."""
    bg_width, bg_height = _block_size(bg)
    ov_width, ov_height = _block_size(overlay_text)
    row = bg_height // 2 - ov_height // 2
    col = bg_width // 2 - ov_width // 2
    return overlay(bg, overlay_text, row, col, ignore_margin_whitespace)
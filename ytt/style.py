"""Minimal terminal styling: colours, padding, borders and block joining."""

from __future__ import annotations

from dataclasses import dataclass

from ytt.overlay import string_width

_RESET = "\x1b[0m"


@dataclass(frozen=True)
class Border:
    """Characters that draw a box."""

    top: str
    bottom: str
    left: str
    right: str
    top_left: str
    top_right: str
    bottom_left: str
    bottom_right: str
    middle_left: str
    middle_right: str
    middle: str
    middle_top: str
    middle_bottom: str


def hangul_filler_border() -> Border:
    """An invisible border made of the Hangul filler character."""
    filler = "ㅤ"
    return Border(*([filler] * 13))


def normal_border() -> Border:
    """A thin box-drawing border."""
    return Border(
        top="─",
        bottom="─",
        left="│",
        right="│",
        top_left="┌",
        top_right="┐",
        bottom_left="└",
        bottom_right="┘",
        middle_left="├",
        middle_right="┤",
        middle="┼",
        middle_top="┬",
        middle_bottom="┴",
    )


def _rgb(color: str | None) -> tuple[int, int, int] | None:
    if not color or not color.startswith("#"):
        return None
    digits = color[1:]
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    if len(digits) != 6:
        return None
    try:
        value = int(digits, 16)
    except ValueError:
        return None
    return (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF


def _sgr(
    foreground: str | None,
    background: str | None,
    underline: bool = False,
    blink: bool = False,
) -> str:
    codes: list[str] = []
    if underline:
        codes.append("4")
    if blink:
        codes.append("5")
    if (fg := _rgb(foreground)) is not None:
        codes.append("38;2;{};{};{}".format(*fg))
    if (bg := _rgb(background)) is not None:
        codes.append("48;2;{};{};{}".format(*bg))
    return f"\x1b[{';'.join(codes)}m" if codes else ""


def _paint(text: str, seq: str) -> str:
    return f"{seq}{text}{_RESET}" if seq and text else text


def _edge(left: str, middle: str, right: str, width: int) -> str:
    step = string_width(middle)
    if step <= 0:
        return left + middle * width + right
    parts: list[str] = []
    filled = 0
    while filled < width:
        parts.append(middle)
        filled += step
    return left + "".join(parts) + right


@dataclass(frozen=True)
class Style:
    """A set of visual attributes applied by ``render``.

    ``padding`` and ``margin`` are (top, right, bottom, left). ``width`` and
    ``height`` are minimum sizes including padding, excluding border and margin.
    """

    foreground: str | None = None
    background: str | None = None
    underline: bool = False
    blink: bool = False
    padding: tuple[int, int, int, int] = (0, 0, 0, 0)
    margin: tuple[int, int, int, int] = (0, 0, 0, 0)
    border: Border | None = None
    border_foreground: str | None = None
    border_background: str | None = None
    width: int = 0
    height: int = 0

    def render(self, text: str) -> str:
        """Apply the style to ``text`` and return the resulting block."""
        lines = text.replace("\r\n", "\n").split("\n")
        pad_top, pad_right, pad_bottom, pad_left = self.padding
        inner = max(string_width(line) for line in lines)
        if self.width:
            inner = max(inner, self.width - pad_left - pad_right)
        full = pad_left + inner + pad_right

        text_seq = _sgr(self.foreground, self.background, self.underline, self.blink)
        fill_seq = _sgr(None, self.background)
        blank = _paint(" " * full, fill_seq)

        body = [
            _paint(" " * pad_left, fill_seq)
            + _paint(line, text_seq)
            + _paint(" " * (inner - string_width(line) + pad_right), fill_seq)
            for line in lines
        ]
        body = [blank] * pad_top + body + [blank] * pad_bottom
        if self.height and len(body) < self.height:
            body += [blank] * (self.height - len(body))

        total = full
        if self.border is not None:
            b = self.border
            seq = _sgr(self.border_foreground, self.border_background)
            top = _paint(_edge(b.top_left, b.top, b.top_right, full), seq)
            bottom = _paint(_edge(b.bottom_left, b.bottom, b.bottom_right, full), seq)
            body = [top] + [_paint(b.left, seq) + line + _paint(b.right, seq) for line in body] + [bottom]
            total = max(string_width(line) for line in body)

        m_top, m_right, m_bottom, m_left = self.margin
        if any(self.margin):
            outer = m_left + total + m_right
            body = (
                [" " * outer] * m_top
                + [" " * m_left + line + " " * m_right for line in body]
                + [" " * outer] * m_bottom
            )
        return "\n".join(body)


def width(text: str) -> int:
    """Cell width of the widest line of ``text``."""
    return max(string_width(line) for line in text.split("\n"))


def height(text: str) -> int:
    """Number of lines in ``text``."""
    return text.count("\n") + 1


def join_horizontal(*args: str) -> str:
    """Place blocks side by side, aligned to the top."""
    if not args:
        return ""
    blocks = [block.split("\n") for block in args]
    widths = [max(string_width(line) for line in block) for block in blocks]
    rows = max(len(block) for block in blocks)
    out: list[str] = []
    for row in range(rows):
        parts = []
        for block, block_width in zip(blocks, widths):
            line = block[row] if row < len(block) else ""
            parts.append(line + " " * (block_width - string_width(line)))
        out.append("".join(parts))
    return "\n".join(out)


def join_vertical(*args: str) -> str:
    """Stack blocks on top of each other, aligned to the left."""
    if not args:
        return ""
    lines = [line for block in args for line in block.split("\n")]
    target = max(string_width(line) for line in lines)
    return "\n".join(line + " " * (target - string_width(line)) for line in lines)
"""Reading XPM pixmaps from source text or from in-memory line lists."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Sequence

from fractol.libft.chars import atoi
from fractol.mlx.colornames import lookup

TRANSPARENT = 0xFF000000
_PIXEL_MASK = 0xFFFFFFFF
_NAME_BUFFER = 64
_WORD_SEPARATORS = re.compile("[ \t]+")
_HEX_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")


class XpmError(ValueError):
    """Raised when XPM data cannot be parsed."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded pixmap: ``rows[y][x]`` holds a 32-bit 0xAARRGGBB value."""

    width: int
    height: int
    rows: tuple[tuple[int, ...], ...]


def _terminated(text: str) -> str:
    return text.split("\0", 1)[0]


def _to_int32(value: int) -> int:
    value &= _PIXEL_MASK
    return value - (1 << 32) if value >= 1 << 31 else value


def str_str(text: str, find: str, length: int) -> Optional[int]:
    """Position of *find* in *text*, or None.

    Nothing is found when *find* is longer than *length*; the search
    stops at the first NUL of *text*.
    """
    if not find:
        raise ValueError("search text must not be empty")
    if len(find) > length:
        return None
    index = _terminated(text).find(find)
    return index if index >= 0 else None


def str_str_quoted(text: str, find: str, length: int) -> Optional[int]:
    """Like :func:`str_str`, but matches inside double quotes are ignored."""
    if not find:
        raise ValueError("search text must not be empty")
    if len(find) > length:
        return None
    limit = _terminated(text)
    quoted = False
    for pos in range(len(limit) - len(find) + 1):
        if limit[pos] == '"':
            quoted = not quoted
        if not quoted and limit.startswith(find, pos):
            return pos
    return None


def split_words(text: str) -> list[str]:
    """Split *text* on runs of spaces and tabs, dropping empty words."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]


def _blank(text: str, start: int, count: int) -> str:
    end = min(len(text), start + max(count, 0))
    return text[:start] + " " * (end - start) + text[end:]


def strip_comments(text: str) -> str:
    """Overwrite ``/* */`` and ``//`` comments outside quotes with spaces.

    The length of the text is preserved.
    """
    size = len(text)
    while (begin := str_str_quoted(text, "/*", size)) is not None:
        end = str_str(text[begin + 2:], "*/", size - begin - 2)
        text = _blank(text, begin, (-1 if end is None else end) + 4)
    while (begin := str_str_quoted(text, "//", size)) is not None:
        end = str_str(text[begin + 2:], "\n", size - begin - 2)
        text = _blank(text, begin, (-1 if end is None else end) + 3)
    return text


def text_to_rgb(name: str, suffix: Optional[str] = None) -> int:
    """Colour value of an XPM colour specification.

    ``#`` introduces hexadecimal digits; anything else is looked up as a
    colour name, joined with *suffix* by a space when one is given.
    Unknown names give 0 and ``none`` gives -1.
    """
    if name.startswith("#"):
        match = _HEX_PREFIX.match(name, 1)
        sign, digits = match.groups()
        value = int(digits, 16) if digits else 0
        return _to_int32(-value if sign == "-" else value)
    if suffix is not None:
        name = f"{name} {suffix}"[: _NAME_BUFFER - 1]
    color = lookup(name)
    return 0 if color is None else color


def good_color(color: int, depth: int, decrgb: Sequence[int]) -> int:
    """Convert a 0xRRGGBB colour to a pixel value for a visual of *depth* bits.

    *decrgb* holds shift and width pairs for red, green and blue.
    Depths of 24 bits and more use the colour unchanged.
    """
    if depth >= 24:
        return color
    if len(decrgb) != 6:
        raise ValueError(f"expected 6 shift/width values, got {len(decrgb)}")
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    return (
        ((red >> (16 - decrgb[1])) << decrgb[0])
        + ((green >> (16 - decrgb[3])) << decrgb[2])
        + ((blue >> (16 - decrgb[5])) << decrgb[4])
    )


def _next_line(lines: Iterator[str], what: str) -> str:
    line = next(lines, None)
    if line is None:
        raise XpmError(f"missing {what}")
    return line


def _read_header(lines: Iterator[str]) -> tuple[int, int, int, int]:
    words = split_words(_next_line(lines, "header"))
    if len(words) < 4:
        raise XpmError("header needs width, height, colour count and characters per pixel")
    width, height, ncolors, cpp = (atoi(word) for word in words[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError("header values must be positive")
    return width, height, ncolors, cpp


def _read_palette(lines: Iterator[str], ncolors: int, cpp: int) -> dict[str, int]:
    later_wins = cpp <= 2
    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = _next_line(lines, "colour definition")
        if len(line) < cpp:
            raise XpmError(f"colour definition shorter than {cpp} characters")
        words = split_words(line[cpp:])
        try:
            keyword = words.index("c")
        except ValueError:
            raise XpmError(f"colour definition without 'c' key: {line!r}") from None
        if keyword + 1 >= len(words):
            raise XpmError(f"colour definition without a colour: {line!r}")
        suffix = words[keyword + 2] if keyword + 2 < len(words) else None
        rgb = text_to_rgb(words[keyword + 1], suffix)
        key = line[:cpp]
        if later_wins:
            palette[key] = rgb
        else:
            palette.setdefault(key, rgb)
    return palette


def _read_rows(
    lines: Iterator[str], width: int, height: int, cpp: int, palette: dict[str, int]
) -> tuple[tuple[int, ...], ...]:
    rows = []
    for _ in range(height):
        line = _next_line(lines, "pixel row")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row shorter than {width * cpp} characters")
        row = []
        for start in range(0, width * cpp, cpp):
            color = palette.get(line[start:start + cpp], 0)
            if color == -1:
                color = TRANSPARENT
            row.append(color & _PIXEL_MASK)
        rows.append(tuple(row))
    return tuple(rows)


def _parse(lines: Iterator[str]) -> XpmImage:
    width, height, ncolors, cpp = _read_header(lines)
    palette = _read_palette(lines, ncolors, cpp)
    rows = _read_rows(lines, width, height, cpp, palette)
    return XpmImage(width, height, rows)


def parse_xpm_data(lines: Iterable[str]) -> XpmImage:
    """Decode an XPM given as its string values: header, colours, then rows."""
    return _parse(iter(lines))


def _quoted_strings(text: str) -> Iterator[str]:
    pos = 0
    while True:
        opening = text.find('"', pos)
        if opening < 0:
            return
        closing = text.find('"', opening + 1)
        if closing < 0:
            return
        yield text[opening + 1:closing]
        pos = closing + 1


def parse_xpm_text(text: str) -> XpmImage:
    """Decode XPM source text: comments are dropped and quoted strings read in order."""
    return _parse(_quoted_strings(strip_comments(text)))
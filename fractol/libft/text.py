"""String helpers with the bounded-copy and search semantics of classic C routines."""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Callable, Optional

_NUL = "\0"


def _require_char(char: str) -> None:
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")


def lcpy(src: str, size: int) -> tuple[str, int]:
    """Copy at most ``size - 1`` characters of *src*.

    Returns the copied text and the full length of *src*, which callers
    compare with *size* to detect truncation. A *size* of zero copies nothing.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    copied = src[: size - 1] if size else ""
    return copied, len(src)


def lcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append *src* to *dest* so that the result fits a buffer of *size*.

    Returns the new text and the length the result would have had without
    truncation: ``len(dest) + len(src)``, or ``size + len(src)`` when *size*
    does not exceed the length of *dest*.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size > len(dest):
        total = len(src) + len(dest)
    else:
        total = len(src) + size
    room = max(0, size - len(dest) - 1)
    return dest + src[:room], total


def ncmp(first: str, second: str, n: int) -> int:
    """Compare at most *n* characters; the sign tells the ordering.

    The comparison ends where both strings end or at the first NUL shared
    by both. The result is the difference of the first differing code points.
    """
    for a, b in islice(zip_longest(first, second, fillvalue=_NUL), max(n, 0)):
        if a == _NUL and b == _NUL:
            break
        if a != b:
            return ord(a) - ord(b)
    return 0


def substr(text: str, start: int, length: int) -> str:
    """Return at most *length* characters of *text* beginning at *start*.

    A start past the end yields an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start:start + length]


def join(first: str, second: str) -> str:
    """Concatenate two strings."""
    return first + second


def trim(text: str, charset: str) -> str:
    """Remove characters found in *charset* from both ends of *text*."""
    start = 0
    end = len(text)
    while start < end and text[start] in charset:
        start += 1
    while end > start and text[end - 1] in charset:
        end -= 1
    return text[start:end]


def mapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def iteri(text: str, func: Callable[[int, str], Optional[str]]) -> str:
    """Visit every character with its index, letting *func* replace it.

    *func* returns a replacement character, or None to keep the original.
    The resulting string is returned.
    """
    result = []
    for index, char in enumerate(text):
        replacement = func(index, char)
        result.append(char if replacement is None else replacement)
    return "".join(result)


def split(text: str, sep: str) -> list[str]:
    """Split *text* on the character *sep*, dropping empty words."""
    _require_char(sep)
    return [word for word in text.split(sep) if word]


def find_char(text: str, char: str) -> Optional[int]:
    """Index of the first *char* in *text*, or None.

    Searching for NUL finds the position just past the end.
    """
    _require_char(char)
    index = text.find(char)
    if index >= 0:
        return index
    if char == _NUL:
        return len(text)
    return None


def rfind_char(text: str, char: str) -> Optional[int]:
    """Index of the last *char* in *text*, or None.

    Searching for NUL finds the position just past the end.
    """
    _require_char(char)
    if char == _NUL:
        return len(text)
    index = text.rfind(char)
    return index if index >= 0 else None


def nstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of the first *needle* lying wholly within ``haystack[:length]``.

    An empty needle is found at index 0; no match yields None.
    """
    if not needle:
        return 0
    window = haystack[: max(length, 0)]
    index = window.find(needle)
    return index if index >= 0 else None
"""A small printf-style formatter and writers for text and numbers."""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional, TextIO

from fractol.libft.chars import itoa

_UINT_MASK = 0xFFFFFFFF
_INT_MAX = 2**31 - 1
_INT_MIN = -(2**31)


def _stream(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def _to_int32(value: int) -> int:
    value &= _UINT_MASK
    return value - 2**32 if value > _INT_MAX else value


def format_hex(number: int, convert: str) -> str:
    """Hexadecimal digits of a non-negative *number*.

    ``'X'`` gives upper-case digits; ``'x'`` and ``'p'`` give lower case.
    """
    if convert not in ("x", "X", "p"):
        raise ValueError(f"unknown hex conversion {convert!r}")
    if number < 0:
        raise ValueError(f"number must not be negative, got {number}")
    digits = f"{number:x}"
    return digits.upper() if convert == "X" else digits


def format_pointer(address: Optional[int]) -> str:
    """Text of a pointer: ``(nil)`` for a null address, else ``0x`` and hex digits."""
    if not address:
        return "(nil)"
    return "0x" + format_hex(address, "p")


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return value
    return chr(value & 0xFF)


def _convert(conversion: str, args: Iterator[Any]) -> str:
    if conversion == "%":
        return "%"
    if conversion not in ("s", "c", "d", "i", "p", "x", "X", "u"):
        return " "
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{conversion}") from None
    if conversion == "s":
        return "(null)" if value is None else str(value)
    if conversion == "c":
        return _format_char(value)
    if conversion in ("d", "i"):
        return itoa(_to_int32(value))
    if conversion == "p":
        return format_pointer(value)
    if conversion in ("x", "X"):
        return format_hex(value & _UINT_MASK, conversion)
    return str(value & _UINT_MASK)


def format(fmt: str, *args: Any) -> str:
    """Expand ``%s %c %d %i %p %x %X %u %%`` in *fmt*.

    An unknown conversion becomes a single space and consumes no argument.
    """
    values = iter(args)
    parts = []
    pos = 0
    while pos < len(fmt):
        char = fmt[pos]
        if char == "%":
            conversion = fmt[pos + 1:pos + 2]
            parts.append(_convert(conversion, values))
            pos += 2
        else:
            parts.append(char)
            pos += 1
    return "".join(parts)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output; return its length."""
    text = format(fmt, *args)
    sys.stdout.write(text)
    return len(text)


def put_char(char: str, stream: Optional[TextIO] = None) -> None:
    """Write one character."""
    _stream(stream).write(_format_char(char))


def put_str(text: str, stream: Optional[TextIO] = None) -> None:
    """Write *text*."""
    _stream(stream).write(text)


def put_endl(text: str, stream: Optional[TextIO] = None) -> None:
    """Write *text* followed by a newline."""
    _stream(stream).write(text + "\n")


def put_nbr(number: int, stream: Optional[TextIO] = None) -> None:
    """Write the decimal text of a 32-bit signed integer."""
    if not _INT_MIN <= number <= _INT_MAX:
        raise OverflowError(f"{number} does not fit a 32-bit signed integer")
    _stream(stream).write(itoa(number))
"""Lenient decimal parsing for command-line fractal parameters."""

from __future__ import annotations

_DIGITS = "0123456789"


def _leading_digits(text: str, start: int) -> str:
    end = start
    while end < len(text) and text[end] in _DIGITS:
        end += 1
    return text[start:end]


def parse_float(text: str) -> float:
    """Parse a leading ``[+-]digits[.digits]`` prefix of *text*.

    Parsing stops at the first character that does not fit the pattern;
    no whitespace is skipped and no error is raised, so text without a
    numeric prefix yields zero (negative zero after a lone ``-``).
    """
    sign = 1.0
    pos = 0
    if text[:1] == "-":
        sign = -1.0
        pos = 1
    elif text[:1] == "+":
        pos = 1

    integer_digits = _leading_digits(text, pos)
    result = 0.0
    for digit in integer_digits:
        result = result * 10.0 + (ord(digit) - ord("0"))
    pos += len(integer_digits)

    if text[pos:pos + 1] == ".":
        decimal = 0.0
        divisor = 1.0
        for digit in _leading_digits(text, pos + 1):
            decimal = decimal * 10.0 + (ord(digit) - ord("0"))
            divisor *= 10.0
        result += decimal / divisor

    return sign * result
"""Locale-tolerant parsing of numeric tokens found in OCR text.

Both functions are pure and never raise. They read the leading numeric part
of a token, so trailing OCR debris such as ``"1,234 "`` or ``"12.5%"`` does
not prevent a parse.
"""

import math
import re

# Longer digit runs are OCR debris, not counts
MAX_DIGITS = 18

_INTEGER_PREFIX = re.compile(r"[+-]?\d+")
_FLOAT_PREFIX = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)")
_WHITESPACE = re.compile(r"\s+")


def parse_number(text: str | None) -> int:
    """Parse an integer, ignoring thousands separators and whitespace.

    Args:
        text: Token such as "1,234" or "+ 56"

    Returns:
        The integer value, or 0 if the token is empty, has no digits or has
        more than MAX_DIGITS digits

    Examples:
        >>> parse_number("1,234")
        1234
        >>> parse_number("")
        0
        >>> parse_number("abc")
        0
        >>> parse_number("9" * 40)
        0
    """
    if not text:
        return 0
    cleaned = _WHITESPACE.sub("", text.replace(",", ""))
    m = _INTEGER_PREFIX.match(cleaned)
    if m is None or len(m.group(0).lstrip("+-")) > MAX_DIGITS:
        return 0
    return int(m.group(0))


def parse_float(text: str | None) -> float | None:
    """Parse a signed decimal number, accepting a comma as decimal separator.

    Args:
        text: Token such as "12,5" or "-3.2"

    Returns:
        The float value, or None if the token does not start with a number
        or overflows to infinity
    """
    if not text:
        return None
    cleaned = _WHITESPACE.sub("", text.replace(",", "."))
    m = _FLOAT_PREFIX.match(cleaned)
    if m is None:
        return None
    value = float(m.group(0))
    return value if math.isfinite(value) else None


def parse_percent(text: str | None) -> float | None:
    """Parse a percentage value in the range [0, 100].

    Examples:
        >>> parse_percent("12,5")
        12.5
        >>> parse_percent("150") is None
        True
    """
    value = parse_float(text)
    if value is None or not 0 <= value <= 100:
        return None
    return value

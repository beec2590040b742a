# radix_widgets/bigbase.py

"""Base conversion for integers of any size.

Python ints are unbounded, so parsing never loses precision; the only limit is
``max_digits``, a practical ceiling on source length.
"""

from __future__ import annotations

import logging
import re

from .errors import INVALID_INPUT, ConversionError, ErrorKind
from .radix import DIGITS, check_base, digit_class

logger = logging.getLogger(__name__)

DEFAULT_MAX_DIGITS = 1024


def is_valid_input(text: str, base: int) -> bool:
    """Character-class check only; no trimming, and empty text counts as valid."""
    if text == "":
        return True
    digits = digit_class(base) + "+"
    if base == 16:
        pattern = r"(0x|0X)?" + digits
    elif base == 10:
        pattern = r"-?" + digits
    else:
        pattern = digits
    return re.fullmatch(pattern, text) is not None


def parse_big(text: str, base: int, *, max_digits: int = DEFAULT_MAX_DIGITS) -> int | None:
    """Parse ``text`` in ``base``; ``None`` when it is blank.

    A ``0x`` prefix is dropped for base 16 and a leading ``-`` is allowed for
    base 10 only.
    """
    check_base(base)
    s = (text or "").strip()
    if base == 16 and s[:2] in ("0x", "0X"):
        s = s[2:]
    if not s:
        return None

    sign = 1
    body = s
    if base == 10 and body.startswith("-"):
        sign, body = -1, body[1:]

    if not re.fullmatch(digit_class(base) + "+", body):
        logger.debug("rejecting %r: not a base-%d number", s, base)
        raise ConversionError(ErrorKind.INVALID_CHARACTER, INVALID_INPUT)
    if len(body) > max_digits:
        logger.debug("rejecting %d-digit input (limit %d)", len(body), max_digits)
        raise ConversionError(ErrorKind.PARSE_OVERFLOW, INVALID_INPUT)

    try:
        return sign * int(body, base)
    except ValueError as exc:
        # int() has its own digit limit for non power-of-two bases
        logger.debug("int() refused %d digits: %s", len(body), exc)
        raise ConversionError(ErrorKind.PARSE_OVERFLOW, INVALID_INPUT) from exc


def format_big(value: int, base: int) -> str:
    """Canonical uppercase digits, ``-`` for negatives, ``"0"`` for zero."""
    check_base(base)
    sign = "-" if value < 0 else ""
    mag = abs(value)
    try:
        if base == 10:
            return sign + str(mag)
        if base in (2, 8, 16):
            return sign + format(mag, {2: "b", 8: "o", 16: "X"}[base])
    except ValueError as exc:
        raise ConversionError(ErrorKind.PARSE_OVERFLOW, INVALID_INPUT) from exc

    if mag == 0:
        return "0"
    digits = []
    while mag > 0:
        mag, rem = divmod(mag, base)
        digits.append(DIGITS[rem])
    return sign + "".join(reversed(digits))


def convert_base(
    text: str, from_base: int, to_base: int, *, max_digits: int = DEFAULT_MAX_DIGITS
) -> str:
    """Convert ``text`` from one base to another; blank input gives ``""``.

    Any failure raises ``ConversionError`` with the single
    "Invalid Input / Out of Range" marker.
    """
    check_base(to_base)
    value = parse_big(text, from_base, max_digits=max_digits)
    if value is None:
        return ""
    return format_big(value, to_base)

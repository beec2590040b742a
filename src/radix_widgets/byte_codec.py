# radix_widgets/byte_codec.py

from __future__ import annotations

import logging
import re
from typing import NamedTuple

from .errors import ConversionError, ErrorKind
from .radix import Radix, digit_class

logger = logging.getLogger(__name__)

BYTE_MIN = 0
BYTE_MAX = 255


class ByteForms(NamedTuple):
    hex: str
    dec: str
    bin: str

    def for_radix(self, radix: Radix) -> str:
        return {Radix.HEXADECIMAL: self.hex, Radix.DECIMAL: self.dec, Radix.BINARY: self.bin}[radix]


def decode_byte(text: str, radix: int) -> int | None:
    """Parse one byte written in ``radix``.

    Returns ``None`` for blank input so callers can render an empty field.
    Raises ``ConversionError`` (InvalidCharacter / OutOfRange) otherwise.
    """
    r = Radix.parse(radix)
    s = (text or "").strip()
    if not s:
        return None

    if not re.fullmatch(r"-?" + digit_class(r) + "+", s):
        logger.debug("rejecting %r: not a base-%d number", s, r)
        raise ConversionError(ErrorKind.INVALID_CHARACTER, f"Invalid base-{int(r)} digits: {s}")

    negative = s.startswith("-")
    digits = s.lstrip("-").lstrip("0")
    if len(digits) > r.octet_width:
        # too long for a byte; int() would also refuse huge decimal strings
        logger.debug("rejecting %r: %d significant digits", s[:16], len(digits))
        raise ConversionError(ErrorKind.OUT_OF_RANGE, f"Value out of range for a byte: {s[:16]}")

    value = int(digits or "0", r)
    if negative:
        value = -value
    if not BYTE_MIN <= value <= BYTE_MAX:
        logger.debug("rejecting %r: %d outside %d..%d", s, value, BYTE_MIN, BYTE_MAX)
        raise ConversionError(ErrorKind.OUT_OF_RANGE, f"Value out of range for a byte: {s}")
    return value


def _check_byte(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"byte must be an int, got {type(value).__name__}")
    if not BYTE_MIN <= value <= BYTE_MAX:
        raise ConversionError(ErrorKind.OUT_OF_RANGE, f"Value out of range for a byte: {value}")
    return value


def format_byte(value: int, radix: int) -> str:
    """Render a byte: 2 hex digits, minimal decimal, 8 binary digits."""
    v = _check_byte(value)
    r = Radix.parse(radix)
    if r is Radix.HEXADECIMAL:
        return f"{v:02X}"
    if r is Radix.BINARY:
        return f"{v:08b}"
    return str(v)


def encode_byte(value: int) -> ByteForms:
    v = _check_byte(value)
    return ByteForms(hex=f"{v:02X}", dec=str(v), bin=f"{v:08b}")

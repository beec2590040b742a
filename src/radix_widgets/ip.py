# radix_widgets/ip.py

from __future__ import annotations

from typing import Sequence

from .byte_codec import ByteForms, decode_byte, encode_byte, format_byte
from .errors import INVALID_OCTET, ConversionError, ErrorKind
from .radix import Radix

OCTETS = 4
DEFAULT_IP = "192.168.1.1"


def convert_octet(text: str, radix: int) -> ByteForms | None:
    """Return all three forms of one octet, or ``None`` when it is blank."""
    try:
        value = decode_byte(text, radix)
    except ConversionError as exc:
        raise ConversionError(exc.kind, INVALID_OCTET) from exc
    if value is None:
        return None
    return encode_byte(value)


def parse_address(text: str, radix: int = 10) -> list[int]:
    """Parse a dotted quad whose octets are written in ``radix``."""
    parts = (text or "").strip().split(".")
    if len(parts) != OCTETS:
        raise ConversionError(
            ErrorKind.FORMAT_MISMATCH, f"Expected {OCTETS} octets, got {len(parts)}"
        )
    octets: list[int] = []
    for part in parts:
        try:
            value = decode_byte(part, radix)
        except ConversionError as exc:
            raise ConversionError(exc.kind, INVALID_OCTET) from exc
        if value is None:
            raise ConversionError(ErrorKind.EMPTY_INPUT, INVALID_OCTET)
        octets.append(value)
    return octets


def format_address(octets: Sequence[int], radix: int = 10) -> str:
    if len(octets) != OCTETS:
        raise ConversionError(
            ErrorKind.FORMAT_MISMATCH, f"Expected {OCTETS} octets, got {len(octets)}"
        )
    r = Radix.parse(radix)
    return ".".join(format_byte(o, r) for o in octets)

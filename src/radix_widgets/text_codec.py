# radix_widgets/text_codec.py

from __future__ import annotations

import logging
import re
from typing import NamedTuple

from .byte_codec import BYTE_MAX, decode_byte
from .errors import INVALID_CODE_SEQUENCE, ConversionError
from .radix import Radix

logger = logging.getLogger(__name__)

UNKNOWN_TOKEN = "[?]"


class CodeSequences(NamedTuple):
    hex: str
    dec: str
    bin: str


def clean_codes(codes: str) -> str:
    """Collapse whitespace runs (newlines included) to single spaces and trim."""
    return re.sub(r"\s+", " ", codes or "").strip()


def text_to_codes(text: str) -> CodeSequences:
    """One token per character; characters above 0xFF become ``[?]``."""
    hex_codes: list[str] = []
    dec_codes: list[str] = []
    bin_codes: list[str] = []

    for ch in text:
        code = ord(ch)
        if code <= BYTE_MAX:
            hex_codes.append(f"{code:02X}")
            dec_codes.append(str(code))
            bin_codes.append(f"{code:08b}")
        else:
            hex_codes.append(UNKNOWN_TOKEN)
            dec_codes.append(UNKNOWN_TOKEN)
            bin_codes.append(UNKNOWN_TOKEN)

    return CodeSequences(" ".join(hex_codes), " ".join(dec_codes), " ".join(bin_codes))


def codes_to_text(codes: str, base: int) -> str:
    """Decode space-separated byte codes written in ``base``.

    A single bad token rejects the whole sequence.
    """
    radix = Radix.parse(base)
    cleaned = clean_codes(codes)
    if not cleaned:
        return ""

    chars: list[str] = []
    for token in cleaned.split(" "):
        try:
            value = decode_byte(token, radix)
        except ConversionError as exc:
            logger.debug("bad code %r in base %d: %s", token, radix, exc)
            raise ConversionError(exc.kind, INVALID_CODE_SEQUENCE) from exc
        chars.append(chr(value))
    return "".join(chars)

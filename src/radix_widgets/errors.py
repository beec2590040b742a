# radix_widgets/errors.py

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Why a conversion failed."""

    EMPTY_INPUT = "EmptyInput"
    INVALID_CHARACTER = "InvalidCharacter"
    OUT_OF_RANGE = "OutOfRange"
    PARSE_OVERFLOW = "ParseOverflow"
    FORMAT_MISMATCH = "FormatMismatch"


# Markers written into sibling fields when a source field is rejected.
INVALID_CHARACTER = "Invalid Character"
INVALID_INPUT = "Invalid Input / Out of Range"
INVALID_CODE_SEQUENCE = "Invalid Code Sequence"
INVALID_OCTET = "Invalid Octet"
INVALID_HEX = "Invalid Hex"
INVALID_RGB = "Invalid RGB"
INVALID_HSL = "Invalid HSL"
RGB_OUT_OF_RANGE = "Out of Range (0-255)"
HSL_OUT_OF_RANGE = "Out of Range"


class ConversionError(ValueError):
    """A rejected input.

    ``str(exc)`` is the marker a UI shows in place of derived values;
    ``kind`` tells callers what went wrong without parsing the message.
    """

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind

    @property
    def marker(self) -> str:
        return str(self)

    def __repr__(self) -> str:
        return f"ConversionError({self.kind.value}, {str(self)!r})"

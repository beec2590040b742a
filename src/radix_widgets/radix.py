# radix_widgets/radix.py

from __future__ import annotations

from enum import IntEnum

from .errors import ConversionError, ErrorKind

DIGITS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"
MIN_BASE = 2
MAX_BASE = 36


class Radix(IntEnum):
    BINARY = 2
    DECIMAL = 10
    HEXADECIMAL = 16

    @classmethod
    def parse(cls, base: int | str) -> "Radix":
        """Accept 2/10/16 (or their names) and reject everything else."""
        if isinstance(base, str):
            s = base.strip().lower()
            aliases = {"bin": 2, "binary": 2, "dec": 10, "decimal": 10, "hex": 16, "hexadecimal": 16}
            if s in aliases:
                return cls(aliases[s])
            try:
                base = int(s)
            except ValueError:
                raise ConversionError(ErrorKind.INVALID_CHARACTER, f"Unknown radix: {base}") from None
        try:
            return cls(base)
        except ValueError:
            raise ConversionError(ErrorKind.OUT_OF_RANGE, f"Unsupported radix: {base}") from None

    @property
    def label(self) -> str:
        return {2: "Bin", 10: "Dec", 16: "Hex"}[self.value]

    @property
    def octet_width(self) -> int:
        """Digits needed to show 255 in this radix (field max length)."""
        return {2: 8, 10: 3, 16: 2}[self.value]

    def is_digit(self, ch: str) -> bool:
        return len(ch) == 1 and ch.upper() in DIGITS[: self.value]


def check_base(base: int) -> int:
    """Validate a generic 2..36 base."""
    if isinstance(base, bool) or not isinstance(base, int) or not MIN_BASE <= base <= MAX_BASE:
        raise ConversionError(ErrorKind.OUT_OF_RANGE, f"base must be {MIN_BASE}..{MAX_BASE}")
    return base


def digit_class(base: int) -> str:
    """Regex character class of the digits valid in ``base`` (either case)."""
    symbols = DIGITS[:check_base(base)]
    lower = "".join(c.lower() for c in symbols if c.isalpha())
    return "[" + symbols + lower + "]"

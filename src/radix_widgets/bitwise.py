# radix_widgets/bitwise.py

from __future__ import annotations

import re
from enum import Enum

from .errors import ConversionError, ErrorKind

MASK = 0xFF


class Gate(str, Enum):
    AND = "AND"
    OR = "OR"
    XOR = "XOR"
    NOT = "NOT"
    NAND = "NAND"
    NOR = "NOR"
    XNOR = "XNOR"

    @classmethod
    def parse(cls, name: "str | Gate") -> "Gate":
        if isinstance(name, Gate):
            return name
        try:
            return cls((name or "").strip().upper())
        except ValueError:
            raise ConversionError(ErrorKind.INVALID_CHARACTER, f"Unknown gate: {name}") from None

    @property
    def is_unary(self) -> bool:
        return self is Gate.NOT

    @property
    def is_inverted(self) -> bool:
        return self in (Gate.NOT, Gate.NAND, Gate.NOR, Gate.XNOR)


def clamp_to_byte(value: int) -> int:
    """Saturate to 0..255 (the calculator never errors on operands)."""
    if value < 0:
        return 0
    if value > MASK:
        return MASK
    return value


def parse_operand(text: str) -> int:
    """Read a calculator operand: leading decimal digits, else 0, then clamp."""
    m = re.match(r"\s*([+-]?)([0-9]+)", text or "")
    if not m:
        return 0
    sign, digits = m.groups()
    digits = digits.lstrip("0")
    if len(digits) > 3:
        return 0 if sign == "-" else MASK
    value = int(digits or "0")
    return clamp_to_byte(-value if sign == "-" else value)


def apply_gate(gate: "str | Gate", a: int, b: int | None = None) -> int:
    """Apply ``gate`` over 8-bit operands; ``b`` is ignored for NOT."""
    g = Gate.parse(gate)
    a = clamp_to_byte(a)
    b = clamp_to_byte(b or 0)

    if g in (Gate.AND, Gate.NAND):
        result = a & b
    elif g in (Gate.OR, Gate.NOR):
        result = a | b
    elif g in (Gate.XOR, Gate.XNOR):
        result = a ^ b
    else:
        result = a

    if g.is_inverted:
        # 8-bit one's complement
        result ^= MASK
    return result


def to_8bit_binary(value: int) -> str:
    return f"{value & MASK:08b}"

# radix_widgets/sync.py

"""Field synchronization for the widgets, independent of any toolkit.

Each controller takes "field X now holds text T" and answers with a
:class:`SyncResult` describing what to write into the sibling fields and which
fields to mark, disable, hide or focus. Controllers never raise for field
text: every codec error becomes a marker in the result.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Mapping

from .bigbase import DEFAULT_MAX_DIGITS, convert_base, is_valid_input
from .bitwise import Gate, apply_gate, parse_operand, to_8bit_binary
from .color import NEUTRAL_SWATCH, Color, parse_hex, parse_hsl, parse_rgb
from .errors import INVALID_CHARACTER, INVALID_OCTET, ConversionError
from .ip import OCTETS, convert_octet
from .radix import Radix
from .text_codec import codes_to_text, text_to_codes

logger = logging.getLogger(__name__)


@dataclass
class SyncResult:
    values: dict[str, str] = field(default_factory=dict)
    errors: set[str] = field(default_factory=set)
    cleared: set[str] = field(default_factory=set)
    disabled: set[str] = field(default_factory=set)
    enabled: set[str] = field(default_factory=set)
    hidden: set[str] = field(default_factory=set)
    shown: set[str] = field(default_factory=set)
    swatch: str | None = None
    focus: str | None = None
    accept: bool = True

    def merge(self, other: "SyncResult") -> "SyncResult":
        """Fold ``other`` into this result; later writes win."""
        self.values.update(other.values)
        for name in ("errors", "cleared", "disabled", "enabled", "hidden", "shown"):
            getattr(self, name).update(getattr(other, name))
        self.errors -= other.cleared
        self.cleared -= other.errors
        if other.swatch is not None:
            self.swatch = other.swatch
        if other.focus is not None:
            self.focus = other.focus
        self.accept = self.accept and other.accept
        return self


def _check_field(fields: Mapping[str, object], name: str) -> None:
    if name not in fields:
        raise KeyError(f"Unknown field: {name!r}")


# ---------------- Base converter ----------------
class BaseConverterSync:
    FIELDS: dict[str, int] = {"hex": 16, "dec": 10, "bin": 2}

    def __init__(self, fields: Mapping[str, int] | None = None, *, max_digits: int = DEFAULT_MAX_DIGITS) -> None:
        self.fields = dict(fields or self.FIELDS)
        self.max_digits = max_digits

    def edit(self, source: str, text: str) -> SyncResult:
        _check_field(self.fields, source)
        base = self.fields[source]
        result = SyncResult()

        blank = text.strip() == ""
        valid = is_valid_input(text, base)
        if valid or blank:
            result.cleared.add(source)
        else:
            logger.debug("%s: invalid base-%d input %r", source, base, text)
            result.errors.add(source)

        for target, target_base in self.fields.items():
            if target == source:
                continue
            if blank:
                result.values[target] = ""
            elif not valid:
                result.values[target] = INVALID_CHARACTER
            else:
                try:
                    result.values[target] = convert_base(
                        text, base, target_base, max_digits=self.max_digits
                    )
                except ConversionError as exc:
                    result.values[target] = exc.marker
        return result


# ---------------- ASCII / codes ----------------
class TextCodesSync:
    TEXT = "text"
    CODE_FIELDS: dict[str, Radix] = {"hex": Radix.HEXADECIMAL, "dec": Radix.DECIMAL, "bin": Radix.BINARY}

    @property
    def fields(self) -> list[str]:
        return [self.TEXT, *self.CODE_FIELDS]

    def edit(self, source: str, text: str) -> SyncResult:
        if source != self.TEXT:
            _check_field(self.CODE_FIELDS, source)
        result = SyncResult()
        others = [f for f in self.fields if f != source]

        if text.strip() == "":
            result.values.update({f: "" for f in others})
            result.enabled.update(self.fields)
            return result

        # the edited field owns the group until it is emptied again
        result.disabled.update(others)
        result.enabled.add(source)

        if source == self.TEXT:
            codes = text_to_codes(text)
            result.values.update({"hex": codes.hex, "dec": codes.dec, "bin": codes.bin})
            return result

        result.values.update({f: "" for f in others})
        try:
            result.values[self.TEXT] = codes_to_text(text, self.CODE_FIELDS[source])
        except ConversionError as exc:
            logger.debug("%s: %s", source, exc)
            result.values[self.TEXT] = exc.marker
        return result


# ---------------- Color ----------------
class ColorSync:
    PARSERS: dict[str, Callable[[str], Color]] = {"hex": parse_hex, "rgb": parse_rgb, "hsl": parse_hsl}

    @property
    def fields(self) -> list[str]:
        return list(self.PARSERS)

    def edit(self, source: str, text: str) -> SyncResult:
        _check_field(self.PARSERS, source)
        result = SyncResult()
        siblings = [f for f in self.fields if f != source]

        if text.strip() == "":
            result.values.update({f: "" for f in siblings})
            result.cleared.update(self.fields)
            result.swatch = NEUTRAL_SWATCH
            return result

        try:
            color = self.PARSERS[source](text)
        except ConversionError as exc:
            logger.debug("%s: %s (%s)", source, exc, exc.kind.value)
            result.errors.add(source)
            result.values.update({f: exc.marker for f in siblings})
            result.swatch = NEUTRAL_SWATCH
            return result

        rendered = {"hex": color.hex, "rgb": color.rgb_string, "hsl": color.hsl_string}
        result.values.update({f: rendered[f] for f in siblings})
        result.cleared.update(self.fields)
        result.swatch = color.hex
        return result


# ---------------- IP octets ----------------
class IpSync:
    RADICES = (Radix.DECIMAL, Radix.HEXADECIMAL, Radix.BINARY)

    @staticmethod
    def field_id(octet: int, radix: Radix) -> str:
        return f"{Radix.parse(radix).label.lower()}{octet}"

    def parse_field_id(self, name: str) -> tuple[int, Radix]:
        for r in self.RADICES:
            prefix = r.label.lower()
            suffix = name[len(prefix):]
            if name.startswith(prefix) and suffix in [str(o) for o in range(1, OCTETS + 1)]:
                return int(suffix), r
        raise KeyError(f"Unknown field: {name!r}")

    @property
    def fields(self) -> list[str]:
        return [self.field_id(o, r) for r in self.RADICES for o in range(1, OCTETS + 1)]

    def next_field(self, name: str) -> str | None:
        octet, radix = self.parse_field_id(name)
        return self.field_id(octet + 1, radix) if octet < OCTETS else None

    def edit(self, source: str, text: str) -> SyncResult:
        octet, radix = self.parse_field_id(source)
        result = SyncResult()
        siblings = [self.field_id(octet, r) for r in self.RADICES if r is not radix]

        if radix is Radix.HEXADECIMAL and text != text.upper():
            result.values[source] = text.upper()

        try:
            forms = convert_octet(text, radix)
        except ConversionError as exc:
            logger.debug("%s: %s", source, exc)
            result.errors.add(source)
            result.values.update({f: INVALID_OCTET for f in siblings})
            return result

        result.cleared.update([source, *siblings])
        for f in siblings:
            _, r = self.parse_field_id(f)
            result.values[f] = "" if forms is None else forms.for_radix(r)
        return result

    def key(self, source: str, current: str, key: str, *, modifier: bool = False) -> SyncResult:
        """Filter a keystroke before it reaches ``source``.

        ``.`` jumps to the next octet; a valid digit typed into a full field
        replaces its content and jumps; invalid digits are dropped.
        """
        _, radix = self.parse_field_id(source)
        result = SyncResult()

        if key == ".":
            result.accept = False
            result.focus = self.next_field(source)
            return result

        if len(key) != 1 or modifier:
            return result

        if not radix.is_digit(key):
            result.accept = False
            return result

        if len(current) >= radix.octet_width:
            result.accept = False
            new = key.upper() if radix is Radix.HEXADECIMAL else key
            result.values[source] = new
            result.merge(self.edit(source, new))
            result.focus = self.next_field(source)
        return result

    def load_address(self, address: str, radix: Radix = Radix.DECIMAL) -> SyncResult:
        """Fill every octet from a dotted address (missing parts stay blank)."""
        parts = (address or "").strip().split(".")
        result = SyncResult()
        for octet in range(1, OCTETS + 1):
            text = parts[octet - 1] if octet <= len(parts) else ""
            name = self.field_id(octet, radix)
            result.values[name] = text
            result.merge(self.edit(name, text))
        return result


# ---------------- Logic gates ----------------
class GateSync:
    A, B = "a", "b"
    OUT_DEC, OUT_BIN = "out_dec", "out_bin"

    def edit(self, gate: str, a_text: str, b_text: str) -> SyncResult:
        result = SyncResult()
        try:
            g = Gate.parse(gate)
        except ConversionError as exc:
            logger.debug("gate: %s", exc)
            result.errors.add("gate")
            result.values.update({self.OUT_DEC: "", self.OUT_BIN: ""})
            return result

        a = parse_operand(a_text)
        b = parse_operand(b_text)
        result.cleared.add("gate")
        # echo the clamped operands back into their fields
        result.values.update({self.A: str(a), self.B: str(b)})
        if g.is_unary:
            result.hidden.add(self.B)
        else:
            result.shown.add(self.B)

        out = apply_gate(g, a, None if g.is_unary else b)
        result.values.update({self.OUT_DEC: str(out), self.OUT_BIN: to_8bit_binary(out)})
        return result

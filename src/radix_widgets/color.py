# radix_widgets/color.py

"""RGB ⇆ HSL ⇆ Hex conversions.

Channel math stays in floating point; values are rounded half-up only when
they leave a function as integers (0-255 channels, degrees, percentages).
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from typing import NamedTuple

from .errors import (
    HSL_OUT_OF_RANGE,
    INVALID_HEX,
    INVALID_HSL,
    INVALID_RGB,
    RGB_OUT_OF_RANGE,
    ConversionError,
    ErrorKind,
)

logger = logging.getLogger(__name__)

DEFAULT_COLOR = "#007BFF"
NEUTRAL_SWATCH = "#F4F4F4"

_HEX_RE = re.compile(r"#?([0-9A-Fa-f]{6})")
_RGB_RE = re.compile(r"([0-9]{1,3})[,\s]*([0-9]{1,3})[,\s]*([0-9]{1,3})")
_HSL_RE = re.compile(r"([0-9]{1,3})[%\s,]*([0-9]{1,3})[%\s,]*([0-9]{1,3})")


class RGB(NamedTuple):
    r: int
    g: int
    b: int


class HSL(NamedTuple):
    h: float
    s: float
    l: float


@dataclass(frozen=True)
class Color:
    r: int
    g: int
    b: int
    h: int
    s: int
    l: int

    @property
    def rgb(self) -> RGB:
        return RGB(self.r, self.g, self.b)

    @property
    def hsl(self) -> HSL:
        return HSL(self.h, self.s, self.l)

    @property
    def hex(self) -> str:
        return to_hex(self.r, self.g, self.b)

    @property
    def rgb_string(self) -> str:
        return to_rgb_string(self.r, self.g, self.b)

    @property
    def hsl_string(self) -> str:
        return to_hsl_string(self.h, self.s, self.l)


def _round(x: float) -> int:
    # half-up, not Python's banker's rounding
    return int(math.floor(x + 0.5))


# ---------------- Core conversions ----------------
def hex_to_rgb(hex_color: str) -> RGB:
    h = hex_color.strip().lstrip("#")
    return RGB(*(int(h[i:i + 2], 16) for i in (0, 2, 4)))


def rgb_to_hex(r: int, g: int, b: int) -> str:
    return "#" + "".join(f"{min(255, max(0, int(c))):02X}" for c in (r, g, b))


def rgb_to_hsl(r: float, g: float, b: float, *, rounded: bool = True) -> HSL:
    """Convert 0-255 channels to (degrees, percent, percent).

    With ``rounded=False`` the unrounded values are returned, which
    round-trip through :func:`hsl_to_rgb` exactly.
    """
    rf, gf, bf = r / 255, g / 255, b / 255
    mx = max(rf, gf, bf)
    mn = min(rf, gf, bf)
    l = (mx + mn) / 2

    if mx == mn:
        h = s = 0.0  # achromatic
    else:
        d = mx - mn
        s = d / (2 - mx - mn) if l > 0.5 else d / (mx + mn)
        if mx == rf:
            h = (gf - bf) / d + (6 if gf < bf else 0)
        elif mx == gf:
            h = (bf - rf) / d + 2
        else:
            h = (rf - gf) / d + 4
        h /= 6

    if rounded:
        return HSL(_round(h * 360), _round(s * 100), _round(l * 100))
    return HSL(h * 360, s * 100, l * 100)


def _hue_to_rgb(p: float, q: float, t: float) -> float:
    t %= 1.0
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(h: float, s: float, l: float) -> RGB:
    """Convert (degrees, percent, percent) to 0-255 channels."""
    hf, sf, lf = h / 360, s / 100, l / 100

    if sf == 0:
        r = g = b = lf  # achromatic
    else:
        q = lf * (1 + sf) if lf < 0.5 else lf + sf - lf * sf
        p = 2 * lf - q
        r = _hue_to_rgb(p, q, hf + 1 / 3)
        g = _hue_to_rgb(p, q, hf)
        b = _hue_to_rgb(p, q, hf - 1 / 3)

    return RGB(_round(r * 255), _round(g * 255), _round(b * 255))


# ---------------- Display strings ----------------
def to_hex(r: int, g: int, b: int) -> str:
    return rgb_to_hex(r, g, b)


def to_rgb_string(r: int, g: int, b: int) -> str:
    return f"rgb({r}, {g}, {b})"


def to_hsl_string(h: int, s: int, l: int) -> str:
    return f"hsl({h}, {s}%, {l}%)"


# ---------------- Validating parsers ----------------
def parse_hex(text: str) -> Color:
    """Parse ``#RRGGBB`` (the ``#`` is optional)."""
    m = _HEX_RE.fullmatch((text or "").strip())
    if not m:
        logger.debug("rejecting hex color %r", text)
        raise ConversionError(ErrorKind.FORMAT_MISMATCH, INVALID_HEX)
    r, g, b = hex_to_rgb(m.group(1))
    h, s, l = rgb_to_hsl(r, g, b)
    return Color(r, g, b, h, s, l)


def parse_rgb(text: str) -> Color:
    """Parse a free-form triplet: ``rgb(0, 123, 255)``, ``0,123,255`` or ``0 123 255``."""
    m = _RGB_RE.search((text or "").strip())
    if not m:
        logger.debug("rejecting rgb color %r", text)
        raise ConversionError(ErrorKind.FORMAT_MISMATCH, INVALID_RGB)
    r, g, b = (int(x) for x in m.groups())
    if not all(0 <= c <= 255 for c in (r, g, b)):
        raise ConversionError(ErrorKind.OUT_OF_RANGE, RGB_OUT_OF_RANGE)
    h, s, l = rgb_to_hsl(r, g, b)
    return Color(r, g, b, h, s, l)


def parse_hsl(text: str) -> Color:
    """Parse a free-form triplet: ``hsl(211, 100%, 50%)`` or ``211 100 50``.

    The given h/s/l are kept as-is for display; only RGB is derived.
    """
    m = _HSL_RE.search((text or "").strip())
    if not m:
        logger.debug("rejecting hsl color %r", text)
        raise ConversionError(ErrorKind.FORMAT_MISMATCH, INVALID_HSL)
    h, s, l = (int(x) for x in m.groups())
    if not (0 <= h <= 360 and 0 <= s <= 100 and 0 <= l <= 100):
        raise ConversionError(ErrorKind.OUT_OF_RANGE, HSL_OUT_OF_RANGE)
    r, g, b = hsl_to_rgb(h, s, l)
    return Color(r, g, b, h, s, l)


def parse_color(text: str) -> Color:
    """Guess the notation from the text and parse it."""
    s = (text or "").strip()
    low = s.lower()
    if low.startswith("hsl"):
        return parse_hsl(s)
    if low.startswith("rgb"):
        return parse_rgb(s)
    if s.startswith("#") or _HEX_RE.fullmatch(s):
        return parse_hex(s)
    return parse_rgb(s)

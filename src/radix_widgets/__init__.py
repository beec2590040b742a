# radix_widgets/__init__.py

"""Radix Widgets package.

Re-exports the codecs for convenient imports in tests or other code.
"""
from .__about__ import (
    __version__,
    APP_NAME,
    APP_TITLE,
    BUNDLE_ID,
    AUTHOR,
    COPYRIGHT,
    HOMEPAGE,
)

from .errors import ConversionError, ErrorKind
from .radix import Radix
from .byte_codec import ByteForms, decode_byte, encode_byte, format_byte
from .bitwise import Gate, apply_gate, clamp_to_byte, to_8bit_binary
from .color import (
    Color,
    hex_to_rgb,
    hsl_to_rgb,
    parse_color,
    parse_hex,
    parse_hsl,
    parse_rgb,
    rgb_to_hex,
    rgb_to_hsl,
    to_hex,
    to_hsl_string,
    to_rgb_string,
)
from .bigbase import convert_base, is_valid_input
from .text_codec import CodeSequences, codes_to_text, text_to_codes
from .ip import convert_octet, format_address, parse_address

__all__ = [
    # Metadata
    "__version__", "APP_NAME", "APP_TITLE", "BUNDLE_ID", "AUTHOR", "COPYRIGHT", "HOMEPAGE",
    # Errors / radix
    "ConversionError", "ErrorKind", "Radix",
    # Codecs
    "ByteForms", "decode_byte", "encode_byte", "format_byte",
    "Gate", "apply_gate", "clamp_to_byte", "to_8bit_binary",
    "Color", "hex_to_rgb", "hsl_to_rgb", "parse_color", "parse_hex", "parse_hsl", "parse_rgb",
    "rgb_to_hex", "rgb_to_hsl", "to_hex", "to_hsl_string", "to_rgb_string",
    "convert_base", "is_valid_input",
    "CodeSequences", "codes_to_text", "text_to_codes",
    "convert_octet", "format_address", "parse_address",
]

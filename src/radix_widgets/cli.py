# radix_widgets/cli.py
from __future__ import annotations

import argparse
import logging
import sys
from typing import Iterable, Sequence

from .__about__ import APP_TITLE, __version__
from .bigbase import convert_base
from .bitwise import Gate, apply_gate, clamp_to_byte, to_8bit_binary
from .byte_codec import decode_byte, encode_byte
from .color import parse_color, parse_hex, parse_hsl, parse_rgb
from .config import Settings, configure_logging, load_settings
from .errors import ConversionError
from .ip import format_address, parse_address
from .radix import Radix
from .text_codec import codes_to_text, text_to_codes

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_CONVERSION_ERROR = 1
EXIT_CONFIG_ERROR = 2

STANDARD_BASES = (16, 10, 2)


# ---------- helpers ----------
def _print_kv(key: str, value: str | Iterable[str]) -> None:
    if isinstance(value, (list, tuple)):
        print(f"{key}: {' '.join(str(v) for v in value)}")
    else:
        print(f"{key}: {value}")

def _base_label(base: int) -> str:
    return Radix(base).label if base in STANDARD_BASES else f"Base {base}"

def _base_arg(text: str) -> int:
    try:
        base = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {text}") from None
    if not 2 <= base <= 36:
        raise argparse.ArgumentTypeError("base must be 2..36")
    return base


# ---------- subcommands ----------
def cmd_byte(args: argparse.Namespace) -> int:
    value = decode_byte(args.value, args.radix)
    if value is None:
        return EXIT_OK
    forms = encode_byte(value)
    _print_kv("Hex", forms.hex)
    _print_kv("Dec", forms.dec)
    _print_kv("Bin", forms.bin)
    return EXIT_OK


def cmd_gate(args: argparse.Namespace) -> int:
    gate = Gate.parse(args.gate)
    a = clamp_to_byte(args.a)
    b = None if gate.is_unary else clamp_to_byte(args.b)
    out = apply_gate(gate, a, b)
    _print_kv("Gate", gate.value)
    _print_kv("A", str(a))
    if b is not None:
        _print_kv("B", str(b))
    _print_kv("Y (dec)", str(out))
    _print_kv("Y (bin)", to_8bit_binary(out))
    return EXIT_OK


def cmd_color(args: argparse.Namespace) -> int:
    parser = {"auto": parse_color, "hex": parse_hex, "rgb": parse_rgb, "hsl": parse_hsl}[args.format]
    color = parser(args.value)
    _print_kv("Hex", color.hex)
    _print_kv("RGB", color.rgb_string)
    _print_kv("HSL", color.hsl_string)
    return EXIT_OK


def cmd_base(args: argparse.Namespace, settings: Settings) -> int:
    targets = args.to or [b for b in STANDARD_BASES if b != args.from_base]
    for base in targets:
        result = convert_base(args.value, args.from_base, base, max_digits=settings.max_digits)
        _print_kv(_base_label(base), result)
    return EXIT_OK


def cmd_text(args: argparse.Namespace) -> int:
    codes = text_to_codes(args.text)
    _print_kv("Hex", codes.hex)
    _print_kv("Dec", codes.dec)
    _print_kv("Bin", codes.bin)
    return EXIT_OK


def cmd_codes(args: argparse.Namespace) -> int:
    _print_kv("Text", codes_to_text(args.codes, args.radix))
    return EXIT_OK


def cmd_ip(args: argparse.Namespace) -> int:
    octets = parse_address(args.address, args.radix)
    for radix in (Radix.DECIMAL, Radix.HEXADECIMAL, Radix.BINARY):
        _print_kv(radix.label, format_address(octets, radix))
    return EXIT_OK


def cmd_gui(args: argparse.Namespace, settings: Settings) -> int:
    # imported lazily so the CLI works where Tk is unavailable
    from .gui import run
    run(settings)
    return EXIT_OK


# ---------- parser ----------
def _add_radix_arg(p: argparse.ArgumentParser, default: int = 10) -> None:
    p.add_argument(
        "--radix", type=int, choices=(2, 10, 16), default=default,
        help=f"radix of the input (default: {default})"
    )

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="radix-widgets",
        description=f"{APP_TITLE} (CLI)"
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("-v", "--verbose", action="store_true", help="log debug output to stderr")

    sp = p.add_subparsers(dest="cmd")

    pb = sp.add_parser("byte", help="show one byte in hex, decimal and binary")
    pb.add_argument("value", help="byte value, e.g. FF, 255 or 11111111")
    _add_radix_arg(pb)
    pb.set_defaults(func=cmd_byte)

    pg = sp.add_parser("gate", help="apply a logic gate to 8-bit operands")
    pg.add_argument("gate", type=str.upper, choices=[g.value for g in Gate])
    pg.add_argument("a", type=int, help="operand A (clamped to 0..255)")
    pg.add_argument("b", type=int, nargs="?", default=0, help="operand B (ignored for NOT)")
    pg.set_defaults(func=cmd_gate)

    pc = sp.add_parser("color", help="convert between #RRGGBB, rgb() and hsl()")
    pc.add_argument("value", help="e.g. '#007BFF', 'rgb(0, 123, 255)' or 'hsl(211, 100%%, 50%%)'")
    pc.add_argument("--format", choices=("auto", "hex", "rgb", "hsl"), default="auto")
    pc.set_defaults(func=cmd_color)

    pn = sp.add_parser("base", help="convert an integer of any size between bases")
    pn.add_argument("value", help="number in the source base")
    pn.add_argument("--from", dest="from_base", type=_base_arg, default=10, help="source base (default: 10)")
    pn.add_argument(
        "--to", type=_base_arg, action="append",
        help="target base, repeatable (default: the other two of 2/10/16)"
    )
    pn.set_defaults(func=cmd_base, needs_settings=True)

    pt = sp.add_parser("text", help="show character codes of a text")
    pt.add_argument("text")
    pt.set_defaults(func=cmd_text)

    pd = sp.add_parser("codes", help="decode space-separated byte codes to text")
    pd.add_argument("codes", help="e.g. '48 69'")
    _add_radix_arg(pd, default=16)
    pd.set_defaults(func=cmd_codes)

    pi = sp.add_parser("ip", help="show an IPv4 address in every radix")
    pi.add_argument("address", help="dotted quad, e.g. 192.168.1.1")
    _add_radix_arg(pi)
    pi.set_defaults(func=cmd_ip)

    pu = sp.add_parser("gui", help="open the desktop app")
    pu.set_defaults(func=cmd_gui, needs_settings=True)

    return p


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings()
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    configure_logging(settings, verbose=args.verbose)

    if not getattr(args, "cmd", None):
        parser.print_help()
        return EXIT_OK

    try:
        if getattr(args, "needs_settings", False):
            return args.func(args, settings)
        return args.func(args)
    except ConversionError as exc:
        logger.debug("%s failed: %s (%s)", args.cmd, exc, exc.kind.value)
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_CONVERSION_ERROR


if __name__ == "__main__":
    raise SystemExit(main())

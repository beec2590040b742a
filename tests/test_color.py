import pytest

from radix_widgets.errors import ConversionError, ErrorKind


def test_parse_hex_default_blue(color):
    c = color.parse_hex("#007BFF")
    assert c.rgb == (0, 123, 255)
    assert c.hsl == (211, 100, 50)
    assert c.hex == "#007BFF"
    assert c.rgb_string == "rgb(0, 123, 255)"
    assert c.hsl_string == "hsl(211, 100%, 50%)"


@pytest.mark.parametrize("text", ["007bff", " #007bff ", "#007BFF"])
def test_parse_hex_accepts_case_and_missing_hash(color, text):
    assert color.parse_hex(text).hex == "#007BFF"


@pytest.mark.parametrize("bad", ["", "#12345", "#12345G", "#1234567", "blue"])
def test_parse_hex_errors(color, bad):
    with pytest.raises(ConversionError, match="Invalid Hex") as info:
        color.parse_hex(bad)
    assert info.value.kind is ErrorKind.FORMAT_MISMATCH


@pytest.mark.parametrize(
    "text,rgb,hsl",
    [
        ("rgb(255, 0, 0)", (255, 0, 0), (0, 100, 50)),
        ("0,255,0", (0, 255, 0), (120, 100, 50)),
        ("0 0 255", (0, 0, 255), (240, 100, 50)),
        ("255 255 255", (255, 255, 255), (0, 0, 100)),
        ("128, 128, 128", (128, 128, 128), (0, 0, 50)),
    ],
)
def test_parse_rgb(color, text, rgb, hsl):
    c = color.parse_rgb(text)
    assert c.rgb == rgb
    assert c.hsl == hsl


def test_parse_rgb_out_of_range(color):
    with pytest.raises(ConversionError, match=r"Out of Range \(0-255\)") as info:
        color.parse_rgb("rgb(300, 0, 0)")
    assert info.value.kind is ErrorKind.OUT_OF_RANGE


def test_parse_rgb_format_mismatch(color):
    with pytest.raises(ConversionError, match="Invalid RGB") as info:
        color.parse_rgb("red")
    assert info.value.kind is ErrorKind.FORMAT_MISMATCH


@pytest.mark.parametrize(
    "text,rgb",
    [
        ("hsl(0, 100%, 50%)", (255, 0, 0)),
        ("hsl(120, 100%, 50%)", (0, 255, 0)),
        ("hsl(360, 100%, 50%)", (255, 0, 0)),
        ("211 100 50", (0, 123, 255)),
        ("hsl(0, 0%, 0%)", (0, 0, 0)),
        ("hsl(0, 0%, 100%)", (255, 255, 255)),
    ],
)
def test_parse_hsl(color, text, rgb):
    assert color.parse_hsl(text).rgb == rgb


def test_parse_hsl_keeps_given_components(color):
    c = color.parse_hsl("hsl(200, 40%, 30%)")
    assert c.hsl_string == "hsl(200, 40%, 30%)"


@pytest.mark.parametrize("bad", ["hsl(361, 50%, 50%)", "hsl(10, 101%, 50%)", "10 10 999"])
def test_parse_hsl_out_of_range(color, bad):
    with pytest.raises(ConversionError, match="Out of Range") as info:
        color.parse_hsl(bad)
    assert info.value.kind is ErrorKind.OUT_OF_RANGE


def test_parse_hsl_format_mismatch(color):
    with pytest.raises(ConversionError, match="Invalid HSL"):
        color.parse_hsl("hsl(a, b, c)")


def test_rgb_to_hsl_and_back(color):
    assert color.rgb_to_hsl(0, 123, 255) == (211, 100, 50)
    assert color.hsl_to_rgb(211, 100, 50) == (0, 123, 255)


def test_unrounded_roundtrip_within_one(color):
    for r in range(0, 256, 17):
        for g in range(0, 256, 17):
            for b in range(0, 256, 17):
                back = color.hsl_to_rgb(*color.rgb_to_hsl(r, g, b, rounded=False))
                assert all(abs(x - y) <= 1 for x, y in zip(back, (r, g, b)))


def test_achromatic_has_zero_hue_and_saturation(color):
    h, s, l = color.rgb_to_hsl(77, 77, 77)
    assert (h, s) == (0, 0)


def test_rgb_to_hex_pads_and_clamps(color):
    assert color.rgb_to_hex(0, 123, 255) == "#007BFF"
    assert color.rgb_to_hex(1, 2, 3) == "#010203"
    assert color.rgb_to_hex(300, -4, 16) == "#FF0010"
    assert color.hex_to_rgb("#010203") == (1, 2, 3)


@pytest.mark.parametrize(
    "text,expected",
    [("#ffffff", "#FFFFFF"), ("rgb(1, 2, 3)", "#010203"), ("hsl(0, 100%, 50%)", "#FF0000"), ("0 0 0", "#000000")],
)
def test_parse_color_detects_notation(color, text, expected):
    assert color.parse_color(text).hex == expected


@pytest.mark.parametrize("parse", ["parse_rgb", "parse_hsl"])
def test_non_ascii_digits_are_rejected(color, parse):
    with pytest.raises(ConversionError) as info:
        getattr(color, parse)("١٢٣, 0, 0")
    assert info.value.kind is ErrorKind.FORMAT_MISMATCH

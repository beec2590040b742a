import pytest

from radix_widgets.bitwise import Gate, apply_gate, clamp_to_byte, parse_operand, to_8bit_binary
from radix_widgets.errors import ConversionError


def test_xor_with_self_is_zero():
    for a in range(256):
        assert apply_gate("XOR", a, a) == 0


def test_nand_is_inverted_and():
    for a in range(256):
        for b in range(0, 256, 3):
            assert apply_gate(Gate.NAND, a, b) == 255 - apply_gate(Gate.AND, a, b)


@pytest.mark.parametrize(
    "gate,a,b,expected",
    [
        ("AND", 0b1100, 0b1010, 0b1000),
        ("OR", 0b1100, 0b1010, 0b1110),
        ("XOR", 0b1100, 0b1010, 0b0110),
        ("NAND", 0b1100, 0b1010, 0b11110111),
        ("NOR", 0b1100, 0b1010, 0b11110001),
        ("XNOR", 0b1100, 0b1010, 0b11111001),
        ("NOT", 0, None, 255),
        ("NOT", 0b10101010, None, 0b01010101),
    ],
)
def test_gates(gate, a, b, expected):
    assert apply_gate(gate, a, b) == expected


def test_not_ignores_b():
    assert apply_gate("NOT", 15, 200) == apply_gate("NOT", 15) == 240


def test_gate_names_are_case_insensitive():
    assert apply_gate("nand", 255, 255) == 0


@pytest.mark.parametrize("a,b,expected", [(300, 255, 255), (-5, 255, 0), (1000, -1000, 0)])
def test_operands_saturate(a, b, expected):
    assert apply_gate("AND", a, b) == expected


@pytest.mark.parametrize("value,expected", [(-1, 0), (0, 0), (128, 128), (255, 255), (256, 255)])
def test_clamp_to_byte(value, expected):
    assert clamp_to_byte(value) == expected


@pytest.mark.parametrize(
    "text,expected",
    [("12", 12), ("12abc", 12), (" 7", 7), ("abc", 0), ("", 0), ("999", 255), ("-4", 0), ("+9", 9)],
)
def test_parse_operand(text, expected):
    assert parse_operand(text) == expected


def test_unknown_gate_is_rejected():
    with pytest.raises(ConversionError):
        apply_gate("IMPLY", 1, 1)


def test_gate_flags():
    assert Gate.NOT.is_unary
    assert not Gate.AND.is_unary
    assert {g for g in Gate if g.is_inverted} == {Gate.NOT, Gate.NAND, Gate.NOR, Gate.XNOR}


@pytest.mark.parametrize("value,expected", [(0, "00000000"), (5, "00000101"), (255, "11111111")])
def test_to_8bit_binary(value, expected):
    assert to_8bit_binary(value) == expected


@pytest.mark.parametrize(
    "text,expected",
    [("9" * 5000, 255), ("-" + "9" * 5000, 0), ("0" * 5000 + "42", 42), ("0" * 5000, 0)],
)
def test_parse_operand_long_digit_runs(text, expected):
    assert parse_operand(text) == expected


def test_parse_operand_ignores_non_ascii_digits():
    assert parse_operand("١٢") == 0

import pytest

from radix_widgets.errors import ConversionError, ErrorKind
from radix_widgets.text_codec import clean_codes, codes_to_text, text_to_codes


def test_text_to_codes_hi():
    codes = text_to_codes("Hi")
    assert codes.hex == "48 69"
    assert codes.dec == "72 105"
    assert codes.bin == "01001000 01101001"


@pytest.mark.parametrize("field,base", [("hex", 16), ("dec", 10), ("bin", 2)])
def test_roundtrip(field, base):
    text = "Hello, World! ~\t\x00\xff"
    assert codes_to_text(getattr(text_to_codes(text), field), base) == text


def test_out_of_range_characters_become_placeholders():
    codes = text_to_codes("A€B")
    assert codes.hex == "41 [?] 42"
    assert codes.dec == "65 [?] 66"
    assert codes.bin == "01000001 [?] 01000010"


def test_latin1_characters_are_kept():
    assert text_to_codes("é").hex == "E9"


def test_empty_text():
    assert tuple(text_to_codes("")) == ("", "", "")


def test_invalid_token_fails_whole_sequence():
    with pytest.raises(ConversionError, match="Invalid Code Sequence") as info:
        codes_to_text("41 42 ZZ", 16)
    assert info.value.kind is ErrorKind.INVALID_CHARACTER


def test_out_of_range_token_fails_whole_sequence():
    with pytest.raises(ConversionError, match="Invalid Code Sequence") as info:
        codes_to_text("72 105 256", 10)
    assert info.value.kind is ErrorKind.OUT_OF_RANGE


def test_placeholder_token_is_not_decodable():
    with pytest.raises(ConversionError):
        codes_to_text("41 [?] 42", 16)


def test_whitespace_is_collapsed():
    assert clean_codes("  48\n\n 69\t") == "48 69"
    assert codes_to_text("  48\n\n 69\t", 16) == "Hi"


@pytest.mark.parametrize("blank", ["", "   ", "\n"])
def test_blank_codes_give_empty_text(blank):
    assert codes_to_text(blank, 16) == ""


def test_unknown_base_is_rejected():
    with pytest.raises(ConversionError) as info:
        codes_to_text("41", 8)
    assert str(info.value) != "Invalid Code Sequence"


def test_zero_padded_code_decodes():
    assert codes_to_text("0" * 5000 + "65 66", 10) == "AB"


def test_huge_code_is_out_of_range():
    with pytest.raises(ConversionError, match="Invalid Code Sequence") as info:
        codes_to_text("9" * 5000, 10)
    assert info.value.kind is ErrorKind.OUT_OF_RANGE

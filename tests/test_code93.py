import pytest

from barcodegen.code93 import FNC4, checksum, encode

ALPHANUMERIC = (
    "1010111101101010001101001001101000101100101001100100101100010101011010001011001"
    "001011000101001101001000110101010110001010011001010001101001011001000101101101101001"
    "101100101101011001101001101100101101100110101011011001011001101001101101001110101000"
    "101001010010001010001001010000101001010001001001001001000101010100001000100101000010"
    "101001110101010000101010111101"
)


def test_checksum_c():
    assert checksum("TEST93", 20) == "+"


def test_checksum_k():
    assert checksum("TEST93+", 15) == "6"


def test_checksum_of_invalid_content_is_space():
    assert checksum("test", 20) == " "


def test_encode_alphanumeric():
    code = encode("ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789", True, False)
    assert code.width == len(ALPHANUMERIC)
    assert str(code) == ALPHANUMERIC


def test_encode_width_and_metadata():
    code = encode("TEST93", True, False)
    # start, 6 characters, 2 check characters, stop, each 9 modules, plus a final bar
    assert code.width == 91
    assert code.content == "TEST93"
    assert code.metadata.code_kind == "Code 93"
    assert code.metadata.dimensions == 1
    assert str(code).endswith("1")


def test_full_ascii_mode():
    code = encode("a", True, True)
    assert code.content == FNC4 + "A"
    assert str(code) == str(encode(FNC4 + "A", True, False))


def test_star_rejected():
    with pytest.raises(ValueError):
        encode("A*B", True, False)


def test_lowercase_rejected_without_full_ascii():
    with pytest.raises(ValueError):
        encode("abc", True, False)


def test_non_ascii_rejected():
    with pytest.raises(ValueError, match="ASCII"):
        encode("ü", True, True)
import pytest

from barcodegen.aztec import (
    DEFAULT_EC_PERCENT,
    DEFAULT_LAYERS,
    AztecCode,
    encode,
    generate_check_words,
    generate_mode_message,
    stuff_bits,
)
from barcodegen.core import BitList


def to_bits(text):
    bits = BitList()
    for char in text:
        if char == "X":
            bits.add_bit(True)
        elif char == ".":
            bits.add_bit(False)
    return bits


def bit_str(bits):
    return "".join("X" if b else "." for b in bits)


def lines(*rows):
    return "".join(row + "\n" for row in rows)


WIKIPEDIA = lines(
    "X     X X       X     X X     X     X         ",
    "X         X     X X     X   X X   X X       X ",
    "X X   X X X X X   X X X                 X     ",
    "X X                 X X   X       X X X X X X ",
    "    X X X   X   X     X X X X         X X     ",
    "  X X X   X X X X   X     X   X     X X   X   ",
    "        X X X X X     X X X X   X   X     X   ",
    "X       X   X X X X X X X X X X X     X   X X ",
    "X   X     X X X               X X X X   X X   ",
    "X     X X   X X   X X X X X   X X   X   X X X ",
    "X   X         X   X       X   X X X X       X ",
    "X       X     X   X   X   X   X   X X   X     ",
    "      X   X X X   X       X   X     X X X     ",
    "    X X X X X X   X X X X X   X X X X X X   X ",
    "  X X   X   X X               X X X   X X X X ",
    "  X   X       X X X X X X X X X X X X   X X   ",
    "  X X   X       X X X   X X X       X X       ",
    "  X               X   X X     X     X X X     ",
    "  X   X X X   X X   X   X X X X   X   X X X X ",
    "    X   X   X X X   X   X   X X X X     X     ",
    "        X               X                 X   ",
    "        X X     X   X X   X   X   X       X X ",
    "  X   X   X X       X   X         X X X     X ",
)

LONG_TEXT = (
    "Aztec Code is a public domain 2D matrix barcode symbology"
    " of nominally square symbols built on a square grid with a "
    "distinctive square bullseye pattern at their center."
)

LONG_EXPECTED = lines(
    "        X X     X X     X     X     X   X X X         X   X         X   X X       ",
    "  X       X X     X   X X   X X       X             X     X   X X   X           X ",
    "  X   X X X     X   X   X X     X X X   X   X X               X X       X X     X ",
    "X X X             X   X         X         X     X     X   X     X X       X   X   ",
    "X   X   X   X   X   X   X   X   X   X   X   X   X   X   X   X   X   X   X   X   X ",
    "    X X   X   X   X X X               X       X       X X     X X   X X       X   ",
    "X X     X       X       X X X X   X   X X       X   X X   X       X X   X X   X   ",
    "  X       X   X     X X   X   X X   X X   X X X X X X   X X           X   X   X X ",
    "X X   X X   X   X X X X   X X X X X X X X   X   X       X X   X X X X   X X X     ",
    "  X       X   X     X       X X     X X   X   X   X     X X   X X X   X     X X X ",
    "  X   X X X   X X       X X X         X X           X   X   X   X X X   X X     X ",
    "    X     X   X X     X X X X     X   X     X X X X   X X   X X   X X X     X   X ",
    "X X X   X             X         X X X X X   X   X X   X   X   X X   X   X   X   X ",
    "          X       X X X   X X     X   X           X   X X X X   X X               ",
    "  X     X X   X   X       X X X X X X X X X X X X X X X   X   X X   X   X X X     ",
    "    X X                 X   X                       X X   X       X         X X X ",
    "        X   X X   X X X X X X   X X X X X X X X X   X     X X           X X X X   ",
    "          X X X   X     X   X   X               X   X X     X X X   X X           ",
    "X X     X     X   X   X   X X   X   X X X X X   X   X X X X X X X       X   X X X ",
    "X X X X       X       X   X X   X   X       X   X   X     X X X     X X       X X ",
    "X   X   X   X   X   X   X   X   X   X   X   X   X   X   X   X   X   X   X   X   X ",
    "    X     X       X         X   X   X       X   X   X     X   X X                 ",
    "        X X     X X X X X   X   X   X X X X X   X   X X X     X X X X   X         ",
    "X     X   X   X         X   X   X               X   X X   X X   X X X     X   X   ",
    "  X   X X X   X   X X   X X X   X X X X X X X X X   X X         X X     X X X X   ",
    "    X X   X   X   X X X     X                       X X X   X X   X   X     X     ",
    "    X X X X   X         X   X X X X X X X X X X X X X X   X       X X   X X   X X ",
    "            X   X   X X       X X X X X     X X X       X       X X X         X   ",
    "X       X         X   X X X X   X     X X     X X     X X           X   X       X ",
    "X     X       X X X X X     X   X X X X   X X X     X       X X X X   X   X X   X ",
    "  X X X X X               X     X X X   X       X X   X X   X X X X     X X       ",
    "X             X         X   X X   X X     X     X     X   X   X X X X             ",
    "    X   X X       X     X       X   X X X X X X   X X   X X X X X X X X X   X   X ",
    "    X         X X   X       X     X   X   X       X     X X X     X       X X X X ",
    "X     X X     X X X X X X             X X X   X               X   X     X     X X ",
    "X   X X     X               X X X X X     X X     X X X X X X X X     X   X   X X ",
    "X   X   X   X   X   X   X   X   X   X   X   X   X   X   X   X   X   X   X   X   X ",
    "X           X     X X X X     X     X         X         X   X       X X   X X X   ",
    "X   X   X X   X X X   X         X X     X X X X     X X   X   X     X   X       X ",
    "      X     X     X     X X     X   X X   X X   X         X X       X       X   X ",
    "X       X           X   X   X     X X   X               X     X     X X X         ",
)


def test_encode_wikipedia_example():
    code = encode(
        b"This is an example Aztec symbol for Wikipedia.", DEFAULT_EC_PERCENT, DEFAULT_LAYERS
    )
    assert code.to_text() == WIKIPEDIA


def test_encode_long_text():
    code = encode(LONG_TEXT.encode(), DEFAULT_EC_PERCENT, DEFAULT_LAYERS)
    assert code.to_text() == LONG_EXPECTED


def test_encode_metadata_and_size():
    code = encode(b"This is an example Aztec symbol for Wikipedia.")
    assert code.width == 23
    assert code.height == 23
    assert code.metadata.code_kind == "Aztec"
    assert code.metadata.dimensions == 2
    assert code.content == b"This is an example Aztec symbol for Wikipedia."


def test_encode_accepts_text():
    assert encode("Hello").to_text() == encode(b"Hello").to_text()


def test_smallest_compact_symbol():
    assert encode(b"A").width == 15


def test_user_specified_compact_layer_matches_auto():
    assert encode(b"A", 33, -1).to_text() == encode(b"A").to_text()


def test_user_specified_normal_layers_size():
    code = encode(b"A", 33, 4)
    # base size 14 + 4 * 4 = 30, one alignment line added
    assert code.width == 31


@pytest.mark.parametrize("layers", [33, -5])
def test_illegal_layer_count(layers):
    with pytest.raises(ValueError, match="Illegal value"):
        encode(b"x", 33, layers)


def test_data_too_large_for_user_layer():
    with pytest.raises(ValueError):
        encode(b"A" * 100, 33, -1)


def test_data_too_large_for_any_symbol():
    with pytest.raises(ValueError, match="too large"):
        encode(bytes(128 + i % 30 for i in range(3000)))


@pytest.mark.parametrize(
    "word_size, bits, expected",
    [
        (5, ".X.X. X.X.X .X.X.", ".X.X. X.X.X .X.X."),
        (5, ".X.X. ..... .X.X", ".X.X. ....X ..X.X"),
        (3, "XX. ... ... ..X XXX .X. ..", "XX. ..X ..X ..X ..X .XX XX. .X. ..X"),
        (6, ".X.X.. ...... ..X.XX", ".X.X.. .....X. ..X.XX XXXX."),
        (6, ".X.X.. ...... ...... ..X.X.", ".X.X.. .....X .....X ....X. X.XXXX"),
        (6, ".X.X.. XXXXXX ...... ..X.XX", ".X.X.. XXXXX. X..... ...X.X XXXXX."),
        (
            6,
            "...... ..XXXX X..XX. .X.... .X.X.X .....X .X.... ...X.X .....X ....XX ..X... ....X. X..XXX X.XX.X",
            ".....X ...XXX XX..XX ..X... ..X.X. X..... X.X... ....X. X..... X....X X..X.. .....X X.X..X XXX.XX .XXXXX",
        ),
    ],
)
def test_stuff_bits(word_size, bits, expected):
    assert bit_str(stuff_bits(to_bits(bits), word_size)) == expected.replace(" ", "")


@pytest.mark.parametrize(
    "compact, layers, words, expected",
    [
        (True, 2, 29, ".X .XXX.. ...X XX.. ..X .XX. .XX.X"),
        (True, 4, 64, "XX XXXXXX .X.. ...X ..XX .X.. XX.."),
        (False, 21, 660, "X.X.. .X.X..X..XX .XXX ..X.. .XXX. .X... ..XXX"),
        (False, 32, 4096, "XXXXX XXXXXXXXXXX X.X. ..... XXX.X ..X.. X.XXX"),
    ],
)
def test_mode_message(compact, layers, words, expected):
    result = generate_mode_message(compact, layers, words)
    assert bit_str(result) == expected.replace(" ", "")


def test_check_words_keep_message_after_padding():
    message = to_bits("X.X.XX ..XX.X")
    result = generate_check_words(message, 104, 6)
    assert len(result) == 104
    assert bit_str(result)[:2] == ".."
    assert bit_str(result)[2:14] == "X.X.XX..XX.X"


def test_aztec_code_set_and_read():
    code = AztecCode(5, b"ab")
    code.set(1, 2)
    assert code.is_black(1, 2)
    assert not code.is_black(2, 1)
    assert code.to_text().splitlines()[2] == "  X       "
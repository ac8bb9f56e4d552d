"""Aztec Code barcodes."""

from __future__ import annotations

from functools import lru_cache
from typing import Union

from .aztec_highlevel import highlevel_encode
from .core import BarcodeKind, BitList, Metadata
from .reedsolomon import GaloisField, ReedSolomonEncoder

DEFAULT_EC_PERCENT = 33
DEFAULT_LAYERS = 0
_MAX_LAYERS = 32
_MAX_LAYERS_COMPACT = 4

_WORD_SIZE = (
    4, 6, 6, 8, 8, 8, 8, 8, 8, 10, 10, 10, 10, 10, 10, 10, 10, 10, 10, 10, 10, 10, 10,
    12, 12, 12, 12, 12, 12, 12, 12, 12, 12,
)

# word size -> (primitive polynomial, field size)
_FIELDS = {
    4: (0x13, 16),
    6: (0x43, 64),
    8: (0x012D, 256),
    10: (0x409, 1024),
    12: (0x1069, 4096),
}


class AztecCode:
    """A rendered, square Aztec symbol."""

    def __init__(self, size: int, content: bytes = b"") -> None:
        self.size = size
        self.content = bytes(content)
        self._bits = BitList(size * size)

    @property
    def width(self) -> int:
        return self.size

    @property
    def height(self) -> int:
        return self.size

    @property
    def metadata(self) -> Metadata:
        return Metadata(BarcodeKind.AZTEC.value, 2)

    def set(self, x: int, y: int) -> None:
        """Make the module at column ``x`` and row ``y`` dark."""
        self._bits.set_bit(x * self.size + y, True)

    def is_black(self, x: int, y: int) -> bool:
        """Whether the module at column ``x`` and row ``y`` is dark."""
        return self._bits.get_bit(x * self.size + y)

    def to_text(self) -> str:
        """Draw the symbol with 'X ' for dark and two spaces for light modules."""
        return "".join(
            "".join("X " if self.is_black(x, y) else "  " for x in range(self.size)) + "\n"
            for y in range(self.size)
        )

    def __str__(self) -> str:
        return self.to_text()


@lru_cache(maxsize=None)
def _encoder_for(word_size: int) -> ReedSolomonEncoder:
    try:
        primitive, size = _FIELDS[word_size]
    except KeyError:
        raise ValueError(f"unsupported word size {word_size}") from None
    return ReedSolomonEncoder(GaloisField(primitive, size, 1))


def _total_bits_in_layer(layers: int, compact: bool) -> int:
    return ((88 if compact else 112) + 16 * layers) * layers


def stuff_bits(bits: BitList, word_size: int) -> BitList:
    """Split bits into words, stuffing a bit into words of all ones or all zeros."""
    source = list(bits)
    n = len(source)
    mask = (1 << word_size) - 2
    out = BitList()
    i = 0
    while i < n:
        word = 0
        for j in range(word_size):
            if i + j >= n or source[i + j]:
                word |= 1 << (word_size - 1 - j)
        if word & mask == mask:
            out.add_bits(word & mask, word_size)
            i += word_size - 1
        elif word & mask == 0:
            out.add_bits(word | 1, word_size)
            i += word_size - 1
        else:
            out.add_bits(word, word_size)
            i += word_size
    return out


def _bits_to_words(bits: BitList, word_size: int, word_count: int) -> list[int]:
    source = list(bits)
    words = []
    for start in range(0, word_count * word_size, word_size):
        value = 0
        for bit in source[start:start + word_size]:
            value = (value << 1) | int(bit)
        words.append(value)
    return words


def generate_check_words(bits: BitList, total_bits: int, word_size: int) -> BitList:
    """Pad the message words with Reed-Solomon check words to ``total_bits``."""
    message_word_count = len(bits) // word_size
    total_word_count = total_bits // word_size
    ecc_word_count = total_word_count - message_word_count

    message_words = _bits_to_words(bits, word_size, message_word_count)
    ecc_words = _encoder_for(word_size).encode(message_words, ecc_word_count)

    result = BitList()
    result.add_bits(0, total_bits % word_size)
    for word in (*message_words, *ecc_words):
        result.add_bits(word, word_size)
    return result


def generate_mode_message(compact: bool, layers: int, message_size_in_words: int) -> BitList:
    """The mode message holding the layer count and the data word count."""
    message = BitList()
    if compact:
        message.add_bits(layers - 1, 2)
        message.add_bits(message_size_in_words - 1, 6)
        return generate_check_words(message, 28, 4)
    message.add_bits(layers - 1, 5)
    message.add_bits(message_size_in_words - 1, 11)
    return generate_check_words(message, 40, 4)


def _draw_mode_message(code: AztecCode, compact: bool, matrix_size: int, message: BitList) -> None:
    center = matrix_size // 2
    if compact:
        for i in range(7):
            offset = center - 3 + i
            if message.get_bit(i):
                code.set(offset, center - 5)
            if message.get_bit(i + 7):
                code.set(center + 5, offset)
            if message.get_bit(20 - i):
                code.set(offset, center + 5)
            if message.get_bit(27 - i):
                code.set(center - 5, offset)
    else:
        for i in range(10):
            offset = center - 5 + i + i // 5
            if message.get_bit(i):
                code.set(offset, center - 7)
            if message.get_bit(i + 10):
                code.set(center + 7, offset)
            if message.get_bit(29 - i):
                code.set(offset, center + 7)
            if message.get_bit(39 - i):
                code.set(center - 7, offset)


def _draw_bulls_eye(code: AztecCode, center: int, size: int) -> None:
    for i in range(0, size, 2):
        for j in range(center - i, center + i + 1):
            code.set(j, center - i)
            code.set(j, center + i)
            code.set(center - i, j)
            code.set(center + i, j)
    code.set(center - size, center - size)
    code.set(center - size + 1, center - size)
    code.set(center - size, center - size + 1)
    code.set(center + size, center - size)
    code.set(center + size, center - size + 1)
    code.set(center + size, center + size - 1)


def encode(
    data: Union[bytes, str],
    min_ecc_percent: int = DEFAULT_EC_PERCENT,
    user_specified_layers: int = DEFAULT_LAYERS,
) -> AztecCode:
    """Create an Aztec barcode.

    A negative layer count asks for a compact symbol, zero picks the
    smallest symbol that fits.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    data = bytes(data)
    bits = highlevel_encode(data)
    ecc_bits = (len(bits) * min_ecc_percent) // 100 + 11
    total_size_bits = len(bits) + ecc_bits

    if user_specified_layers != DEFAULT_LAYERS:
        compact = user_specified_layers < 0
        layers = abs(user_specified_layers)
        if layers > (_MAX_LAYERS_COMPACT if compact else _MAX_LAYERS):
            raise ValueError(f"Illegal value {user_specified_layers} for layers")
        total_bits = _total_bits_in_layer(layers, compact)
        word_size = _WORD_SIZE[layers]
        usable_bits = total_bits - total_bits % word_size
        stuffed = stuff_bits(bits, word_size)
        if len(stuffed) + ecc_bits > usable_bits:
            raise ValueError("Data to large for user specified layer")
        if compact and len(stuffed) > word_size * 64:
            raise ValueError("Data to large for user specified layer")
    else:
        word_size = 0
        stuffed = BitList()
        # Sizes in the order Compact1..Compact4, Normal4..Normal32.
        for i in range(_MAX_LAYERS + 1):
            compact = i <= 3
            layers = i + 1 if compact else i
            total_bits = _total_bits_in_layer(layers, compact)
            if total_size_bits > total_bits:
                continue
            if word_size != _WORD_SIZE[layers]:
                word_size = _WORD_SIZE[layers]
                stuffed = stuff_bits(bits, word_size)
            usable_bits = total_bits - total_bits % word_size
            if compact and len(stuffed) > word_size * 64:
                # compact symbols hold at most 64 data words
                continue
            if len(stuffed) + ecc_bits <= usable_bits:
                break
        else:
            raise ValueError("Data too large for an aztec code")

    message_bits = generate_check_words(stuffed, total_bits, word_size)
    mode_message = generate_mode_message(compact, layers, len(stuffed) // word_size)

    base_matrix_size = (11 if compact else 14) + layers * 4
    if compact:
        matrix_size = base_matrix_size
        alignment_map = list(range(base_matrix_size))
    else:
        matrix_size = base_matrix_size + 1 + 2 * ((base_matrix_size // 2 - 1) // 15)
        alignment_map = [0] * base_matrix_size
        orig_center = base_matrix_size // 2
        center = matrix_size // 2
        for i in range(orig_center):
            new_offset = i + i // 15
            alignment_map[orig_center - i - 1] = center - new_offset - 1
            alignment_map[orig_center + i] = center + new_offset + 1

    code = AztecCode(matrix_size, data)
    last = base_matrix_size - 1

    row_offset = 0
    for i in range(layers):
        row_size = (layers - i) * 4 + (9 if compact else 12)
        for j in range(row_size):
            column_offset = j * 2
            for k in range(2):
                if message_bits.get_bit(row_offset + column_offset + k):
                    code.set(alignment_map[i * 2 + k], alignment_map[i * 2 + j])
                if message_bits.get_bit(row_offset + row_size * 2 + column_offset + k):
                    code.set(alignment_map[i * 2 + j], alignment_map[last - i * 2 - k])
                if message_bits.get_bit(row_offset + row_size * 4 + column_offset + k):
                    code.set(alignment_map[last - i * 2 - k], alignment_map[last - i * 2 - j])
                if message_bits.get_bit(row_offset + row_size * 6 + column_offset + k):
                    code.set(alignment_map[last - i * 2 - j], alignment_map[i * 2 + k])
        row_offset += row_size * 8

    _draw_mode_message(code, compact, matrix_size, mode_message)

    half = matrix_size // 2
    if compact:
        _draw_bulls_eye(code, half, 5)
    else:
        _draw_bulls_eye(code, half, 7)
        for j in range(0, 16 * len(range(0, base_matrix_size // 2 - 1, 15)), 16):
            for k in range(half & 1, matrix_size, 2):
                code.set(half - j, k)
                code.set(half + j, k)
                code.set(k, half - j)
                code.set(k, half + j)
    return code
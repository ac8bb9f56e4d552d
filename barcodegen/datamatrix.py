"""Data Matrix barcodes."""

from __future__ import annotations

from typing import Sequence

from .datamatrix_layout import CodeLayout, DataMatrixCode
from .datamatrix_size import CodeSize, smallest_size_for
from .reedsolomon import GaloisField, ReedSolomonEncoder

_RS = ReedSolomonEncoder(GaloisField(301, 256, 1))

_PAD = 129
_UPPER_SHIFT = 235


def encode_text(content: str) -> bytes:
    """Encode text as ASCII mode codewords, packing digit pairs."""
    data = content.encode("utf-8")
    result = bytearray()
    i = 0
    while i < len(data):
        c = data[i]
        i += 1
        if 0x30 <= c <= 0x39 and i < len(data) and 0x30 <= data[i] <= 0x39:
            result.append((c - 0x30) * 10 + (data[i] - 0x30) + 130)
            i += 1
        elif c > 127:
            result += bytes((_UPPER_SHIFT, c - 127))
        else:
            result.append(c + 1)
    return bytes(result)


def add_padding(data: bytes, count: int) -> bytes:
    """Pad the codewords up to ``count`` with the pseudo random pad sequence."""
    result = bytearray(data)
    if len(result) < count:
        result.append(_PAD)
    while len(result) < count:
        r = ((149 * (len(result) + 1)) % 253) + 1
        value = _PAD + r
        if value > 254:
            value -= 254
        result.append(value)
    return bytes(result)


def calc_ecc(data: Sequence[int], size: CodeSize) -> bytes:
    """Append the interleaved error correction codewords to the data."""
    data_size = len(data)
    result = list(data) + [0] * size.ecc_count
    for block in range(size.block_count):
        block_data = list(data[block:data_size:size.block_count])
        block_data += [0] * (size.data_codewords_for_block(block) - len(block_data))
        ecc = _RS.encode(block_data, size.ecc_per_block)
        result[data_size + block::size.block_count] = ecc
    return bytes(result)


def encode(content: str) -> DataMatrixCode:
    """Create a Data Matrix barcode for the content."""
    data = encode_text(content)
    size = smallest_size_for(len(data))
    data = add_padding(data, size.data_codewords)
    data = calc_ecc(data, size)
    layout = CodeLayout(size)
    layout.set_values(data)
    code = layout.merge()
    code.content = content
    return code
"""Codabar barcodes."""

from __future__ import annotations

import re

from .core import Barcode1D, BarcodeKind, BitList

_VALID = re.compile(r"[ABCD][0-9\-$:/.+]*[ABCD]")

_ENCODING_TABLE: dict[str, str] = {
    "0": "101010011",
    "1": "101011001",
    "2": "101001011",
    "3": "110010101",
    "4": "101101001",
    "5": "110101001",
    "6": "100101011",
    "7": "100101101",
    "8": "100110101",
    "9": "110100101",
    "-": "101001101",
    "$": "101100101",
    ":": "1101011011",
    "/": "1101101011",
    ".": "1101101101",
    "+": "1011011011",
    "A": "1011001001",
    "B": "1001001011",
    "C": "1010010011",
    "D": "1010011001",
}


def encode(content: str) -> Barcode1D:
    """Create a Codabar barcode; the content must start and end with A-D."""
    if _VALID.fullmatch(content) is None:
        raise ValueError(f'can not encode "{content}"')
    bits = BitList()
    for position, char in enumerate(content):
        if position > 0:
            bits.add_bit(False)
        bits.extend(c == "1" for c in _ENCODING_TABLE[char])
    return Barcode1D(BarcodeKind.CODABAR, content, bits)
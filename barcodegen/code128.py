"""Code 128 barcodes."""

from __future__ import annotations

from enum import IntEnum
from typing import Sequence

from .core import Barcode1D, BarcodeKind, BitList

FNC1 = "\u00f1"
FNC2 = "\u00f2"
FNC3 = "\u00f3"
FNC4 = "\u00f4"

_FUNCTION_CHARS = (FNC1, FNC2, FNC3, FNC4)

_ENCODING_TABLE = (
    "11011001100", "11001101100", "11001100110", "10010011000", "10010001100",
    "10001001100", "10011001000", "10011000100", "10001100100", "11001001000",
    "11001000100", "11000100100", "10110011100", "10011011100", "10011001110",
    "10111001100", "10011101100", "10011100110", "11001110010", "11001011100",
    "11001001110", "11011100100", "11001110100", "11101101110", "11101001100",
    "11100101100", "11100100110", "11101100100", "11100110100", "11100110010",
    "11011011000", "11011000110", "11000110110", "10100011000", "10001011000",
    "10001000110", "10110001000", "10001101000", "10001100010", "11010001000",
    "11000101000", "11000100010", "10110111000", "10110001110", "10001101110",
    "10111011000", "10111000110", "10001110110", "11101110110", "11010001110",
    "11000101110", "11011101000", "11011100010", "11011101110", "11101011000",
    "11101000110", "11100010110", "11101101000", "11101100010", "11100011010",
    "11101111010", "11001000010", "11110001010", "10100110000", "10100001100",
    "10010110000", "10010000110", "10000101100", "10000100110", "10110010000",
    "10110000100", "10011010000", "10011000010", "10000110100", "10000110010",
    "11000010010", "11001010000", "11110111010", "11000010100", "10001111010",
    "10100111100", "10010111100", "10010011110", "10111100100", "10011110100",
    "10011110010", "11110100100", "11110010100", "11110010010", "11011011110",
    "11011110110", "11110110110", "10101111000", "10100011110", "10001011110",
    "10111101000", "10111100010", "11110101000", "11110100010", "10111011110",
    "10111101110", "11101011110", "11110101110", "11010000100", "11010010000",
    "11010011100", "1100011101011",
)

_CODE_A = 101
_CODE_B = 100
_CODE_C = 99
_STOP = 106

_AB_TABLE = " !\"#$%&'()*+,-./0123456789:;<=>?@ABCDEFGHIJKLMNOPQRSTUVWXYZ[\\]^_"
_B_TABLE = _AB_TABLE + "`abcdefghijklmnopqrstuvwxyz{|}~\x7f"
_A_ONLY_TABLE = "".join(chr(c) for c in range(0x20))
_A_TABLE = _AB_TABLE + _A_ONLY_TABLE


class CodeSet(IntEnum):
    """The active code set; the values are the start symbols of each set."""

    NONE = 0
    A = 103
    B = 104
    C = 105


_SWITCH_SYMBOL = {CodeSet.A: _CODE_A, CodeSet.B: _CODE_B, CodeSet.C: _CODE_C}
_FUNCTION_INDEX_A = {FNC1: 102, FNC2: 97, FNC3: 96, FNC4: 101}
_FUNCTION_INDEX_B = {FNC1: 102, FNC2: 97, FNC3: 96, FNC4: 100}


def _table_contains(table: str, char: str) -> bool:
    return char in table or char in _FUNCTION_CHARS


def should_use_c_table(next_chars: Sequence[str], current: CodeSet) -> bool:
    """Whether the upcoming characters are best encoded as digit pairs."""
    required = 2 if current == CodeSet.C else 4
    if len(next_chars) < required:
        return False
    i = 0
    while i < required:
        char = next_chars[i]
        if i % 2 == 0 and char == FNC1:
            required += 1
            if len(next_chars) < required:
                return False
        elif not "0" <= char <= "9":
            return False
        i += 1
    return True


def should_use_a_table(next_chars: Sequence[str], current: CodeSet) -> bool:
    """Whether the next character should be encoded in code set A."""
    first = next_chars[0]
    if not _table_contains(_B_TABLE, first) or current == CodeSet.A:
        return _table_contains(_A_TABLE, first)
    if current == CodeSet.NONE:
        for char in next_chars:
            if _table_contains(_AB_TABLE, char):
                continue
            if char in _A_ONLY_TABLE:
                return True
            break
    return False


def _switch_to(result: list[int], current: CodeSet, target: CodeSet) -> CodeSet:
    if current != target:
        result.append(int(target) if current == CodeSet.NONE else _SWITCH_SYMBOL[target])
    return target


def _code_indexes(content: str) -> list[int]:
    result: list[int] = []
    current = CodeSet.NONE
    i = 0
    while i < len(content):
        rest = content[i:]
        char = content[i]
        if should_use_c_table(rest, current):
            current = _switch_to(result, current, CodeSet.C)
            if char == FNC1:
                result.append(102)
            else:
                i += 1
                result.append(int(char) * 10 + int(content[i]))
        elif should_use_a_table(rest, current):
            current = _switch_to(result, current, CodeSet.A)
            index = _FUNCTION_INDEX_A.get(char, _A_TABLE.find(char))
            if index < 0:
                raise ValueError(f'"{content}" could not be encoded')
            result.append(index)
        else:
            current = _switch_to(result, current, CodeSet.B)
            index = _FUNCTION_INDEX_B.get(char, _B_TABLE.find(char))
            if index < 0:
                raise ValueError(f'"{content}" could not be encoded')
            result.append(index)
        i += 1
    return result


def _checked_indexes(content: str) -> list[int]:
    if not 1 <= len(content) <= 80:
        raise ValueError(
            f"content length should be between 1 and 80 runes but got {len(content)}"
        )
    return _code_indexes(content)


def _bits_for(indexes: Sequence[int]) -> BitList:
    bits = BitList()
    for index in indexes:
        bits.extend(c == "1" for c in _ENCODING_TABLE[index])
    return bits


def encode(content: str) -> Barcode1D:
    """Create a Code 128 barcode with its modulo 103 check symbol."""
    indexes = _checked_indexes(content)
    checksum = (indexes[0] + sum(pos * idx for pos, idx in enumerate(indexes) if pos > 0)) % 103
    bits = _bits_for([*indexes, checksum, _STOP])
    return Barcode1D(BarcodeKind.CODE128, content, bits, checksum)


def encode_without_checksum(content: str) -> Barcode1D:
    """Create a Code 128 barcode without a check symbol."""
    indexes = _checked_indexes(content)
    bits = _bits_for([*indexes, _STOP])
    return Barcode1D(BarcodeKind.CODE128, content, bits)
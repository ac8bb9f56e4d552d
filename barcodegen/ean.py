"""EAN 8 and EAN 13 barcodes."""

from __future__ import annotations

from dataclasses import dataclass

from .core import Barcode1D, BarcodeKind, BitList


@dataclass(frozen=True)
class _Digit:
    left_odd: str
    left_even: str
    right: str
    parity: str


_DIGITS: dict[str, _Digit] = {
    "0": _Digit("0001101", "0100111", "1110010", "000000"),
    "1": _Digit("0011001", "0110011", "1100110", "001011"),
    "2": _Digit("0010011", "0011011", "1101100", "001101"),
    "3": _Digit("0111101", "0100001", "1000010", "001110"),
    "4": _Digit("0100011", "0011101", "1011100", "010011"),
    "5": _Digit("0110001", "0111001", "1001110", "011001"),
    "6": _Digit("0101111", "0000101", "1010000", "011100"),
    "7": _Digit("0111011", "0010001", "1000100", "010101"),
    "8": _Digit("0110111", "0001001", "1001000", "010110"),
    "9": _Digit("0001011", "0010111", "1110100", "011010"),
}

_GUARD = "101"
_CENTER_GUARD = "01010"


def check_digit(code: str) -> str:
    """The check digit for ``code``; weights start at 3 for a 7 digit code."""
    triple = len(code) == 7
    total = 0
    for char in code:
        if char not in _DIGITS:
            raise ValueError(f"{char!r} is not a digit")
        value = int(char)
        total += value * 3 if triple else value
        triple = not triple
    return str((10 - total % 10) % 10)


def _add(bits: BitList, pattern: str) -> None:
    bits.extend(c == "1" for c in pattern)


def _encode_ean8(code: str) -> BitList:
    bits = BitList()
    _add(bits, _GUARD)
    for position, char in enumerate(code):
        digit = _DIGITS[char]
        if position == 4:
            _add(bits, _CENTER_GUARD)
        _add(bits, digit.left_odd if position < 4 else digit.right)
    _add(bits, _GUARD)
    return bits


def _encode_ean13(code: str) -> BitList:
    bits = BitList()
    _add(bits, _GUARD)
    parity = _DIGITS[code[0]].parity
    for position, char in enumerate(code[1:], start=1):
        digit = _DIGITS[char]
        if position < 7:
            pattern = digit.left_even if parity[position - 1] == "1" else digit.left_odd
        else:
            pattern = digit.right
        if position == 7:
            _add(bits, _CENTER_GUARD)
        _add(bits, pattern)
    _add(bits, _GUARD)
    return bits


def encode(code: str) -> Barcode1D:
    """Create an EAN 8 or EAN 13 barcode; a missing check digit is appended."""
    checksum = 0
    if len(code) in (7, 12):
        if not all(c in _DIGITS for c in code):
            raise ValueError("invalid ean code data")
        code += check_digit(code)
        checksum = int(check_digit(code))
    elif len(code) in (8, 13):
        body = code[:-1]
        if not all(c in _DIGITS for c in body) or body + check_digit(body) != code:
            raise ValueError("checksum missmatch")
        checksum = int(code[-1])

    if len(code) == 8:
        return Barcode1D(BarcodeKind.EAN8, code, _encode_ean8(code), checksum)
    if len(code) == 13:
        return Barcode1D(BarcodeKind.EAN13, code, _encode_ean13(code), checksum)
    raise ValueError("invalid ean code data")
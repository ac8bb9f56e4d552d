"""Code 39 barcodes."""

from __future__ import annotations

from .core import Barcode1D, BarcodeKind, BitList

_CHARSET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ-. $/+%"

_PATTERNS = (
    "101001101101", "110100101011", "101100101011", "110110010101",
    "101001101011", "110100110101", "101100110101", "101001011011",
    "110100101101", "101100101101", "110101001011", "101101001011",
    "110110100101", "101011001011", "110101100101", "101101100101",
    "101010011011", "110101001101", "101101001101", "101011001101",
    "110101010011", "101101010011", "110110101001", "101011010011",
    "110101101001", "101101101001", "101010110011", "110101011001",
    "101101011001", "101011011001", "110010101011", "100110101011",
    "110011010101", "100101101011", "110010110101", "100110110101",
    "100101011011", "110010101101", "100110101101", "100100100101",
    "100100101001", "100101001001", "101001001001",
)

_START_STOP = "*"
_START_STOP_PATTERN = "100101101101"

# character -> (check value, bar pattern); the start/stop character has no value
_ENCODE_TABLE: dict[str, tuple[int, str]] = {
    char: (value, pattern)
    for value, (char, pattern) in enumerate(zip(_CHARSET, _PATTERNS))
}
_ENCODE_TABLE[_START_STOP] = (-1, _START_STOP_PATTERN)

_VALUE_TO_CHAR = {value: char for char, (value, _) in _ENCODE_TABLE.items() if value >= 0}

_EXTENDED_TABLE: dict[int, str] = {
    0: "%U", 1: "$A", 2: "$B", 3: "$C", 4: "$D", 5: "$E", 6: "$F", 7: "$G", 8: "$H",
    9: "$I", 10: "$J", 11: "$K", 12: "$L", 13: "$M", 14: "$N", 15: "$O", 16: "$P",
    17: "$Q", 18: "$R", 19: "$S", 20: "$T", 21: "$U", 22: "$V", 23: "$W", 24: "$X",
    25: "$Y", 26: "$Z", 27: "%A", 28: "%B", 29: "%C", 30: "%D", 31: "%E", 33: "/A",
    34: "/B", 35: "/C", 36: "/D", 37: "/E", 38: "/F", 39: "/G", 40: "/H", 41: "/I",
    42: "/J", 43: "/K", 44: "/L", 47: "/O", 58: "/Z", 59: "%F", 60: "%G", 61: "%H",
    62: "%I", 63: "%J", 64: "%V", 91: "%K", 92: "%L", 93: "%M", 94: "%N", 95: "%O",
    96: "%W", 97: "+A", 98: "+B", 99: "+C", 100: "+D", 101: "+E", 102: "+F",
    103: "+G", 104: "+H", 105: "+I", 106: "+J", 107: "+K", 108: "+L", 109: "+M",
    110: "+N", 111: "+O", 112: "+P", 113: "+Q", 114: "+R", 115: "+S", 116: "+T",
    117: "+U", 118: "+V", 119: "+W", 120: "+X", 121: "+Y", 122: "+Z", 123: "%P",
    124: "%Q", 125: "%R", 126: "%S", 127: "%T",
}

_INVALID_CHECKSUM = "#"


def _checksum_char(content: str) -> str:
    """The modulo 43 check character, or '#' if the content has no check value."""
    total = 0
    for char in content:
        info = _ENCODE_TABLE.get(char)
        if info is None or info[0] < 0:
            return _INVALID_CHECKSUM
        total += info[0]
    return _VALUE_TO_CHAR.get(total % 43, _INVALID_CHECKSUM)


def _prepare(content: str) -> str:
    """Rewrite ASCII content with the full ASCII escape pairs."""
    parts = []
    for char in content:
        code = ord(char)
        if code > 127:
            raise ValueError("Only ASCII strings can be encoded")
        parts.append(_EXTENDED_TABLE.get(code, char))
    return "".join(parts)


def encode(content: str, include_checksum: bool = False, full_ascii_mode: bool = False) -> Barcode1D:
    """Create a Code 39 barcode, optionally with a check character and full ASCII."""
    if full_ascii_mode:
        content = _prepare(content)
    elif _START_STOP in content:
        raise ValueError("invalid data! try full ascii mode")

    data = _START_STOP + content
    if include_checksum:
        data += _checksum_char(content)
    data += _START_STOP

    bits = BitList()
    for position, char in enumerate(data):
        if position:
            bits.add_bit(False)
        info = _ENCODE_TABLE.get(char)
        if info is None:
            raise ValueError("invalid data! try full ascii mode")
        bits.extend(c == "1" for c in info[1])

    check_char = _checksum_char(content)
    checksum = int(check_char) if check_char in "0123456789" else 0
    return Barcode1D(BarcodeKind.CODE39, content, bits, checksum)
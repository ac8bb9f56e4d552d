"""Code 93 barcodes."""

from __future__ import annotations

from .core import Barcode1D, BarcodeKind, BitList

FNC1 = "\u00f1"
FNC2 = "\u00f2"
FNC3 = "\u00f3"
FNC4 = "\u00f4"

_CHARSET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ-. $/+%" + FNC1 + FNC2 + FNC3 + FNC4 + "*"

_PATTERNS = (
    0x114, 0x148, 0x144, 0x142, 0x128, 0x124, 0x122, 0x150, 0x112, 0x10A,
    0x1A8, 0x1A4, 0x1A2, 0x194, 0x192, 0x18A, 0x168, 0x164, 0x162, 0x134,
    0x11A, 0x158, 0x14C, 0x146, 0x12C, 0x116, 0x1B4, 0x1B2, 0x1AC, 0x1A6,
    0x196, 0x19A, 0x16C, 0x166, 0x136, 0x13A, 0x12E, 0x1D4, 0x1D2, 0x1CA,
    0x16E, 0x176, 0x1AE, 0x126, 0x1DA, 0x1D6, 0x132, 0x15E,
)

# character -> (check value, 9 bit bar pattern)
_ENCODE_TABLE: dict[str, tuple[int, int]] = {
    char: (value, pattern)
    for value, (char, pattern) in enumerate(zip(_CHARSET, _PATTERNS))
}
_VALUE_TO_CHAR = {value: char for char, (value, _) in _ENCODE_TABLE.items()}

_EXTENDED_TABLE = (
    "\u00f2U", "\u00f1A", "\u00f1B", "\u00f1C", "\u00f1D", "\u00f1E", "\u00f1F", "\u00f1G",
    "\u00f1H", "\u00f1I", "\u00f1J", "\u00f1K", "\u00f1L", "\u00f1M", "\u00f1N", "\u00f1O",
    "\u00f1P", "\u00f1Q", "\u00f1R", "\u00f1S", "\u00f1T", "\u00f1U", "\u00f1V", "\u00f1W",
    "\u00f1X", "\u00f1Y", "\u00f1Z", "\u00f2A", "\u00f2B", "\u00f2C", "\u00f2D", "\u00f2E",
    " ", "\u00f3A", "\u00f3B", "\u00f3C", "\u00f3D", "\u00f3E", "\u00f3F", "\u00f3G",
    "\u00f3H", "\u00f3I", "\u00f3J", "\u00f3K", "\u00f3L", "-", ".", "\u00f3O",
    "0", "1", "2", "3", "4", "5", "6", "7",
    "8", "9", "\u00f3Z", "\u00f2F", "\u00f2G", "\u00f2H", "\u00f2I", "\u00f2J",
    "\u00f2V", "A", "B", "C", "D", "E", "F", "G",
    "H", "I", "J", "K", "L", "M", "N", "O",
    "P", "Q", "R", "S", "T", "U", "V", "W",
    "X", "Y", "Z", "\u00f2K", "\u00f2L", "\u00f2M", "\u00f2N", "\u00f2O",
    "\u00f2W", "\u00f4A", "\u00f4B", "\u00f4C", "\u00f4D", "\u00f4E", "\u00f4F", "\u00f4G",
    "\u00f4H", "\u00f4I", "\u00f4J", "\u00f4K", "\u00f4L", "\u00f4M", "\u00f4N", "\u00f4O",
    "\u00f4P", "\u00f4Q", "\u00f4R", "\u00f4S", "\u00f4T", "\u00f4U", "\u00f4V", "\u00f4W",
    "\u00f4X", "\u00f4Y", "\u00f4Z", "\u00f2P", "\u00f2Q", "\u00f2R", "\u00f2S", "\u00f2T",
)

_FALLBACK_CHECK = " "


def _prepare(content: str) -> str:
    """Rewrite ASCII content with the full ASCII shift pairs."""
    parts = []
    for char in content:
        code = ord(char)
        if code > 127:
            raise ValueError("Only ASCII strings can be encoded")
        parts.append(_EXTENDED_TABLE[code])
    return "".join(parts)


def checksum(content: str, max_weight: int) -> str:
    """The modulo 47 check character with weights cycling from 1 to ``max_weight``.

    A space is returned when the content holds a character without a value.
    """
    weight = 1
    total = 0
    for char in reversed(content):
        info = _ENCODE_TABLE.get(char)
        if info is None:
            return _FALLBACK_CHECK
        total += info[0] * weight
        weight += 1
        if weight > max_weight:
            weight = 1
    return _VALUE_TO_CHAR.get(total % 47, _FALLBACK_CHECK)


def encode(content: str, include_checksum: bool = True, full_ascii_mode: bool = False) -> Barcode1D:
    """Create a Code 93 barcode.

    The two check characters C and K are always part of the symbol;
    ``include_checksum`` is accepted for symmetry with Code 39.
    """
    if full_ascii_mode:
        content = _prepare(content)
    elif "*" in content:
        raise ValueError("invalid data! content may not contain '*'")

    data = content + checksum(content, 20)
    data += checksum(data, 15)
    data = "*" + data + "*"

    bits = BitList()
    for char in data:
        info = _ENCODE_TABLE.get(char)
        if info is None:
            raise ValueError("invalid data!")
        bits.add_bits(info[1], 9)
    bits.add_bit(True)
    return Barcode1D(BarcodeKind.CODE93, content, bits)
"""Shared building blocks: barcode kinds, metadata, bit lists and 1D codes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator


class BarcodeKind(str, Enum):
    """The names of the supported barcode symbologies."""

    AZTEC = "Aztec"
    CODABAR = "Codabar"
    CODE128 = "Code 128"
    CODE39 = "Code 39"
    CODE93 = "Code 93"
    DATAMATRIX = "DataMatrix"
    EAN8 = "EAN 8"
    EAN13 = "EAN 13"
    PDF = "PDF417"
    QR = "QR Code"
    TWO_OF_FIVE = "2 of 5"
    TWO_OF_FIVE_INTERLEAVED = "2 of 5 (interleaved)"


@dataclass(frozen=True)
class Metadata:
    """Meta information about a barcode: its kind and 1 or 2 dimensions."""

    code_kind: str
    dimensions: int


class BitList:
    """A growable list of bits."""

    def __init__(self, length: int = 0) -> None:
        self._bits: list[bool] = [False] * length

    def __len__(self) -> int:
        return len(self._bits)

    def __iter__(self) -> Iterator[bool]:
        return iter(self._bits)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitList):
            return NotImplemented
        return self._bits == other._bits

    def __repr__(self) -> str:
        return "BitList(" + "".join("1" if b else "0" for b in self._bits) + ")"

    def add_bit(self, *args: bool) -> None:
        """Append each of the given bits."""
        self._bits.extend(bool(b) for b in args)

    def extend(self, bits: Iterable[bool]) -> None:
        """Append all bits of an iterable."""
        self._bits.extend(bool(b) for b in bits)

    def add_bits(self, value: int, count: int) -> None:
        """Append the lowest ``count`` bits of ``value``, most significant first."""
        self._bits.extend(bool((value >> shift) & 1) for shift in range(count - 1, -1, -1))

    def add_byte(self, value: int) -> None:
        """Append the eight bits of a byte."""
        self.add_bits(value & 0xFF, 8)

    def get_bit(self, index: int) -> bool:
        if index < 0 or index >= len(self._bits):
            raise IndexError(f"bit index {index} out of range")
        return self._bits[index]

    def set_bit(self, index: int, value: bool) -> None:
        if index < 0 or index >= len(self._bits):
            raise IndexError(f"bit index {index} out of range")
        self._bits[index] = bool(value)

    def to_bytes(self) -> bytes:
        """Pack the bits into bytes, padding the last byte with zero bits."""
        result = bytearray()
        for start in range(0, len(self._bits), 8):
            value = 0
            chunk = self._bits[start:start + 8]
            for bit in chunk:
                value = (value << 1) | int(bit)
            value <<= 8 - len(chunk)
            result.append(value)
        return bytes(result)


class Barcode1D:
    """A one dimensional barcode: a row of bars, one per bit."""

    def __init__(
        self,
        kind: BarcodeKind,
        content: str,
        bits: BitList,
        checksum: int | None = None,
    ) -> None:
        self.kind = kind
        self.content = content
        self.bits = bits
        self.checksum = checksum

    @property
    def metadata(self) -> Metadata:
        return Metadata(self.kind.value, 1)

    @property
    def width(self) -> int:
        return len(self.bits)

    @property
    def height(self) -> int:
        return 1

    def is_black(self, x: int, y: int) -> bool:
        """Whether the module at column ``x`` is a bar; the row is irrelevant."""
        return self.bits.get_bit(x)

    def __str__(self) -> str:
        return "".join("1" if bit else "0" for bit in self.bits)
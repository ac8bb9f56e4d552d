"""Tokens that make up an Aztec high level encoding, chained back to front."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional, Union

from .core import BitList

_BINARY_SHIFT = 31


@dataclass(frozen=True)
class SimpleToken:
    """A fixed value written with a fixed number of bits."""

    prev: Optional[Token] = field(repr=False, compare=False)
    value: int
    bit_count: int

    def append_to(self, bits: BitList, text: bytes) -> None:
        bits.add_bits(self.value, self.bit_count)

    def __str__(self) -> str:
        value = self.value & ((1 << self.bit_count) - 1)
        value |= 1 << self.bit_count
        return "<" + format(value, "b")[1:] + ">"


@dataclass(frozen=True)
class BinaryShiftToken:
    """A run of raw bytes from the input, written in Binary Shift mode."""

    prev: Optional[Token] = field(repr=False, compare=False)
    start: int
    byte_count: int

    def append_to(self, bits: BitList, text: bytes) -> None:
        count = self.byte_count
        for i, byte in enumerate(text[self.start:self.start + count]):
            if i == 0 or (i == 31 and count <= 62):
                # a header before the first byte, and before byte 31 of short runs
                bits.add_bits(_BINARY_SHIFT, 5)
                if count > 62:
                    bits.add_bits(count - 31, 16)
                elif i == 0:
                    bits.add_bits(min(count, 31), 5)
                else:
                    bits.add_bits(count - 31, 5)
            bits.add_byte(byte)

    def __str__(self) -> str:
        return f"<{self.start}::{self.start + self.byte_count - 1}>"


Token = Union[SimpleToken, BinaryShiftToken]


def iter_tokens(last: Optional[Token]) -> Iterator[Token]:
    """The tokens of a chain in writing order, oldest first."""
    chain = []
    while last is not None:
        chain.append(last)
        last = last.prev
    return reversed(chain)
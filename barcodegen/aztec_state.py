"""States of the Aztec high level encoder: mode, tokens and bit count."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional

from .aztec_token import BinaryShiftToken, SimpleToken, Token, iter_tokens
from .core import BitList


class Mode(IntEnum):
    """The character modes of Aztec code."""

    UPPER = 0
    LOWER = 1
    DIGIT = 2
    MIXED = 3
    PUNCT = 4

    @property
    def bit_count(self) -> int:
        return 4 if self is Mode.DIGIT else 5


# For each pair of modes the cheapest latch: bit count in the high half-word,
# the bits themselves in the low half-word.
LATCH_TABLE: dict[Mode, dict[Mode, int]] = {
    Mode.UPPER: {
        Mode.UPPER: 0,
        Mode.LOWER: (5 << 16) + 28,
        Mode.DIGIT: (5 << 16) + 30,
        Mode.MIXED: (5 << 16) + 29,
        Mode.PUNCT: (10 << 16) + (29 << 5) + 30,
    },
    Mode.LOWER: {
        Mode.UPPER: (9 << 16) + (30 << 4) + 14,
        Mode.LOWER: 0,
        Mode.DIGIT: (5 << 16) + 30,
        Mode.MIXED: (5 << 16) + 29,
        Mode.PUNCT: (10 << 16) + (29 << 5) + 30,
    },
    Mode.DIGIT: {
        Mode.UPPER: (4 << 16) + 14,
        Mode.LOWER: (9 << 16) + (14 << 5) + 28,
        Mode.DIGIT: 0,
        Mode.MIXED: (9 << 16) + (14 << 5) + 29,
        Mode.PUNCT: (14 << 16) + (14 << 10) + (29 << 5) + 30,
    },
    Mode.MIXED: {
        Mode.UPPER: (5 << 16) + 29,
        Mode.LOWER: (5 << 16) + 28,
        Mode.DIGIT: (10 << 16) + (29 << 5) + 30,
        Mode.MIXED: 0,
        Mode.PUNCT: (5 << 16) + 30,
    },
    Mode.PUNCT: {
        Mode.UPPER: (5 << 16) + 31,
        Mode.LOWER: (10 << 16) + (31 << 5) + 28,
        Mode.DIGIT: (10 << 16) + (31 << 5) + 30,
        Mode.MIXED: (10 << 16) + (31 << 5) + 29,
        Mode.PUNCT: 0,
    },
}

# The available shift codes (shifts to binary are handled separately).
SHIFT_TABLE: dict[Mode, dict[Mode, int]] = {
    Mode.UPPER: {Mode.PUNCT: 0},
    Mode.LOWER: {Mode.PUNCT: 0, Mode.UPPER: 28},
    Mode.MIXED: {Mode.PUNCT: 0},
    Mode.DIGIT: {Mode.PUNCT: 0, Mode.UPPER: 15},
}


def _build_char_map() -> dict[Mode, list[int]]:
    table = {mode: [0] * 256 for mode in Mode}
    table[Mode.UPPER][ord(" ")] = 1
    for offset, char in enumerate("ABCDEFGHIJKLMNOPQRSTUVWXYZ"):
        table[Mode.UPPER][ord(char)] = offset + 2
    table[Mode.LOWER][ord(" ")] = 1
    for offset, char in enumerate("abcdefghijklmnopqrstuvwxyz"):
        table[Mode.LOWER][ord(char)] = offset + 2
    table[Mode.DIGIT][ord(" ")] = 1
    for offset, char in enumerate("0123456789"):
        table[Mode.DIGIT][ord(char)] = offset + 2
    table[Mode.DIGIT][ord(",")] = 12
    table[Mode.DIGIT][ord(".")] = 13

    mixed = [
        0, ord(" "), 1, 2, 3, 4, 5, 6, 7, 8, 9, 10,
        11, 12, 13, 27, 28, 29, 30, 31, ord("@"), ord("\\"), ord("^"),
        ord("_"), ord("`"), ord("|"), ord("~"), 127,
    ]
    for index, code in enumerate(mixed):
        table[Mode.MIXED][code] = index

    punct = [0, ord("\r"), 0, 0, 0, 0] + [ord(c) for c in "!'#$%&'()*+,-./:;<=>?[]{}"]
    for index, code in enumerate(punct):
        if code > 0:
            table[Mode.PUNCT][code] = index
    return table


CHAR_MAP: dict[Mode, list[int]] = _build_char_map()

_MAX_BINARY_RUN = 2047 + 31


@dataclass(frozen=True)
class State:
    """One way of encoding a prefix of the input."""

    mode: Mode
    tokens: Optional[Token] = field(default=None, repr=False, compare=False)
    binary_shift_byte_count: int = 0
    bit_count: int = 0

    def latch_and_append(self, mode: Mode, value: int) -> State:
        """Latch to ``mode`` (if needed) and write ``value`` in it."""
        bit_count = self.bit_count
        tokens = self.tokens
        if mode != self.mode:
            latch = LATCH_TABLE[self.mode][mode]
            tokens = SimpleToken(tokens, latch & 0xFFFF, latch >> 16)
            bit_count += latch >> 16
        tokens = SimpleToken(tokens, value, mode.bit_count)
        return State(mode, tokens, 0, bit_count + mode.bit_count)

    def shift_and_append(self, mode: Mode, value: int) -> State:
        """Shift to ``mode`` for a single value, then stay in the current mode."""
        tokens = SimpleToken(self.tokens, SHIFT_TABLE[self.mode][mode], self.mode.bit_count)
        tokens = SimpleToken(tokens, value, 5)
        return State(self.mode, tokens, 0, self.bit_count + self.mode.bit_count + 5)

    def add_binary_shift_char(self, index: int) -> State:
        """Add the byte at ``index`` to a Binary Shift run."""
        tokens = self.tokens
        mode = self.mode
        bit_count = self.bit_count
        if mode in (Mode.PUNCT, Mode.DIGIT):
            latch = LATCH_TABLE[mode][Mode.UPPER]
            tokens = SimpleToken(tokens, latch & 0xFFFF, latch >> 16)
            bit_count += latch >> 16
            mode = Mode.UPPER
        count = self.binary_shift_byte_count
        if count in (0, 31):
            delta = 18
        elif count == 62:
            delta = 9
        else:
            delta = 8
        result = State(mode, tokens, count + 1, bit_count + delta)
        if result.binary_shift_byte_count == _MAX_BINARY_RUN:
            result = result.end_binary_shift(index + 1)
        return result

    def end_binary_shift(self, index: int) -> State:
        """This state with any open Binary Shift run closed before ``index``."""
        count = self.binary_shift_byte_count
        if count == 0:
            return self
        tokens = BinaryShiftToken(self.tokens, index - count, count)
        return State(self.mode, tokens, 0, self.bit_count)

    def is_better_than_or_equal_to(self, other: State) -> bool:
        """Whether this state is at least as good as ``other`` in every future."""
        my_size = self.bit_count + (LATCH_TABLE[self.mode][other.mode] >> 16)
        if other.binary_shift_byte_count > 0 and (
            self.binary_shift_byte_count == 0
            or self.binary_shift_byte_count > other.binary_shift_byte_count
        ):
            my_size += 10
        return my_size <= other.bit_count

    def to_bits(self, text: bytes) -> BitList:
        """Write the encoding of ``text`` that this state describes."""
        final = self.end_binary_shift(len(text))
        bits = BitList()
        for token in iter_tokens(final.tokens):
            token.append_to(bits, text)
        return bits

    def __str__(self) -> str:
        tokens = " ".join(str(t) for t in iter_tokens(self.tokens))
        return (
            f"M:{int(self.mode)} bits={self.bit_count} "
            f"bytes={self.binary_shift_byte_count}: [{tokens}]"
        )


INITIAL_STATE = State(Mode.UPPER)
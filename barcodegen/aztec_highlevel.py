"""Optimal high level encoding of data into Aztec code words."""

from __future__ import annotations

from .aztec_state import CHAR_MAP, INITIAL_STATE, SHIFT_TABLE, Mode, State
from .core import BitList

_PAIR_CODES = {
    (ord("\r"), ord("\n")): 2,
    (ord("."), ord(" ")): 3,
    (ord(","), ord(" ")): 4,
    (ord(":"), ord(" ")): 5,
}


def _simplify(states: list[State]) -> list[State]:
    """Drop every state that another state is at least as good as."""
    result: list[State] = []
    for new_state in states:
        add = True
        kept: list[State] = []
        for old_state in result:
            if add and old_state.is_better_than_or_equal_to(new_state):
                add = False
            if not (add and new_state.is_better_than_or_equal_to(old_state)):
                kept.append(old_state)
        if add:
            kept.append(new_state)
        result = kept
    return result


def _update_for_char(state: State, data: bytes, index: int) -> list[State]:
    result: list[State] = []
    char = data[index]
    in_current = CHAR_MAP[state.mode][char] > 0
    no_binary: State | None = None
    for mode in Mode:
        value = CHAR_MAP[mode][char]
        if value <= 0:
            continue
        if no_binary is None:
            no_binary = state.end_binary_shift(index)
        # Latching elsewhere only pays off for digit mode when the char is here.
        if not in_current or mode == state.mode or mode is Mode.DIGIT:
            result.append(no_binary.latch_and_append(mode, value))
        if not in_current and mode in SHIFT_TABLE.get(state.mode, {}):
            result.append(no_binary.shift_and_append(mode, value))
    if state.binary_shift_byte_count > 0 or CHAR_MAP[state.mode][char] == 0:
        result.append(state.add_binary_shift_char(index))
    return result


def _update_for_pair(state: State, index: int, pair_code: int) -> list[State]:
    no_binary = state.end_binary_shift(index)
    result = [no_binary.latch_and_append(Mode.PUNCT, pair_code)]
    if state.mode is not Mode.PUNCT:
        result.append(no_binary.shift_and_append(Mode.PUNCT, pair_code))
    if pair_code in (3, 4):
        # period or comma, then space, both in digit mode
        result.append(
            no_binary.latch_and_append(Mode.DIGIT, 16 - pair_code).latch_and_append(Mode.DIGIT, 1)
        )
    if state.binary_shift_byte_count > 0:
        result.append(state.add_binary_shift_char(index).add_binary_shift_char(index + 1))
    return result


def highlevel_encode(data: bytes) -> BitList:
    """The shortest bit sequence encoding ``data`` in Aztec character modes."""
    data = bytes(data)
    states = [INITIAL_STATE]
    index = 0
    while index < len(data):
        next_char = data[index + 1] if index + 1 < len(data) else 0
        pair_code = _PAIR_CODES.get((data[index], next_char), 0)
        if pair_code:
            states = _simplify(
                [s for state in states for s in _update_for_pair(state, index, pair_code)]
            )
            index += 2
        else:
            states = _simplify(
                [s for state in states for s in _update_for_char(state, data, index)]
            )
            index += 1
    if not states:
        return BitList()
    best = min(states, key=lambda s: s.bit_count)
    return best.to_bits(data)
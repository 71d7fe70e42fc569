"""Packs a 3×3 board into a single 32-bit unsigned integer.

Layout, most significant bit first::

    PPPPP III HHH GGG FFF EEE DDD CCC BBB AAA
    31 27                                  0

Slot *i* (row-major, 0..8) owns bits ``[3i, 3i + 3)`` and holds the tile
code in ``[0, 7]``.  The blank slot's three bits are always zero.  Bits
27-31 hold the blank's slot index so that locating it is one shift.

Tile codes come from :class:`~eightpuzzle.engine.alphabet.Alphabet`; the
blank is passed in as ``None``.
"""

from __future__ import annotations

from collections.abc import Sequence

from eightpuzzle.errors import AlphabetMismatch, SizeMismatch
from eightpuzzle.models.board import SLOTS

TILE_BITS = 3
TILE_MASK = 0b111
BLANK_SHIFT = 27
# Move rotation wraps modulo this width; all fields must fit below it.
WORD_BITS = 32
WORD_MASK = (1 << WORD_BITS) - 1

PackedState = int


def encode(codes: Sequence[int | None]) -> PackedState:
    """Pack nine tile codes (``None`` for the blank) into one integer."""
    if len(codes) != SLOTS:
        raise SizeMismatch(f"Expected {SLOTS} cells, got {len(codes)}.")

    tiles = [c for c in codes if c is not None]
    if len(tiles) != SLOTS - 1:
        raise AlphabetMismatch(
            f"Expected exactly one blank, got {SLOTS - len(tiles)}."
        )
    if len(set(tiles)) != len(tiles) or not all(
        0 <= c <= TILE_MASK for c in tiles
    ):
        raise AlphabetMismatch(
            f"Tile codes must be 8 distinct values in [0, {TILE_MASK}]: {tiles}"
        )

    state = 0
    for slot, code in enumerate(codes):
        if code is None:
            state |= slot << BLANK_SHIFT
        else:
            state |= code << (slot * TILE_BITS)
    return state


def get_mask(slot: int) -> int:
    return TILE_MASK << (slot * TILE_BITS)


def decode_tile(state: PackedState, slot: int) -> int:
    return (state & get_mask(slot)) >> (slot * TILE_BITS)


def decode_blank_pos(state: PackedState) -> int:
    return state >> BLANK_SHIFT


def decode(state: PackedState) -> list[int | None]:
    """Unpack *state* into nine codes with ``None`` at the blank slot."""
    blank = decode_blank_pos(state)
    return [
        None if slot == blank else decode_tile(state, slot)
        for slot in range(SLOTS)
    ]


def rotate_right(value: int, amount: int) -> int:
    """Rotate a :data:`WORD_BITS`-wide word right by *amount* bits."""
    amount %= WORD_BITS
    return ((value >> amount) | (value << (WORD_BITS - amount))) & WORD_MASK


def wrap_around(shift: int) -> int:
    """Map a signed shift onto the equivalent right-rotation amount.

    A left shift by ``k`` is a right rotation by ``WORD_BITS - k``; this
    only holds while the rotated field cannot reach the top of the word.
    """
    return (WORD_BITS + shift) % WORD_BITS

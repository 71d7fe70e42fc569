"""Slide moves on packed states.

Every direction is the same transform parameterised by a boundary
predicate over the blank's slot and the slot delta the blank travels.
An out-of-bounds move returns the state unchanged.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from eightpuzzle.engine.statecodec import (
    BLANK_SHIFT,
    TILE_BITS,
    WORD_BITS,
    PackedState,
    decode_blank_pos,
    get_mask,
    rotate_right,
    wrap_around,
)
from eightpuzzle.models.board import BOARD_SIZE, Direction

_WORD_MASK = (1 << WORD_BITS) - 1


@dataclass(frozen=True)
class MoveSpec:
    direction: Direction
    in_bounds: Callable[[int], bool]
    delta: int


def make_move(state: PackedState, spec: MoveSpec) -> PackedState:
    """Move the blank by ``spec.delta`` slots, or return *state* if blocked."""
    blank_pos = decode_blank_pos(state)
    if not spec.in_bounds(blank_pos):
        return state

    target = blank_pos + spec.delta
    mask = get_mask(target)
    masked = state & mask

    # Right-rotating by a negative shift is a left shift of the same size.
    digit = rotate_right(masked, wrap_around(spec.delta * TILE_BITS))

    state &= ~mask
    state |= digit
    state += spec.delta << BLANK_SHIFT
    return state & _WORD_MASK


MOVES: dict[Direction, MoveSpec] = {
    Direction.UP: MoveSpec(Direction.UP, lambda p: p >= BOARD_SIZE, -BOARD_SIZE),
    Direction.DOWN: MoveSpec(
        Direction.DOWN, lambda p: p < BOARD_SIZE * (BOARD_SIZE - 1), BOARD_SIZE
    ),
    Direction.LEFT: MoveSpec(Direction.LEFT, lambda p: p % BOARD_SIZE != 0, -1),
    Direction.RIGHT: MoveSpec(
        Direction.RIGHT, lambda p: p % BOARD_SIZE != BOARD_SIZE - 1, 1
    ),
}

_BY_DELTA = {spec.delta: spec.direction for spec in MOVES.values()}


def up(state: PackedState) -> PackedState:
    return make_move(state, MOVES[Direction.UP])


def down(state: PackedState) -> PackedState:
    return make_move(state, MOVES[Direction.DOWN])


def left(state: PackedState) -> PackedState:
    return make_move(state, MOVES[Direction.LEFT])


def right(state: PackedState) -> PackedState:
    return make_move(state, MOVES[Direction.RIGHT])


def apply(state: PackedState, direction: Direction) -> PackedState:
    return make_move(state, MOVES[direction])


def is_legal(state: PackedState, direction: Direction) -> bool:
    return MOVES[direction].in_bounds(decode_blank_pos(state))


def successors(state: PackedState) -> list[PackedState]:
    """All four move results, including no-ops for blocked directions."""
    return [make_move(state, spec) for spec in MOVES.values()]


def direction_between(a: PackedState, b: PackedState) -> Direction:
    """Return the direction whose slide turns *a* into *b*."""
    direction = _BY_DELTA.get(decode_blank_pos(b) - decode_blank_pos(a))
    if direction is None or apply(a, direction) != b:
        raise ValueError(f"States {a:#034b} and {b:#034b} are not one slide apart")
    return direction

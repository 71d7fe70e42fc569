"""Inversion-parity solvability check.

On a board of odd width, sliding a tile along a row never changes the
order of the tiles read row-major, and sliding it along a column moves it
past an even number (width - 1) of other tiles.  So the parity of the
permutation that takes the goal's tile order to the start's is invariant,
and start can reach goal iff that permutation is even.
"""

from __future__ import annotations

from collections.abc import Sequence

from eightpuzzle.errors import Unsolvable


def count_inversions(
    start: Sequence[int | None], goal: Sequence[int | None]
) -> int:
    """Count tile pairs whose order in *start* differs from *goal*.

    Both arguments are code lists with ``None`` at the blank.
    """
    rank = {code: i for i, code in enumerate(c for c in goal if c is not None)}
    order = [rank[c] for c in start if c is not None]
    inv = 0
    for i in range(len(order)):
        for j in range(i + 1, len(order)):
            if order[i] > order[j]:
                inv += 1
    return inv


def is_solvable(start: Sequence[int | None], goal: Sequence[int | None]) -> bool:
    return count_inversions(start, goal) % 2 == 0


def check_solvability(
    start: Sequence[int | None], goal: Sequence[int | None]
) -> None:
    inv = count_inversions(start, goal)
    if inv % 2:
        raise Unsolvable(f"Start has odd inversion count ({inv}) relative to goal.")

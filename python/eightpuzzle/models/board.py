"""Board model for the 8-puzzle."""

from __future__ import annotations

import re
from collections.abc import Hashable, Sequence
from dataclasses import dataclass
from enum import StrEnum

BOARD_SIZE = 3
SLOTS = BOARD_SIZE * BOARD_SIZE


class Direction(StrEnum):
    """Direction the *blank* travels during one slide."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def inverse(self) -> Direction:
        return _INVERSE[self]


_INVERSE = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

_SEPARATORS = re.compile(r"[\s,]+")


@dataclass(frozen=True)
class Board:
    """A 3×3 arrangement of nine symbols, one of which is the blank.

    Cells are stored flat, row-major; slot 8 is the bottom-right corner.
    No validation happens here: the solver checks size and alphabet and
    reports typed errors.
    """

    cells: tuple[Hashable, ...]
    blank: Hashable = 0

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, flat: Sequence[Hashable], blank: Hashable = 0) -> Board:
        """Create a board from a flat row-major symbol list.

        Example::

            Board.from_flat([1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        return cls(cells=tuple(flat), blank=blank)

    @classmethod
    def parse(cls, text: str, blank: Hashable = "0") -> Board:
        """Parse ``"1,2,3,4,5,0,6,7,8"``, ``"1 2 3 ..."`` or ``"abcd_efgh"``.

        Tokens separated by commas or whitespace are taken as symbols;
        without any separator every character is one symbol.
        """
        text = text.strip()
        if _SEPARATORS.search(text):
            tokens = [t for t in _SEPARATORS.split(text) if t]
        else:
            tokens = list(text)
        return cls(cells=tuple(tokens), blank=blank)

    # -- queries --------------------------------------------------------------

    @property
    def blank_index(self) -> int:
        return self.cells.index(self.blank)

    def flat(self) -> list[Hashable]:
        return list(self.cells)

    def rows(self) -> list[tuple[Hashable, ...]]:
        return [
            self.cells[r * BOARD_SIZE : (r + 1) * BOARD_SIZE]
            for r in range(BOARD_SIZE)
        ]

    def is_tile_correct(self, slot: int, goal: Board) -> bool:
        """Check if the tile at *slot* already sits where *goal* wants it."""
        val = self.cells[slot]
        return val != self.blank and val == goal.cells[slot]

    def swap(self, slot: int) -> Board:
        """Return a new board with the blank and *slot* exchanged."""
        cells = list(self.cells)
        bi = self.blank_index
        cells[bi], cells[slot] = cells[slot], cells[bi]
        return Board(cells=tuple(cells), blank=self.blank)

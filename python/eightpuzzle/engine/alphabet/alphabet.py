"""Translates arbitrary board symbols to 0-based tile codes and back."""

from __future__ import annotations

from collections import Counter
from collections.abc import Hashable, Sequence
from dataclasses import dataclass

from eightpuzzle.errors import AlphabetMismatch, SizeMismatch
from eightpuzzle.models.board import SLOTS


def _check_cells(cells: Sequence[Hashable], blank: Hashable, name: str) -> None:
    if len(cells) != SLOTS:
        raise SizeMismatch(f"{name} must have {SLOTS} cells, got {len(cells)}.")
    repeated = [s for s, n in Counter(cells).items() if n > 1]
    if repeated:
        raise AlphabetMismatch(f"{name} repeats symbols: {repeated}")
    if blank not in cells:
        raise AlphabetMismatch(f"{name} has no blank ({blank!r}).")


@dataclass(frozen=True)
class Alphabet:
    """Blank sentinel plus the eight tile symbols; symbol *i* has code *i*."""

    blank: Hashable
    symbols: tuple[Hashable, ...]

    @classmethod
    def from_cells(cls, cells: Sequence[Hashable], blank: Hashable) -> Alphabet:
        """Assign codes in first-occurrence order of the non-blank symbols."""
        _check_cells(cells, blank, "Board")
        return cls(blank=blank, symbols=tuple(s for s in cells if s != blank))

    @classmethod
    def for_pair(
        cls,
        start: Sequence[Hashable],
        goal: Sequence[Hashable],
        blank: Hashable,
    ) -> Alphabet:
        """Build from *start* and require *goal* to use the same symbols."""
        _check_cells(start, blank, "Start")
        _check_cells(goal, blank, "Goal")
        if set(start) != set(goal):
            missing = sorted(map(repr, set(start) - set(goal)))
            extra = sorted(map(repr, set(goal) - set(start)))
            raise AlphabetMismatch(
                f"Goal symbols differ from start: missing {missing}, extra {extra}"
            )
        return cls.from_cells(start, blank)

    def code(self, symbol: Hashable) -> int | None:
        if symbol == self.blank:
            return None
        try:
            return self.symbols.index(symbol)
        except ValueError:
            raise AlphabetMismatch(f"Unknown symbol {symbol!r}") from None

    def symbol(self, code: int | None) -> Hashable:
        return self.blank if code is None else self.symbols[code]

    def translate(self, cells: Sequence[Hashable]) -> list[int | None]:
        return [self.code(s) for s in cells]

    def restore(self, codes: Sequence[int | None]) -> list[Hashable]:
        return [self.symbol(c) for c in codes]

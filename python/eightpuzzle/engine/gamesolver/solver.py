"""8-puzzle solver facade: validate, pre-check, search, decode."""

from __future__ import annotations

import logging
from collections.abc import Hashable, Sequence
from dataclasses import dataclass, field

from eightpuzzle.engine.alphabet import Alphabet
from eightpuzzle.engine.movegen import direction_between
from eightpuzzle.engine.search import SearchOptions, SearchStats, bfs
from eightpuzzle.engine.solvability import check_solvability, is_solvable
from eightpuzzle.engine.statecodec import decode, encode
from eightpuzzle.models.board import Board, Direction

logger = logging.getLogger(__name__)

GOAL: tuple[int, ...] = (1, 2, 3, 4, 5, 6, 7, 8, 0)

Cells = Board | Sequence[Hashable]


@dataclass
class Solution:
    boards: list[Board]
    directions: list[Direction]
    stats: SearchStats = field(default_factory=SearchStats)

    @property
    def moves(self) -> int:
        return len(self.directions)


def _cells(board: Cells) -> tuple[Hashable, ...]:
    return board.cells if isinstance(board, Board) else tuple(board)


def _blank(start: Cells, blank: Hashable | None) -> Hashable:
    if blank is not None:
        return blank
    return start.blank if isinstance(start, Board) else 0


def _prepare(
    start: Cells, goal: Cells, blank: Hashable
) -> tuple[Alphabet, list[int | None], list[int | None]]:
    alphabet = Alphabet.for_pair(_cells(start), _cells(goal), blank)
    start_codes = alphabet.translate(_cells(start))
    goal_codes = alphabet.translate(_cells(goal))
    logger.debug("Alphabet %s, blank %r", alphabet.symbols, blank)
    return alphabet, start_codes, goal_codes


class Solver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def solve(
        start: Cells,
        goal: Cells = GOAL,
        blank: Hashable | None = None,
        options: SearchOptions | None = None,
    ) -> Solution:
        """Return a shortest slide sequence from *start* to *goal*.

        Raises :class:`~eightpuzzle.errors.SizeMismatch`,
        :class:`~eightpuzzle.errors.AlphabetMismatch` or
        :class:`~eightpuzzle.errors.Unsolvable`.
        """
        blank = _blank(start, blank)
        alphabet, start_codes, goal_codes = _prepare(start, goal, blank)
        check_solvability(start_codes, goal_codes)

        trace = bfs(encode(start_codes), encode(goal_codes), options)

        boards = [
            Board(cells=tuple(alphabet.restore(decode(s))), blank=blank)
            for s in trace.states
        ]
        directions = [
            direction_between(a, b)
            for a, b in zip(trace.states, trace.states[1:])
        ]
        return Solution(boards=boards, directions=directions, stats=trace.stats)

    @staticmethod
    def hint(
        start: Cells, goal: Cells = GOAL, blank: Hashable | None = None
    ) -> Direction | None:
        """Return the first slide of a shortest solution, or ``None`` if solved."""
        solution = Solver.solve(start, goal, blank)
        return solution.directions[0] if solution.directions else None

    @staticmethod
    def is_solvable(
        start: Cells, goal: Cells = GOAL, blank: Hashable | None = None
    ) -> bool:
        """Return True if *start* can reach *goal*; runs no search."""
        _, start_codes, goal_codes = _prepare(start, goal, _blank(start, blank))
        return is_solvable(start_codes, goal_codes)

"""Generates solvable 8-puzzle boards."""

from __future__ import annotations

import random

from eightpuzzle.engine.alphabet import Alphabet
from eightpuzzle.engine.movegen import MOVES, is_legal, make_move
from eightpuzzle.engine.statecodec import decode, encode
from eightpuzzle.models.board import Board, Direction


class GameGenerator:
    """Creates solvable puzzles by walking away from the solved state."""

    @staticmethod
    def solved() -> Board:
        """Return the goal-state board (tiles in order, blank bottom-right)."""
        return Board.from_flat([1, 2, 3, 4, 5, 6, 7, 8, 0])

    @staticmethod
    def scramble(board: Board, depth: int, rng: random.Random) -> Board:
        """Return *board* after *depth* random legal slides.

        The walk never immediately undoes its previous slide.  Every board
        it returns can reach *board* again, so it is solvable against it.
        """
        alphabet = Alphabet.from_cells(board.cells, board.blank)
        state = encode(alphabet.translate(board.cells))
        prev: Direction | None = None

        for _ in range(depth):
            options = [
                d for d in MOVES
                if is_legal(state, d) and (prev is None or d != prev.inverse)
            ]
            prev = rng.choice(options)
            state = make_move(state, MOVES[prev])

        return Board(cells=tuple(alphabet.restore(decode(state))), blank=board.blank)

    @staticmethod
    def generate(depth: int = 40, seed: int | None = None) -> Board:
        """Return a random *solvable* board against :meth:`solved`."""
        rng = random.Random(seed)
        goal = GameGenerator.solved()
        board = GameGenerator.scramble(goal, depth, rng)

        # A walk can loop back to the start; try again rather than return it.
        while depth > 0 and board == goal:
            board = GameGenerator.scramble(goal, depth, rng)

        return board

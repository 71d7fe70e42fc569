"""Solver end-to-end suite.

Every returned solution is replayed through ``GamePlay`` to verify that
each step is one legal slide and that the final board is the goal.
"""

from __future__ import annotations

import pytest

from eightpuzzle.engine.gamegenerator import GameGenerator
from eightpuzzle.engine.gameplay import GamePlay
from eightpuzzle.engine.gamesolver import GOAL, Solver
from eightpuzzle.errors import AlphabetMismatch, SizeMismatch, Unsolvable
from eightpuzzle.models.board import Board, Direction


# -- helpers ------------------------------------------------------------------


def _assert_solve(start, goal=GOAL, blank=0) -> int:
    """Solve, replay through the game engine, and return the move count."""
    solution = Solver.solve(start, goal, blank)
    start_board = Board.from_flat(start, blank)
    goal_board = Board.from_flat(goal, blank)

    assert solution.boards[0] == start_board
    assert solution.boards[-1] == goal_board
    assert len(solution.boards) == solution.moves + 1
    assert all(isinstance(d, Direction) for d in solution.directions)

    game = GamePlay.from_board(start_board)
    for i, (direction, expected) in enumerate(
        zip(solution.directions, solution.boards[1:])
    ):
        ok = game.move(direction)
        assert ok, f"Move {i} ({direction.value}) was invalid"
        assert game.board == expected

    assert game.reached(goal_board)
    return solution.moves


# -- success ------------------------------------------------------------------


def test_blank_mid_right_start(distance) -> None:
    start = (1, 2, 3, 4, 5, 0, 6, 7, 8)
    assert _assert_solve(start) == distance(start, GOAL)


def test_two_move_solution() -> None:
    solution = Solver.solve([1, 2, 3, 4, 5, 6, 0, 7, 8])
    assert solution.moves == 2
    assert solution.directions == [Direction.RIGHT, Direction.RIGHT]


def test_already_solved() -> None:
    solution = Solver.solve(GOAL)
    assert solution.moves == 0
    assert solution.boards == [Board.from_flat(GOAL)]


def test_arbitrary_symbols_and_blank() -> None:
    start = list("abcdefg_h")
    goal = list("abcdefgh_")
    solution = Solver.solve(start, goal, blank="_")
    assert solution.directions == [Direction.RIGHT]
    assert solution.boards[-1].cells == tuple(goal)


def test_custom_goal(distance) -> None:
    start = (1, 2, 3, 4, 5, 6, 7, 8, 0)
    goal = (0, 1, 2, 3, 4, 5, 6, 7, 8)
    assert _assert_solve(start, goal) == distance(start, goal)


def test_board_argument_carries_its_blank() -> None:
    start = Board.parse("1 2 3 4 5 6 7 * 8", blank="*")
    goal = Board.parse("12345678*", blank="*")
    solution = Solver.solve(start, goal)
    assert solution.moves == 1
    assert solution.boards[0].blank == "*"


@pytest.mark.parametrize("seed", range(5))
def test_generated_boards_are_solved(seed: int, distance) -> None:
    board = GameGenerator.generate(depth=12, seed=seed)
    assert board != GameGenerator.solved()
    assert Solver.is_solvable(board)
    assert _assert_solve(board.cells) == distance(board.cells, GOAL)


# -- hint / solvability -------------------------------------------------------


def test_hint_is_first_move() -> None:
    assert Solver.hint([1, 2, 3, 4, 5, 6, 0, 7, 8]) is Direction.RIGHT
    assert Solver.hint(GOAL) is None


def test_is_solvable_runs_parity_only() -> None:
    assert Solver.is_solvable([1, 2, 3, 4, 5, 6, 8, 7, 0]) is False
    assert Solver.is_solvable([1, 2, 3, 4, 5, 6, 0, 7, 8]) is True


# -- failures -----------------------------------------------------------------


def test_odd_inversion_count_is_unsolvable() -> None:
    with pytest.raises(Unsolvable):
        Solver.solve([2, 1, 3, 4, 5, 6, 7, 8, 0])


def test_goal_with_foreign_symbol_is_alphabet_mismatch() -> None:
    with pytest.raises(AlphabetMismatch):
        Solver.solve(list("abcdefghi"), list("abcdefghx"), blank="e")


def test_goal_without_blank_is_alphabet_mismatch() -> None:
    with pytest.raises(AlphabetMismatch):
        Solver.solve(list("abcdefghi"), list("abcdefghx"), blank="i")


def test_repeated_symbol_is_alphabet_mismatch() -> None:
    with pytest.raises(AlphabetMismatch):
        Solver.solve([1, 1, 3, 4, 5, 6, 7, 8, 0], [1, 1, 3, 4, 5, 6, 7, 8, 0])


@pytest.mark.parametrize(
    "start",
    [
        [1, 2, 3, 4, 5, 6, 7, 0],
        [1, 2, 3, 4, 5, 6, 7, 8, 9, 0],
    ],
)
def test_wrong_length_is_size_mismatch(start: list) -> None:
    with pytest.raises(SizeMismatch):
        Solver.solve(start)


# -- board model --------------------------------------------------------------


def test_board_parse_formats() -> None:
    assert Board.parse("1,2,3,4,5,0,6,7,8").cells == tuple("123450678")
    assert Board.parse(" 1 2 3\n4 5 0\n6 7 8 ").cells == tuple("123450678")
    assert Board.parse("abcdefgh_", blank="_").blank_index == 8


def test_board_rows_and_swap() -> None:
    board = Board.from_flat([1, 2, 3, 4, 5, 6, 7, 8, 0])
    assert board.rows() == [(1, 2, 3), (4, 5, 6), (7, 8, 0)]
    assert board.swap(5).cells == (1, 2, 3, 4, 5, 0, 7, 8, 6)
    assert board.is_tile_correct(0, board)
    assert not board.is_tile_correct(8, board)


def test_gameplay_rejects_off_grid_move() -> None:
    game = GamePlay.from_board(Board.from_flat(GOAL))
    assert game.move(Direction.DOWN) is False
    assert game.move(Direction.RIGHT) is False
    assert game.moves == 0
    assert game.move(Direction.UP) is True
    assert game.moves == 1

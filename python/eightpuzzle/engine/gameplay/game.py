"""Replays slides on a board — used to check solver output step by step."""

from __future__ import annotations

from eightpuzzle.models.board import BOARD_SIZE, Board, Direction

# Slot offset of the blank for each direction, as (row, col).
_OFFSETS = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}


class GamePlay:
    """Holds the current board and the number of slides applied."""

    def __init__(self, board: Board) -> None:
        self.board = board
        self.moves: int = 0

    @classmethod
    def from_board(cls, board: Board) -> "GamePlay":
        return cls(board)

    # -- movement (direction = where the *blank* moves) -----------------------

    def move(self, direction: Direction) -> bool:
        """Slide the blank one cell in *direction*.

        Returns False, leaving the board untouched, if that would leave
        the grid.
        """
        br, bc = divmod(self.board.blank_index, BOARD_SIZE)
        dr, dc = _OFFSETS[direction]
        tr, tc = br + dr, bc + dc

        if not (0 <= tr < BOARD_SIZE and 0 <= tc < BOARD_SIZE):
            return False

        self.board = self.board.swap(tr * BOARD_SIZE + tc)
        self.moves += 1
        return True

    # -- queries --------------------------------------------------------------

    def reached(self, goal: Board) -> bool:
        return self.board.cells == goal.cells

from eightpuzzle.models.board import BOARD_SIZE, SLOTS, Board, Direction

__all__ = ["BOARD_SIZE", "SLOTS", "Board", "Direction"]

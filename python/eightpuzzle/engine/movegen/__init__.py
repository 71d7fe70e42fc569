from eightpuzzle.engine.movegen.moves import (
    MOVES,
    MoveSpec,
    apply,
    direction_between,
    down,
    is_legal,
    left,
    make_move,
    right,
    successors,
    up,
)

__all__ = [
    "MOVES",
    "MoveSpec",
    "apply",
    "direction_between",
    "down",
    "is_legal",
    "left",
    "make_move",
    "right",
    "successors",
    "up",
]

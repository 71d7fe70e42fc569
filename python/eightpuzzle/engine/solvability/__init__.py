from eightpuzzle.engine.solvability.parity import (
    check_solvability,
    count_inversions,
    is_solvable,
)

__all__ = ["check_solvability", "count_inversions", "is_solvable"]

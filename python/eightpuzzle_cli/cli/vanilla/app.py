"""Vanilla terminal frontend — no third-party dependencies.

Prints each board of a solution as three text rows, blank shown as a
space, followed by a one-line summary.
"""

from __future__ import annotations

import sys

from eightpuzzle.engine.gamesolver import Solution
from eightpuzzle.models.board import Board

# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_DIM = "\033[2m"     # dim
_R = "\033[0m"       # reset


def _paint(text: str, code: str, color: bool) -> str:
    return f"{code}{text}{_R}" if color else text


# -- board rendering ----------------------------------------------------------


def render_board(board: Board, goal: Board | None = None, color: bool = False) -> str:
    """Return a text representation of the board."""
    width = max(len(str(v)) for v in board.cells)
    lines: list[str] = []
    for r, row in enumerate(board.rows()):
        cells: list[str] = []
        for c, val in enumerate(row):
            slot = r * len(row) + c
            if val == board.blank:
                cells.append(" " * width)
            elif goal is not None and board.is_tile_correct(slot, goal):
                cells.append(_paint(f"{val!s:>{width}}", _G, color))
            else:
                cells.append(f"{val!s:>{width}}")
        lines.append(" ".join(cells))
    return "\n".join(lines)


def render_solution(solution: Solution, color: bool = False) -> str:
    goal = solution.boards[-1]
    blocks = [render_board(b, goal, color) for b in solution.boards]
    steps = ", ".join(d.value for d in solution.directions) or "-"
    summary = _paint(
        f"{solution.moves} moves ({steps}); "
        f"{solution.stats.expanded} states expanded in {solution.stats.elapsed:.3f}s",
        _DIM,
        color,
    )
    return "\n\n".join(blocks) + "\n\n" + summary


# -- public entry point -------------------------------------------------------


def run(solution: Solution, color: bool | None = None) -> None:
    """Print *solution* to stdout, coloured when it is a terminal."""
    if color is None:
        color = sys.stdout.isatty()
    print(render_solution(solution, color))

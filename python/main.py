#!/usr/bin/env python3
"""8-Puzzle Solver.

Usage::

    python main.py 1,2,3,4,5,0,6,7,8              # solve toward 1..8 + blank
    python main.py abcdefgh_ --goal _abcdefgh --blank _
    python main.py --scramble 20 --seed 7 -f vanilla
    python main.py 867254301 -vv                  # debug logging
"""

import importlib
import logging
import random
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from eightpuzzle.engine.gamegenerator import GameGenerator  # noqa: E402
from eightpuzzle.engine.gamesolver import Solver  # noqa: E402
from eightpuzzle.engine.search import SearchOptions, SearchRoot, Termination  # noqa: E402
from eightpuzzle.errors import SolveError  # noqa: E402
from eightpuzzle.models.board import Board  # noqa: E402

DEFAULT_GOAL = "1,2,3,4,5,6,7,8,0"


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "eightpuzzle_cli.cli.vanilla.app",
    Frontend.rich: "eightpuzzle_cli.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: int) -> None:
    level = {0: logging.WARNING, 1: logging.INFO}.get(verbose, logging.DEBUG)
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True)],
        force=True,
    )


def _scrambled_start(depth: int, seed: Optional[int], goal: Board) -> Board:
    rng = random.Random(seed)
    return GameGenerator.scramble(goal, depth, rng)


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    start: Optional[str] = typer.Argument(
        None,
        help="Start board, row-major: '1,2,3,4,5,0,6,7,8' or 'abcdefgh_'.",
    ),
    goal: str = typer.Option(
        DEFAULT_GOAL, "-g", "--goal",
        help="Goal board, same format and symbols as START.",
    ),
    blank: str = typer.Option(
        "0", "-b", "--blank",
        help="Symbol that marks the blank cell.",
    ),
    frontend: Frontend = typer.Option(
        Frontend.rich, "-f", "--frontend",
        envvar="EIGHTPUZZLE_FRONTEND",
        help="How to print the solution.",
    ),
    scramble: Optional[int] = typer.Option(
        None, "--scramble",
        min=0,
        help="Ignore START and use GOAL after this many random slides.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Random seed for --scramble.",
    ),
    forward: bool = typer.Option(
        False, "--forward",
        help="Search forward from START instead of backward from GOAL.",
    ),
    check_on_dequeue: bool = typer.Option(
        False, "--check-on-dequeue",
        help="Stop when the target is dequeued rather than discovered.",
    ),
    verbose: int = typer.Option(
        0, "-v", "--verbose",
        count=True,
        help="Log search progress (-v info, -vv debug).",
    ),
) -> None:
    """Solve an 8-puzzle with breadth-first search."""
    _configure_logging(verbose)

    if scramble is None and start is None:
        raise typer.BadParameter("START is required unless --scramble is given.")

    options = SearchOptions(
        root=SearchRoot.START if forward else SearchRoot.GOAL,
        termination=Termination.ON_DEQUEUE if check_on_dequeue else Termination.ON_DISCOVERY,
    )

    goal_board = Board.parse(goal, blank)
    try:
        if scramble is not None:
            start_board = _scrambled_start(scramble, seed, goal_board)
        else:
            start_board = Board.parse(start, blank)
        solution = Solver.solve(start_board, goal_board, blank, options)
    except SolveError as exc:
        typer.echo(f"{type(exc).__name__}: {exc}", err=True)
        raise typer.Exit(code=1)

    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(solution)


if __name__ == "__main__":
    app()

"""Rich terminal frontend — tables, colours, and panels.

Uses the ``rich`` library for styled output of a solved trace while
sharing the same backend as the vanilla CLI.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.columns import Columns
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from eightpuzzle.engine.gamesolver import Solution
from eightpuzzle.models.board import BOARD_SIZE, Board

console = Console()


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board, goal: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = max(len(str(v)) for v in board.cells)
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(BOARD_SIZE):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(board.rows()):
        cells: list[Text] = []
        for c, val in enumerate(row):
            if val == board.blank:
                cells.append(Text("·", style="dim"))
            elif board.is_tile_correct(r * BOARD_SIZE + c, goal):
                cells.append(Text(str(val), style="bold green"))
            else:
                cells.append(Text(str(val), style="bold white"))
        table.add_row(*cells)

    return table


def _step_panel(board: Board, goal: Board, title: str) -> Panel:
    return Panel(
        Align.center(_render_board(board, goal)),
        title=f"[bold cyan]{title}[/bold cyan]",
        border_style="cyan",
        padding=(0, 1),
    )


def _stats_line(solution: Solution) -> Text:
    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(solution.moves), style="bold yellow")
    stats.append("    Expanded: ", style="dim")
    stats.append(str(solution.stats.expanded), style="bold yellow")
    stats.append("    Time: ", style="dim")
    stats.append(f"{solution.stats.elapsed:.3f}s", style="bold yellow")
    return stats


def render_solution(solution: Solution) -> Group:
    goal = solution.boards[-1]
    panels = [_step_panel(solution.boards[0], goal, "Start")]
    for i, (board, direction) in enumerate(
        zip(solution.boards[1:], solution.directions), 1
    ):
        panels.append(_step_panel(board, goal, f"{i}. {direction.value}"))

    return Group(
        Columns(panels),
        Text(""),
        Align.center(_stats_line(solution)),
    )


# -- public entry point -------------------------------------------------------


def run(solution: Solution, out: Console | None = None) -> None:
    """Render *solution* with Rich."""
    (out or console).print(render_solution(solution))

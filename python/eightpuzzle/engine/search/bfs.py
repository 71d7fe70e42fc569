"""Breadth-first search over the implicit packed-state graph.

Every slide is undone by the opposite slide, so the graph is undirected
and the search may be rooted at either endpoint.  The default roots it at
the goal and walks backward toward the start, which lets the predecessor
chain from the start read out directly in start→goal order.
"""

from __future__ import annotations

import logging
import math
from collections import deque
from dataclasses import dataclass, field
from enum import StrEnum
from time import perf_counter

from eightpuzzle.engine.movegen import MOVES, make_move
from eightpuzzle.engine.statecodec import PackedState
from eightpuzzle.errors import Unsolvable
from eightpuzzle.models.board import SLOTS

logger = logging.getLogger(__name__)

# Upper bound on distinct packed states; only half are reachable from any root.
MAX_STATES = math.factorial(SLOTS)


class SearchRoot(StrEnum):
    GOAL = "goal"
    START = "start"


class Termination(StrEnum):
    ON_DISCOVERY = "discovery"
    ON_DEQUEUE = "dequeue"


@dataclass(frozen=True)
class SearchOptions:
    root: SearchRoot = SearchRoot.GOAL
    termination: Termination = Termination.ON_DISCOVERY


@dataclass
class SearchStats:
    expanded: int = 0
    generated: int = 0
    discovered: int = 0
    peak_frontier: int = 0
    elapsed: float = 0.0


@dataclass
class Trace:
    """Packed states from start to goal, one slide apart."""

    states: list[PackedState]
    stats: SearchStats = field(default_factory=SearchStats)

    @property
    def moves(self) -> int:
        return len(self.states) - 1


def _walk(
    predecessors: dict[PackedState, PackedState], found: PackedState
) -> list[PackedState]:
    """Follow backpointers from *found* to the self-mapped root."""
    path = [found]
    current = found
    while predecessors[current] != current:
        current = predecessors[current]
        path.append(current)
    return path


def bfs(
    start: PackedState,
    goal: PackedState,
    options: SearchOptions | None = None,
) -> Trace:
    """Return a shortest trace from *start* to *goal*.

    Raises :class:`Unsolvable` if the frontier empties first.  That only
    happens when the caller skipped the parity pre-check.
    """
    options = options or SearchOptions()
    t0 = perf_counter()

    if options.root is SearchRoot.GOAL:
        root, target = goal, start
    else:
        root, target = start, goal
    logger.debug(
        "BFS from %s root %#034b toward %#034b (terminate on %s)",
        options.root, root, target, options.termination,
    )

    on_discovery = options.termination is Termination.ON_DISCOVERY
    stats = SearchStats()
    predecessors: dict[PackedState, PackedState] = {root: root}
    frontier: deque[PackedState] = deque([root])
    found = root == target

    while frontier and not found:
        stats.peak_frontier = max(stats.peak_frontier, len(frontier))
        current = frontier.popleft()
        if current == target:
            found = True
            break
        stats.expanded += 1

        for spec in MOVES.values():
            successor = make_move(current, spec)
            stats.generated += 1
            # Blocked moves return current, which is always already mapped.
            if successor in predecessors:
                continue
            predecessors[successor] = current
            if on_discovery and successor == target:
                found = True
                break
            frontier.append(successor)

    stats.discovered = len(predecessors)
    stats.elapsed = perf_counter() - t0

    if not found:
        logger.info(
            "BFS exhausted %d states without reaching target", stats.discovered
        )
        raise Unsolvable(
            f"Target not reachable: explored {stats.discovered} states."
        )

    path = _walk(predecessors, target)
    # Walking from the target yields target→root; orient it start→goal.
    if options.root is SearchRoot.START:
        path.reverse()

    logger.info(
        "BFS found %d-move trace: expanded=%d generated=%d discovered=%d (%.3fs)",
        len(path) - 1, stats.expanded, stats.generated, stats.discovered,
        stats.elapsed,
    )
    return Trace(states=path, stats=stats)

from eightpuzzle.engine.search.bfs import (
    MAX_STATES,
    SearchOptions,
    SearchRoot,
    SearchStats,
    Termination,
    Trace,
    bfs,
)

__all__ = [
    "MAX_STATES",
    "SearchOptions",
    "SearchRoot",
    "SearchStats",
    "Termination",
    "Trace",
    "bfs",
]

"""Shared helpers: an independent tuple-based BFS used as a distance oracle."""

from __future__ import annotations

from collections import deque

import pytest

# Blank neighbours on the 3×3 grid.
_NEI = {
    0: (1, 3),
    1: (0, 2, 4),
    2: (1, 5),
    3: (0, 4, 6),
    4: (1, 3, 5, 7),
    5: (2, 4, 8),
    6: (3, 7),
    7: (4, 6, 8),
    8: (5, 7),
}


def reference_distance(start: tuple, goal: tuple, blank=0) -> int | None:
    """Slide count of a shortest path, or None if *goal* is unreachable."""
    if start == goal:
        return 0
    dist = {start: 0}
    q = deque([start])
    while q:
        s = q.popleft()
        z = s.index(blank)
        for j in _NEI[z]:
            lst = list(s)
            lst[z], lst[j] = lst[j], lst[z]
            s2 = tuple(lst)
            if s2 in dist:
                continue
            dist[s2] = dist[s] + 1
            if s2 == goal:
                return dist[s2]
            q.append(s2)
    return None


@pytest.fixture
def distance():
    return reference_distance

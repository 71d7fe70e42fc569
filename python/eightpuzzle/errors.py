"""Typed failures raised before or during a solve."""

from __future__ import annotations


class SolveError(Exception):
    """Base class for every failure the solver reports to its caller."""


class SizeMismatch(SolveError):
    """A board does not hold exactly nine symbols."""


class AlphabetMismatch(SolveError):
    """Start and goal are not permutations of the same nine symbols."""


class Unsolvable(SolveError):
    """The goal cannot be reached from the start."""

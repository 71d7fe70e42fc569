"""Compact-state breadth-first solver for the generalized 8-puzzle."""

__version__ = "0.1.0"

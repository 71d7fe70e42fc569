from eightpuzzle.engine.gamesolver.solver import GOAL, Solution, Solver

__all__ = ["GOAL", "Solution", "Solver"]

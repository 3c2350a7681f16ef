"""
Arrow Puzzle Solver

Solver for the hexagonal arrow puzzle, plus settings and debug rendering.
The solving core lives in arrow_puzzle.solver.
"""

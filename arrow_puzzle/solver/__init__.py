"""
Solver Package - Poke solver for the hexagonal arrow puzzle.

The puzzle is a hexagon of 37 arrows, each pointing in one of six
directions. Poking an arrow turns it and its (up to six) neighbours one
step clockwise; the goal is to point every arrow up.

Public API:
    - HexGrid: Fixed-shape 37-cell container
    - Position: Cell coordinate (A0 ... G6)
    - Arrow: Rotation value 0-5
    - Board: Arrow hexagon with poke()
    - Orientation: One of the 12 symmetric framings
    - Solution: Poke counts and metrics
    - SolutionContext: Shared context for strategies
    - SolverStrategy: Abstract base for strategies
    - create_strategy(), solve_board(): Factory functions
    - get_strategy_names(): List available strategies

Usage:
    from arrow_puzzle.solver import Board, SolutionContext, create_strategy

    # Board detected on screen, in canonical order
    board = Board.from_values(values)

    strategy = create_strategy("orientation_search")
    solution = strategy.solve(SolutionContext(board=board))

    # Hand the taps to the device
    for position in solution.taps():
        tap(position)
"""

# Core data structures
from .hex import HexGrid, Position, POSITIONS, position
from .arrow import Arrow, ArrowRangeError, UP
from .board import Board, BoardShapeError
from .orientation import Orientation, all_orientations
from .solution import Solution, SolutionMetrics
from .context import SolutionContext

# Strategy framework
from .base import SolverStrategy
from .factory import (
    create_strategy,
    get_strategy_names,
    get_strategy_info,
    get_default_strategy_name,
    register_strategy,
    solve_board,
)

# Import strategies to register them
from . import strategies

__all__ = [
    # Data structures
    "HexGrid",
    "Position",
    "POSITIONS",
    "position",
    "Arrow",
    "ArrowRangeError",
    "UP",
    "Board",
    "BoardShapeError",
    "Orientation",
    "all_orientations",
    "Solution",
    "SolutionMetrics",
    "SolutionContext",
    # Strategy framework
    "SolverStrategy",
    "create_strategy",
    "get_strategy_names",
    "get_strategy_info",
    "get_default_strategy_name",
    "register_strategy",
    "solve_board",
]

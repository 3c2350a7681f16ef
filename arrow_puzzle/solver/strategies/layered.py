"""
Layered Strategy - Ring-by-ring elimination for a single orientation.

The hexagon is split into seven V-shaped groups, peeled from the two upper
sides toward the bottom corner:

             G0
          G0    G0
       G0    G1    G0
    G0    G1    G1    G0
       G1    G2    G1
    G1    G2    G2    G1
       G2    G3    G2
    G2    G3    G3    G2
       G3    G4    G3
    G3    G4    G4    G3
       G4    G5    G4
          G5    G5
             G6

Each cell of a group is aligned by poking the cell directly below it, which
belongs to the next group. That poke turns the target once per tap and leaves
every cell aligned earlier in the pass alone, so one pass leaves only the
two lower sides out of line. A closed-form correction on row A, followed
by a second pass, clears them.
"""

import logging
from typing import Tuple

import numpy as np

from ..arrow import ROTATIONS, UP
from ..base import SolverStrategy
from ..board import Board
from ..context import SolutionContext
from ..factory import register_strategy
from ..hex import HexGrid, Position, position
from ..orientation import Orientation
from ..solution import Solution, empty_poke_counts

logger = logging.getLogger(__name__)


def _pairs(*names: str) -> Tuple[Tuple[Position, Position], ...]:
    """Parse "TARGET:POKE" entries into position pairs."""
    pairs = []
    for entry in names:
        target, poke = entry.split(":")
        pairs.append((position(target), position(poke)))
    return tuple(pairs)


# (target, poke) in elimination order
PARTIAL_SOLVE_MOVES = _pairs(
    # group 0 by poking group 1
    "A0:B1", "A1:B2", "A2:B3", "A3:B4", "B0:C1", "C0:D1", "D0:E1",
    # group 1 by poking group 2
    "B1:C2", "B2:C3", "B3:C4", "B4:C5", "C1:D2", "D1:E2", "E1:F2",
    # group 2 by poking group 3
    "C2:D3", "C3:D4", "C4:D5", "C5:D6", "D2:E3", "E2:F3", "F2:G3",
    # group 3 by poking group 4
    "D3:E4", "D4:E5", "D5:E6", "E3:F4", "F3:G4",
    # group 4 by poking group 5
    "E4:F5", "E5:F6", "F4:G5",
    # group 5 by poking group 6
    "F5:G6",
)

# Border cells read by the fixup, and the row A cells it pokes
D6, E6, F6 = position("D6"), position("E6"), position("F6")
A0, A1, A2, A3 = position("A0"), position("A1"), position("A2"), position("A3")


def _poke_and_count(board: Board, poke_counts: HexGrid[int], p: Position, times: int) -> None:
    board.poke(p, times)
    poke_counts[p] += times


def partially_solve(board: Board, poke_counts: HexGrid[int]) -> None:
    """Align groups 0-5 in place, recording every poke."""
    for target, poke in PARTIAL_SOLVE_MOVES:
        times = board[target].distance_to(UP)
        if times:
            _poke_and_count(board, poke_counts, poke, times)


def fixup(board: Board, poke_counts: HexGrid[int]) -> None:
    """
    Poke row A so the next partial solve also aligns the bottom-right border.

    The counts are derived from the border arrows left over by a partial
    solve. The A2 correction only fixes parity: it is 0 or 3 depending on
    whether D6 + F6 is even.
    """
    d6, e6, f6 = board[D6], board[E6], board[F6]

    a0 = UP.distance_to(e6) + d6.distance_to(UP)
    a1_a3 = e6.distance_to(UP)
    a2 = 0 if (d6.value + f6.value) % 2 == 0 else 3

    for p, times in ((A0, a0), (A1, a1_a3), (A2, a2), (A3, a1_a3)):
        _poke_and_count(board, poke_counts, p, times)


def solve_layered(board: Board) -> HexGrid[int]:
    """
    Compute poke counts for the board exactly as framed.

    Args:
        board: Board to solve (left untouched)

    Returns:
        Poke counts per cell, reduced mod 6
    """
    work = board.copy()
    poke_counts = empty_poke_counts()

    partially_solve(work, poke_counts)
    fixup(work, poke_counts)
    partially_solve(work, poke_counts)

    return poke_counts.map(lambda n: n % ROTATIONS, dtype=np.int64)


@register_strategy
class LayeredStrategy(SolverStrategy):
    """
    Single-orientation layered elimination.

    Deterministic and instant, but the poke total depends on how the board
    happens to be framed; see OrientationSearchStrategy.
    """
    name = "layered"
    description = "Layered (single orientation) - Ring-by-ring elimination"

    def solve(self, context: SolutionContext) -> Solution:
        """
        Solve the board in its given orientation.

        Args:
            context: Solution context with board

        Returns:
            Solution with poke counts and metrics
        """
        poke_counts = solve_layered(context.board)
        context.report_progress(1.0, "layered solve done")

        solution = self._build_solution(
            context, poke_counts, Orientation(), 1
        )
        logger.debug(f"[Layered] {solution.total_pokes} pokes")
        return solution

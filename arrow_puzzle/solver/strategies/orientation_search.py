"""
Orientation Search Strategy - Best layered solve over the hexagon's symmetries.

The layered solver always peels the board from the same corner, so its poke
total depends on how the board is framed. Rotating and mirroring the board
gives 12 framings with the same puzzle; solving each and mapping the pokes
back yields 12 valid answers, of which the cheapest is kept.

This is a best-of-12 heuristic, not a search for the global minimum.
"""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from typing import List, Optional

from ..base import SolverStrategy
from ..board import Board
from ..context import SolutionContext
from ..factory import register_strategy
from ..hex import HexGrid
from ..orientation import Orientation, all_orientations
from ..solution import Solution
from .layered import solve_layered

logger = logging.getLogger(__name__)


@dataclass
class OrientationCandidate:
    """
    Layered solve of one framing, mapped back to the original framing.

    Attributes:
        orientation: Framing the board was solved in
        poke_counts: Pokes per cell of the original board
        cost: Total pokes
    """
    orientation: Orientation
    poke_counts: HexGrid[int]
    cost: int


def solve_in_orientation(board: Board, orientation: Orientation) -> OrientationCandidate:
    """
    Solve board as seen through orientation and map the pokes back.

    Pokes are symmetric under rotation and mirroring, so the mapped-back
    counts solve the original board whenever the framed counts solve the
    framed board.
    """
    framed = Board(orientation.apply(board.arrows))
    poke_counts = orientation.invert(solve_layered(framed))
    return OrientationCandidate(
        orientation=orientation,
        poke_counts=poke_counts,
        cost=poke_counts.total(),
    )


@register_strategy
class OrientationSearchStrategy(SolverStrategy):
    """
    Layered solve in all 12 framings, keeping the cheapest.

    Parameters:
        max_workers: Threads used to evaluate framings (0 or 1 = sequential)

    The framings are independent, so the result is the same whichever way
    they are evaluated. Ties go to the earliest framing in search order,
    which starts with the board as given.
    """
    name = "orientation_search"
    description = "Orientation search (best of 12) - Layered solve in every framing"

    def __init__(self, max_workers: int = 0):
        """
        Initialize orientation search strategy.

        Args:
            max_workers: Threads for evaluating framings (0 or 1 = sequential)
        """
        if max_workers < 0:
            raise ValueError(f"max_workers must be >= 0, got {max_workers}")
        self.max_workers = max_workers

    def solve(self, context: SolutionContext) -> Solution:
        """
        Compute the cheapest layered solution over all framings.

        Args:
            context: Solution context with board

        Returns:
            Solution with poke counts, winning orientation and metrics
        """
        orientations = all_orientations()
        candidates = self._evaluate(context, orientations)

        # min() keeps the first of equal costs, i.e. search order
        best = min(candidates, key=lambda c: c.cost)

        for candidate in candidates:
            logger.debug(f"[OrientationSearch] {candidate.orientation}: {candidate.cost} pokes")
        logger.info(
            f"[OrientationSearch] Best framing {best.orientation}: {best.cost} pokes "
            f"(as given: {candidates[0].cost})"
        )

        return self._build_solution(
            context, best.poke_counts, best.orientation, len(candidates)
        )

    def _evaluate(
        self,
        context: SolutionContext,
        orientations: List[Orientation]
    ) -> List[OrientationCandidate]:
        """
        Solve every framing, returning candidates in the order of orientations.

        Args:
            context: Solution context with board and progress reporting
            orientations: Framings to evaluate

        Returns:
            One candidate per orientation
        """
        total = len(orientations)

        if self.max_workers <= 1:
            candidates = []
            for done, orientation in enumerate(orientations, 1):
                candidates.append(solve_in_orientation(context.board, orientation))
                context.report_progress(done / total, f"{done}/{total} framings")
            return candidates

        results: List[Optional[OrientationCandidate]] = [None] * total
        with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
            futures = {
                pool.submit(solve_in_orientation, context.board, orientation): i
                for i, orientation in enumerate(orientations)
            }
            for done, future in enumerate(as_completed(futures), 1):
                results[futures[future]] = future.result()
                context.report_progress(done / total, f"{done}/{total} framings")
        return results

"""
Base Strategy Module - Abstract base class for solving strategies.
"""

import logging
from abc import ABC, abstractmethod

from .context import SolutionContext
from .hex import HexGrid
from .orientation import Orientation
from .solution import Solution, SolutionMetrics

logger = logging.getLogger(__name__)


class SolverStrategy(ABC):
    """
    Abstract base class for all solving strategies.

    Subclasses must implement the solve() method and define
    name and description class attributes.

    Attributes:
        name: Short identifier for the strategy
        description: Human-readable description for the CLI
    """
    name: str = "base"
    description: str = "Base strategy"

    @abstractmethod
    def solve(self, context: SolutionContext) -> Solution:
        """
        Compute poke counts that align the given board.

        Must not modify context.board.

        Args:
            context: Solution context with board and progress reporting

        Returns:
            Solution with poke counts and metrics
        """
        pass

    def _build_solution(
        self,
        context: SolutionContext,
        poke_counts: HexGrid[int],
        orientation: Orientation,
        orientations_evaluated: int
    ) -> Solution:
        """Build Solution object from computation results, checking that it aligns the board."""
        elapsed_ms = context.elapsed_time() * 1000
        board = context.board
        is_complete = board.apply_pokes(poke_counts).is_solved()

        if not is_complete:
            logger.warning(
                f"[{self.name}] Poke counts do not align board {board.to_string()}; "
                f"it cannot be reached from the solved board"
            )

        return Solution(
            poke_counts=poke_counts,
            is_complete=is_complete,
            orientation=orientation,
            metrics=SolutionMetrics(
                computation_time_ms=elapsed_ms,
                orientations_evaluated=orientations_evaluated,
                strategy_name=self.name
            )
        )

"""
Solution Module - Result of strategy computation.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Tuple

import numpy as np

from .board import Board
from .hex import HexGrid, Position
from .orientation import Orientation


@dataclass
class SolutionMetrics:
    """
    Performance metrics for solution computation.

    Attributes:
        computation_time_ms: Time taken in milliseconds
        orientations_evaluated: Number of board framings solved
        strategy_name: Name of strategy that computed this solution
    """
    computation_time_ms: float = 0.0
    orientations_evaluated: int = 0
    strategy_name: str = ""


def empty_poke_counts() -> HexGrid[int]:
    """Poke-count map with no pokes."""
    return HexGrid.filled(0, dtype=np.int64)


@dataclass
class Solution:
    """
    Result of a strategy computation.

    Attributes:
        poke_counts: Pokes per cell, each in [0, 6)
        is_complete: True if applying the pokes aligns the board
        orientation: Framing whose solve produced these pokes
        metrics: Performance statistics
    """
    poke_counts: HexGrid[int] = field(default_factory=empty_poke_counts)
    is_complete: bool = False
    orientation: Orientation = field(default_factory=Orientation)
    metrics: SolutionMetrics = field(default_factory=SolutionMetrics)

    @property
    def total_pokes(self) -> int:
        """Total number of taps needed."""
        return self.poke_counts.total()

    @property
    def pokes(self) -> List[Tuple[Position, int]]:
        """Cells that need poking, with their counts, in canonical order."""
        return [(p, n) for p, n in self.poke_counts.enumerate() if n]

    @property
    def has_pokes(self) -> bool:
        return self.total_pokes > 0

    def taps(self) -> Iterator[Position]:
        """
        Flatten the poke counts into single taps.

        Each cell is repeated by its count. Cells may be tapped in any
        order, but every repeat must land.
        """
        for p, n in self.pokes:
            for _ in range(n):
                yield p

    def apply_to(self, board: Board) -> Board:
        """Board that results from performing every poke on board."""
        return board.apply_pokes(self.poke_counts)

    def describe(self) -> str:
        """
        Human readable summary with the poke map drawn as a hexagon.

        Returns:
            Multi-line string
        """
        header = (
            f"{self.total_pokes} pokes on {len(self.pokes)} cells "
            f"({self.metrics.strategy_name}, {self.orientation}, "
            f"{self.metrics.computation_time_ms:.1f}ms)"
        )
        return header + "\n" + self.poke_counts.visualize(lambda n: str(n) if n else ".")

"""
Solution Context Module - Shared context for strategy execution.
"""

import time
from dataclasses import dataclass, field
from typing import Callable, Optional

from .board import Board


@dataclass
class SolutionContext:
    """
    Shared context passed to strategies containing the board and
    progress reporting.

    Solving is quick and total, so there is no cancellation or timeout;
    callers that need one wrap the call themselves.

    Attributes:
        board: Board to solve (strategies never modify it)
        start_time: When computation started; reported solve times count from here
        progress_callback: Optional callback for progress updates
    """
    board: Board
    start_time: float = field(default_factory=time.perf_counter)
    progress_callback: Optional[Callable[[float, str], None]] = None

    def report_progress(self, percent: float, message: str = "") -> None:
        """
        Report progress to the caller.

        Args:
            percent: Progress from 0.0 to 1.0
            message: Optional status message
        """
        if self.progress_callback:
            self.progress_callback(percent, message)

    def elapsed_time(self) -> float:
        """
        Get seconds elapsed since computation started.

        Returns:
            Elapsed time in seconds
        """
        return time.perf_counter() - self.start_time

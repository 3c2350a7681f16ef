"""
Arrow Module - Rotation value of a single hexagon cell.
"""

from dataclasses import dataclass

# Number of distinct arrow directions; six rotations bring an arrow back
ROTATIONS = 6


class ArrowRangeError(ValueError):
    """Raised when an arrow is built from a value outside [0, 6)."""

    def __init__(self, value: int):
        super().__init__(f"want value within [0, {ROTATIONS}), but got {value}")
        self.value = value


@dataclass(frozen=True, order=True)
class Arrow:
    """
    Direction of one arrow, as a number of clockwise steps from "up".

    Construction is the only place values are validated, so every Arrow
    in circulation holds 0-5.

    Attributes:
        value: Rotation steps from the aligned direction (0-5)
    """
    value: int

    def __post_init__(self):
        if not 0 <= self.value < ROTATIONS:
            raise ArrowRangeError(self.value)

    def rotate(self, steps: int = 1) -> "Arrow":
        """Arrow turned clockwise by the given number of steps."""
        return Arrow((self.value + steps) % ROTATIONS)

    def distance_to(self, other: "Arrow") -> int:
        """Clockwise steps needed to turn this arrow into other."""
        return (other.value - self.value) % ROTATIONS

    def __str__(self) -> str:
        return str(self.value)


UP = Arrow(0)

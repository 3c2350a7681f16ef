"""
Orientation Module - The 12 symmetric framings of the hexagon.
"""

from dataclasses import dataclass
from typing import List

from .hex import HexGrid

ROTATION_COUNT = 6


@dataclass(frozen=True)
class Orientation:
    """
    One element of the hexagon's dihedral symmetry group.

    A framing is produced by an optional horizontal flip followed by
    `rotation` clockwise turns of 60 degrees.

    Attributes:
        rotation: Clockwise 60 degree turns (0-5)
        flipped: Whether the grid is mirrored before turning
    """
    rotation: int = 0
    flipped: bool = False

    def apply(self, grid: HexGrid) -> HexGrid:
        """Copy of grid seen in this framing."""
        out = grid.copy()
        if self.flipped:
            out.flip_horizontally()
        for _ in range(self.rotation):
            out.rotate_60_cw()
        return out

    def invert(self, grid: HexGrid) -> HexGrid:
        """Copy of grid mapped from this framing back to the original one."""
        out = grid.copy()
        for _ in range((ROTATION_COUNT - self.rotation) % ROTATION_COUNT):
            out.rotate_60_cw()
        if self.flipped:
            out.flip_horizontally()
        return out

    @property
    def is_identity(self) -> bool:
        return self.rotation == 0 and not self.flipped

    def __str__(self) -> str:
        label = f"rot{self.rotation * 60}"
        return f"flip+{label}" if self.flipped else label


def all_orientations() -> List[Orientation]:
    """
    All 12 framings in search order: the six rotations, then the six
    rotations of the mirrored grid.
    """
    return [
        Orientation(rotation=rotation, flipped=flipped)
        for flipped in (False, True)
        for rotation in range(ROTATION_COUNT)
    ]

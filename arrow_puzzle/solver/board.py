"""
Board Module - Arrow hexagon and the poke operation.
"""

import random
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

import numpy as np

from .arrow import Arrow, ROTATIONS, UP
from .hex import HexGrid, Position, POSITIONS, is_valid

# Cells turned by a poke, relative to the poked cell
FLOWER: Tuple[Tuple[int, int], ...] = (
    (-1, -1), (0, -1),
    (-1, 0), (0, 0), (1, 0),
    (0, 1), (1, 1),
)


def flower(p: Position) -> List[Position]:
    """Cells of the hexagon turned when p is poked (edge cells have fewer)."""
    return [
        Position(p.x + dx, p.y + dy)
        for dx, dy in FLOWER
        if is_valid(p.x + dx, p.y + dy)
    ]


def _influence_matrix() -> np.ndarray:
    """Row i lists, per canonical cell, how far one poke at POSITIONS[i] turns it."""
    order = {p: i for i, p in enumerate(POSITIONS)}
    matrix = np.zeros((len(POSITIONS), len(POSITIONS)), dtype=np.int64)
    for i, p in enumerate(POSITIONS):
        for q in flower(p):
            matrix[i, order[q]] = 1
    return matrix


INFLUENCE = _influence_matrix()


class BoardShapeError(ValueError):
    """Raised when board input does not describe exactly 37 arrows."""


@dataclass
class Board:
    """
    Hexagon of arrows.

    poke() mutates the board in place; solvers work on copies so the
    caller's board is never changed.

    Attributes:
        arrows: Arrow for each of the 37 cells
    """
    arrows: HexGrid[Arrow]

    @classmethod
    def from_arrows(cls, arrows: Iterable[Arrow]) -> "Board":
        """
        Create a Board from arrows listed in canonical order.

        Args:
            arrows: Exactly 37 arrows, row A first

        Returns:
            Board instance

        Raises:
            BoardShapeError: If the number of arrows is not 37
        """
        arrows = list(arrows)
        if len(arrows) != len(POSITIONS):
            raise BoardShapeError(
                f"Expected {len(POSITIONS)} arrows, got {len(arrows)}"
            )
        it = iter(arrows)
        return cls(HexGrid.from_fn(lambda x, y: next(it)))

    @classmethod
    def from_values(cls, values: Iterable[int]) -> "Board":
        """
        Create a Board from raw rotation values in canonical order.

        Raises:
            ArrowRangeError: If a value is outside [0, 6)
            BoardShapeError: If the number of values is not 37
        """
        return cls.from_arrows(Arrow(int(v)) for v in values)

    @classmethod
    def parse(cls, text: str) -> "Board":
        """
        Create a Board from a string of 37 digits.

        Whitespace, commas and semicolons between digits are ignored, so a
        visualized board or a comma separated list both parse.

        Raises:
            BoardShapeError: If the text holds anything other than digits
            ArrowRangeError: If a digit is 6 or more
        """
        tokens = [c for c in text if not c.isspace() and c not in ",;"]
        bad = [c for c in tokens if not c.isdigit()]
        if bad:
            raise BoardShapeError(f"Unexpected characters in board: {''.join(bad)!r}")
        return cls.from_values(int(c) for c in tokens)

    @classmethod
    def uniform(cls, value: int) -> "Board":
        """Board with every arrow at the same rotation."""
        arrow = Arrow(value)
        return cls(HexGrid.filled(arrow))

    @classmethod
    def solved(cls) -> "Board":
        """Fully aligned board."""
        return cls.uniform(UP.value)

    @classmethod
    def scrambled(cls, rng: Optional[random.Random] = None) -> "Board":
        """
        Deal a puzzle by poking every cell of a solved board a random number of times.

        Boards produced this way are always solvable.

        Args:
            rng: Random source (a fresh unseeded one if omitted)
        """
        rng = rng or random.Random()
        counts = HexGrid.from_fn(lambda x, y: rng.randrange(ROTATIONS), dtype=np.int64)
        return cls.solved().apply_pokes(counts)

    def at(self, x: int, y: int) -> Optional[Arrow]:
        """Arrow at (x, y), or None outside the hexagon."""
        return self.arrows.at(x, y)

    def __getitem__(self, p: Position) -> Arrow:
        return self.arrows[p]

    def poke(self, p: Position, times: int = 1) -> None:
        """
        Poke a cell, turning it and its neighbours clockwise.

        Neighbours that fall outside the hexagon are skipped.

        Args:
            p: Cell to poke
            times: Number of consecutive pokes
        """
        steps = times % ROTATIONS
        if steps == 0:
            return
        for dx, dy in FLOWER:
            # update() ignores cells off the edge
            self.arrows.update(p.x + dx, p.y + dy, lambda a: a.rotate(steps))

    def apply_pokes(self, poke_counts: HexGrid[int]) -> "Board":
        """
        Apply a poke-count map to a copy of this board.

        Pokes commute, so the result does not depend on the order in
        which a player would tap the cells.

        Args:
            poke_counts: Number of pokes per cell

        Returns:
            New Board after all pokes
        """
        counts = poke_counts.array.astype(np.int64)
        turned = (np.asarray(self.values(), dtype=np.int64) + counts @ INFLUENCE) % ROTATIONS
        return Board.from_values(turned)

    def is_solved(self) -> bool:
        """True if every arrow points up."""
        return all(a == UP for _, a in self.arrows.enumerate())

    def count_unaligned(self) -> int:
        """Number of arrows not pointing up."""
        return sum(1 for _, a in self.arrows.enumerate() if a != UP)

    def diff(self, other: "Board") -> List[Position]:
        """
        Find cells that differ between this board and another.

        Args:
            other: Another Board to compare against

        Returns:
            Positions where arrows differ, in canonical order
        """
        if not isinstance(other, Board):
            raise TypeError("Can only diff against another Board")
        return [p for (p, a), (_, b) in zip(self.arrows.enumerate(), other.arrows.enumerate()) if a != b]

    def copy(self) -> "Board":
        return Board(self.arrows.copy())

    def values(self) -> List[int]:
        """Rotation values in canonical order."""
        return [a.value for a in self.arrows.values()]

    def to_string(self) -> str:
        """The 37 rotation values as a digit string (inverse of parse)."""
        return "".join(str(v) for v in self.values())

    def __str__(self) -> str:
        return self.arrows.visualize(str)

"""
Hex Grid Module - Fixed-shape container for the 37-cell hexagon.

Cells are addressed by (x, y) inside a 7x7 index space. Only the 37
coordinates with |x - y| <= 3 belong to the hexagon; the other 12 slots
exist in the backing array but never hold data.

Layout (each letter marks the row a cell belongs to):

             A
          B     A
       C     B     A
    D     C     B     A
       D     C     B
    E     D     C     B
       E     D     C
    F     E     D     C
       F     E     D
    G     F     E     D
       G     F     E
          G     F
             G

x grows down-right, y grows down-left.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, Iterator, List, Optional, Tuple, TypeVar

import numpy as np

T = TypeVar("T")

SIDE = 7
SLOTS = SIDE * SIDE
CENTER = 3
ROW_NAMES = "ABCDEFG"


@dataclass(frozen=True)
class Position:
    """
    A valid cell of the hexagon.

    Coordinates outside the hexagon raise ValueError, so a Position never
    addresses one of the 12 unused slots.

    Attributes:
        x: Column along the down-right axis (0-6)
        y: Row along the down-left axis (0-6), also the ring letter index
    """
    x: int
    y: int

    def __post_init__(self):
        if not is_valid(self.x, self.y):
            raise ValueError(f"({self.x}, {self.y}) is not a cell of the hexagon")

    @property
    def index(self) -> int:
        """Slot in the 7x7 backing array."""
        return self.x + SIDE * self.y

    @property
    def ring(self) -> str:
        """Ring letter (A-G) used by the layered solver."""
        return ROW_NAMES[self.y]

    @property
    def name(self) -> str:
        return f"{self.ring}{self.x}"

    def __str__(self) -> str:
        return self.name


def is_valid(x: int, y: int) -> bool:
    """Check whether (x, y) lies inside the hexagon."""
    return 0 <= x < SIDE and 0 <= y < SIDE and abs(x - y) <= CENTER


# Canonical enumeration order: row by row (y), left to right in x
POSITIONS: Tuple[Position, ...] = tuple(
    Position(x, y) for y in range(SIDE) for x in range(SIDE) if is_valid(x, y)
)
POSITION_BY_NAME: Dict[str, Position] = {p.name: p for p in POSITIONS}

# Static validity table and canonical slot indices
VALID = np.zeros(SLOTS, dtype=bool)
INDICES = np.array([p.index for p in POSITIONS], dtype=np.intp)
VALID[INDICES] = True


def position(name: str) -> Position:
    """
    Look up a position by name (e.g. "D3").

    Raises:
        KeyError: If the name does not denote a cell of the hexagon
    """
    return POSITION_BY_NAME[name.upper()]


def _permutation(mapping: Callable[[int, int], Tuple[int, int]]) -> np.ndarray:
    """Destination slot for every canonical position under a coordinate map."""
    destinations = []
    for p in POSITIONS:
        x, y = mapping(p.x, p.y)
        if not is_valid(x, y):
            raise ValueError(f"{p} maps outside the hexagon to ({x}, {y})")
        destinations.append(x + SIDE * y)
    return np.array(destinations, dtype=np.intp)


# 60 degrees clockwise: (1,0) -> (1,1) -> (0,1) -> (-1,0) around the centre
ROTATE_60_CW = _permutation(lambda x, y: (CENTER + x - y, x))
# Mirror across the vertical axis swaps the two hex axes
FLIP_HORIZONTALLY = _permutation(lambda x, y: (y, x))


class HexGrid(Generic[T]):
    """
    One value per hexagon cell, stored in a fixed 49-slot array.

    The grid is mutable; copy() before modifying a grid you do not own.
    Equality only looks at the 37 cells of the hexagon.
    """

    __slots__ = ("_cells",)

    def __init__(self, cells: np.ndarray):
        if cells.shape != (SLOTS,):
            raise ValueError(f"Expected {SLOTS} slots, got shape {cells.shape}")
        self._cells = cells

    @classmethod
    def from_fn(cls, generator: Callable[[int, int], T], dtype: Any = object) -> "HexGrid[T]":
        """
        Build a grid by calling generator(x, y) once per cell, in canonical order.

        Args:
            generator: Produces the value for a cell
            dtype: numpy dtype of the backing array (object for arbitrary values)

        Returns:
            Fully populated HexGrid
        """
        values = [generator(p.x, p.y) for p in POSITIONS]
        if dtype is object:
            cells = np.full(SLOTS, None, dtype=object)
            cells[INDICES] = _object_array(values)
        else:
            cells = np.zeros(SLOTS, dtype=dtype)
            cells[INDICES] = values
        return cls(cells)

    @classmethod
    def filled(cls, value: T, dtype: Any = object) -> "HexGrid[T]":
        """Grid holding the same value in every cell."""
        return cls.from_fn(lambda x, y: value, dtype=dtype)

    def at(self, x: int, y: int) -> Optional[T]:
        """
        Get the value at (x, y).

        Returns:
            The value, or None if (x, y) is outside the hexagon
        """
        if not is_valid(x, y):
            return None
        return _scalar(self._cells[x + SIDE * y])

    def update(self, x: int, y: int, fn: Callable[[T], T]) -> Optional[T]:
        """
        Replace the value at (x, y) with fn(value).

        Returns:
            The new value, or None if (x, y) is outside the hexagon
        """
        if not is_valid(x, y):
            return None
        i = x + SIDE * y
        self._cells[i] = fn(_scalar(self._cells[i]))
        return _scalar(self._cells[i])

    def __getitem__(self, p: Position) -> T:
        return _scalar(self._cells[p.index])

    def __setitem__(self, p: Position, value: T) -> None:
        self._cells[p.index] = value

    def enumerate(self) -> Iterator[Tuple[Position, T]]:
        """Yield (position, value) pairs in canonical order."""
        yield from zip(POSITIONS, self.values())

    def values(self) -> List[T]:
        """Cell values in canonical order."""
        return self._cells[INDICES].tolist()

    def map(self, fn: Callable[[T], Any], dtype: Any = object) -> "HexGrid[Any]":
        """New grid with fn applied to every cell."""
        return HexGrid.from_fn(lambda x, y: fn(self.at(x, y)), dtype=dtype)

    def total(self) -> int:
        """Sum of the cells inside the hexagon (numeric grids only)."""
        return int(self._cells[VALID].sum())

    def copy(self) -> "HexGrid[T]":
        return HexGrid(self._cells.copy())

    @property
    def array(self) -> np.ndarray:
        """Cell values in canonical order as a numpy array (a copy)."""
        return self._cells[INDICES]

    def rotate_60_cw(self) -> None:
        """Move every value to the cell 60 degrees clockwise from it."""
        self._permute(ROTATE_60_CW)

    def flip_horizontally(self) -> None:
        """Mirror the grid across its vertical axis."""
        self._permute(FLIP_HORIZONTALLY)

    def _permute(self, destinations: np.ndarray) -> None:
        cells = self._cells.copy()
        cells[destinations] = self._cells[INDICES]
        self._cells = cells

    def visualize(self, render: Callable[[T], str] = str) -> str:
        """
        Render the grid as a 13-line hexagon.

        Cells on the same screen row share x + y; the horizontal offset of a
        cell grows with x - y. Every rendered value is left-aligned to the
        widest one so the columns line up.

        Args:
            render: Converts a cell value to text

        Returns:
            Multi-line string
        """
        texts = {p: render(v) for p, v in self.enumerate()}
        width = max(len(t) for t in texts.values())
        unit = width + 2

        lines = []
        for row in range(2 * SIDE - 1):
            line = ""
            for p in sorted((p for p in POSITIONS if p.x + p.y == row), key=lambda p: p.x - p.y):
                column = (p.x - p.y + CENTER) * unit
                line = line.ljust(column) + texts[p].ljust(width)
            lines.append(line.rstrip())
        return "\n".join(lines)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HexGrid):
            return NotImplemented
        return all(a == b for a, b in zip(self.values(), other.values()))

    def __repr__(self) -> str:
        return f"HexGrid({self.values()!r})"


def _object_array(values: List[Any]) -> np.ndarray:
    """1-D object array without numpy unpacking tuple or list values."""
    out = np.empty(len(values), dtype=object)
    for i, v in enumerate(values):
        out[i] = v
    return out


def _scalar(value: Any) -> Any:
    """Unwrap numpy scalars so callers see plain ints."""
    return value.item() if isinstance(value, np.generic) else value

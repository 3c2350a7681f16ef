"""
Tests for arrows, boards and poke mechanics

Usage:
    pytest tests/test_board.py
"""

import random
import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from arrow_puzzle.solver import (
    Arrow,
    ArrowRangeError,
    Board,
    BoardShapeError,
    HexGrid,
    POSITIONS,
    UP,
    position,
)
from arrow_puzzle.solver.board import flower


def changed_cells(before: Board, after: Board):
    return {p.name for p in before.diff(after)}


def test_arrow_range():
    """Only 0-5 are arrows."""
    for value in range(6):
        assert Arrow(value).value == value

    for value in (-1, 6, 12):
        with pytest.raises(ArrowRangeError) as excinfo:
            Arrow(value)
        assert excinfo.value.value == value
        assert isinstance(excinfo.value, ValueError)


def test_arrow_rotate_and_distance():
    """Rotation wraps at 6; distance is clockwise steps."""
    assert Arrow(5).rotate() == UP
    assert Arrow(2).rotate(3) == Arrow(5)
    assert Arrow(2).distance_to(UP) == 4
    assert UP.distance_to(Arrow(2)) == 2
    assert Arrow(3).distance_to(Arrow(3)) == 0

    for a in range(6):
        for b in range(6):
            steps = Arrow(a).distance_to(Arrow(b))
            assert 0 <= steps < 6
            assert Arrow(a).rotate(steps) == Arrow(b)


def test_poke_centre_turns_flower():
    """Poking the centre turns it and its six neighbours once."""
    board = Board.solved()
    board.poke(position("D3"))

    turned = {p.name for p, a in board.arrows.enumerate() if a == Arrow(1)}
    assert turned == {"C2", "C3", "D2", "D3", "D4", "E3", "E4"}
    assert board.count_unaligned() == 7


def test_poke_clips_at_edges():
    """Corner and edge pokes skip neighbours outside the hexagon."""
    corner = Board.solved()
    corner.poke(position("A0"))
    assert changed_cells(Board.solved(), corner) == {"A0", "A1", "B0", "B1"}

    corner = Board.solved()
    corner.poke(position("A3"))
    assert changed_cells(Board.solved(), corner) == {"A2", "A3", "B3", "B4"}

    edge = Board.solved()
    edge.poke(position("B0"))
    assert changed_cells(Board.solved(), edge) == {"A0", "B0", "B1", "C0", "C1"}

    assert len(flower(position("G6"))) == 4
    assert len(flower(position("D3"))) == 7


def test_poke_six_times_is_noop():
    """Six pokes on the same cell change nothing."""
    rng = random.Random(3)
    board = Board.scrambled(rng)
    poked = board.copy()

    for _ in range(6):
        poked.poke(position("C2"))
    assert poked == board

    poked.poke(position("C2"), times=8)
    expected = board.copy()
    expected.poke(position("C2"), times=2)
    assert poked == expected


def test_pokes_commute():
    """The same pokes in any order give the same board."""
    rng = random.Random(11)
    pokes = [rng.choice(POSITIONS) for _ in range(60)]
    start = Board.scrambled(rng)

    in_order = start.copy()
    for p in pokes:
        in_order.poke(p)

    shuffled = list(pokes)
    rng.shuffle(shuffled)
    out_of_order = start.copy()
    for p in shuffled:
        out_of_order.poke(p)

    assert in_order == out_of_order


def test_apply_pokes_matches_poking():
    """Bulk application agrees with poking cell by cell."""
    rng = random.Random(5)
    start = Board.scrambled(rng)
    counts = HexGrid.from_fn(lambda x, y: rng.randrange(6), dtype=int)

    poked = start.copy()
    for p, n in counts.enumerate():
        poked.poke(p, n)

    assert start.apply_pokes(counts) == poked
    # the original is untouched
    assert start == Board.scrambled(random.Random(5))


def test_from_values_checks_shape():
    """Boards need exactly 37 values in range."""
    with pytest.raises(BoardShapeError):
        Board.from_values([0] * 36)
    with pytest.raises(BoardShapeError):
        Board.from_values([0] * 38)
    with pytest.raises(ArrowRangeError):
        Board.from_values([0] * 36 + [6])


def test_parse():
    """Digit strings parse with or without separators."""
    digits = "0123450123450123450123450123450123450"
    board = Board.parse(digits)

    assert board.to_string() == digits
    assert board[position("A1")] == Arrow(1)
    assert board[position("G6")] == Arrow(0)
    assert Board.parse(",".join(digits)) == board

    with pytest.raises(BoardShapeError):
        Board.parse("01234x" + "0" * 31)
    with pytest.raises(ArrowRangeError):
        Board.parse("7" + "0" * 36)


def test_is_solved():
    """Only the all-up board is solved."""
    assert Board.solved().is_solved()
    assert not Board.uniform(3).is_solved()

    board = Board.solved()
    board.poke(position("E5"))
    assert not board.is_solved()


def test_at_outside_is_none():
    """Boards expose the grid's absence semantics."""
    board = Board.uniform(2)
    assert board.at(3, 3) == Arrow(2)
    assert board.at(6, 0) is None


def test_equality_and_diff():
    """Boards compare by value."""
    a = Board.parse("1" * 37)
    b = Board.uniform(1)
    assert a == b
    assert a.diff(b) == []

    b.poke(position("A0"))
    assert a != b
    assert [p.name for p in a.diff(b)] == ["A0", "A1", "B0", "B1"]

    with pytest.raises(TypeError):
        a.diff("1" * 37)


def test_scrambled_is_seeded():
    """Seeded scrambles are reproducible."""
    assert Board.scrambled(random.Random(1)) == Board.scrambled(random.Random(1))
    assert Board.scrambled(random.Random(1)) != Board.scrambled(random.Random(2))


def test_str_draws_hexagon():
    """str() draws the 13-line hexagon."""
    lines = str(Board.uniform(4)).split("\n")
    assert len(lines) == 13
    assert lines[0].strip() == "4"


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))

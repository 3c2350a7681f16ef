"""
Tests for debug image rendering

Usage:
    pytest tests/test_debug.py
"""

import random
import sys
from pathlib import Path

import pytest
from PIL import Image

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from arrow_puzzle import debug
from arrow_puzzle.debug import cell_center, image_size, render_board, save_debug_image
from arrow_puzzle.solver import Board, POSITIONS, position, solve_board


@pytest.fixture
def debug_dir(tmp_path, monkeypatch):
    path = tmp_path / "debug"
    monkeypatch.setattr(debug, "DEBUG_DIR", path)
    return path


def test_cells_fit_in_image():
    width, height = image_size()
    centres = [cell_center(p) for p in POSITIONS]

    assert len(set(centres)) == 37
    assert all(0 < cx < width and 0 < cy < height for cx, cy in centres)

    # top corner above the centre, bottom corner below
    assert cell_center(position("A0"))[1] < cell_center(position("D3"))[1] < cell_center(position("G6"))[1]


def test_render_board():
    board = Board.scrambled(random.Random(1))
    solution = solve_board(board)

    plain = render_board(board)
    annotated = render_board(board, solution)

    assert plain.size == image_size()
    assert annotated.mode == "RGB"
    assert plain.tobytes() != annotated.tobytes()


def test_save_debug_image(debug_dir):
    board = Board.uniform(3)
    path = save_debug_image(board, solve_board(board))

    assert path.parent == debug_dir
    assert path.name.startswith("debug_")
    with Image.open(path) as image:
        assert image.format == "PNG"
        assert image.size == image_size()


def test_save_to_explicit_path(tmp_path):
    path = save_debug_image(Board.solved(), path=tmp_path / "board.png")
    assert path == tmp_path / "board.png"
    assert path.exists()


def test_old_images_are_cleaned_up(debug_dir, monkeypatch):
    monkeypatch.setattr(debug, "MAX_DEBUG_IMAGES", 3)
    debug_dir.mkdir()

    for i in range(6):
        save_debug_image(Board.solved(), path=debug_dir / f"debug_{i:02d}.png")

    assert len(list(debug_dir.glob("debug_*.png"))) == 3


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))

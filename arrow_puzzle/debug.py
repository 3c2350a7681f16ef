"""
Debug Utilities

Render boards and their poke counts to annotated PNG images.
"""

import logging
import math
from datetime import datetime
from pathlib import Path
from typing import Optional, Tuple

from PIL import Image, ImageDraw, ImageFont

from .solver import Board, POSITIONS, Position, Solution

logger = logging.getLogger(__name__)

# Debug settings
DEBUG_DIR = Path("./debug")
MAX_DEBUG_IMAGES = 10

# Geometry (pixels)
CELL_RADIUS = 22
CELL_SPACING = 52
MARGIN = 16
HEADER_HEIGHT = 40

# One fill per rotation value; aligned arrows are green
ARROW_COLORS = ("#4CAF50", "#FFC107", "#FF9800", "#F44336", "#9C27B0", "#2196F3")
POKE_COLOR = "#d32f2f"


def cell_center(p: Position) -> Tuple[float, float]:
    """
    Pixel centre of a cell.

    x runs down-right and y down-left, so a cell's column depends on
    x - y and its height on x + y.
    """
    dx = CELL_SPACING * math.cos(math.radians(30))
    dy = CELL_SPACING * math.sin(math.radians(30))
    cx = MARGIN + CELL_RADIUS + (p.x - p.y + 3) * dx
    cy = HEADER_HEIGHT + MARGIN + CELL_RADIUS + (p.x + p.y) * dy
    return cx, cy


def image_size() -> Tuple[int, int]:
    """Width and height of a rendered board."""
    width, height = 0.0, 0.0
    for p in POSITIONS:
        cx, cy = cell_center(p)
        width = max(width, cx)
        height = max(height, cy)
    return (
        int(math.ceil(width + CELL_RADIUS + MARGIN)),
        int(math.ceil(height + CELL_RADIUS + MARGIN)),
    )


def render_board(board: Board, solution: Optional[Solution] = None) -> Image.Image:
    """
    Draw a board, optionally annotated with a solution.

    Annotations include:
    - One circle per cell, coloured by rotation value
    - A needle pointing in the arrow's direction
    - Poke counts in red beside each cell that needs poking
    - A summary line with the solution total

    Args:
        board: Board to draw
        solution: Solution whose poke counts to overlay (can be None)

    Returns:
        RGB image
    """
    image = Image.new("RGB", image_size(), "white")
    draw = ImageDraw.Draw(image)
    font = ImageFont.load_default()

    for p, arrow in board.arrows.enumerate():
        cx, cy = cell_center(p)
        draw.ellipse(
            [cx - CELL_RADIUS, cy - CELL_RADIUS, cx + CELL_RADIUS, cy + CELL_RADIUS],
            fill=ARROW_COLORS[arrow.value], outline="black"
        )

        # 0 points up, each step turns 60 degrees clockwise
        angle = math.radians(60 * arrow.value)
        tip = (cx + 0.8 * CELL_RADIUS * math.sin(angle), cy - 0.8 * CELL_RADIUS * math.cos(angle))
        draw.line([(cx, cy), tip], fill="black", width=3)

        if solution is not None:
            count = solution.poke_counts[p]
            if count:
                draw.text((cx + CELL_RADIUS * 0.4, cy - CELL_RADIUS), str(count), fill=POKE_COLOR, font=font)

    summary = f"Unaligned: {board.count_unaligned()}"
    if solution is not None:
        summary += (
            f", Pokes: {solution.total_pokes}, Framing: {solution.orientation}, "
            f"Time: {solution.metrics.computation_time_ms:.1f}ms"
        )
    draw.text((MARGIN, MARGIN), summary, fill="blue", font=font)

    return image


def save_debug_image(
    board: Board,
    solution: Optional[Solution] = None,
    path: Optional[Path] = None
) -> Path:
    """
    Save an annotated debug image of a board and its solution.

    Args:
        board: Board to draw
        solution: Solution to overlay (can be None)
        path: Output file path (timestamped file in DEBUG_DIR if omitted)

    Returns:
        Path the image was written to
    """
    if path is None:
        DEBUG_DIR.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")[:-3]
        path = DEBUG_DIR / f"debug_{timestamp}.png"

    render_board(board, solution).save(path, "PNG")
    logger.debug(f"Debug image saved: {path}")

    # Cleanup old debug images
    _cleanup_debug_images()
    return path


def _cleanup_debug_images() -> None:
    """Remove old debug images, keeping only the most recent MAX_DEBUG_IMAGES."""
    if not DEBUG_DIR.exists():
        return

    # Get all debug images sorted by modification time
    debug_files = sorted(
        DEBUG_DIR.glob("debug_*.png"),
        key=lambda p: p.stat().st_mtime,
        reverse=True
    )

    # Remove old files
    for old_file in debug_files[MAX_DEBUG_IMAGES:]:
        try:
            old_file.unlink()
        except OSError as e:
            logger.warning(f"Could not remove old debug image {old_file}: {e}")

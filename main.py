"""
Arrow Puzzle Solver - Entry Point

Solves a hexagonal arrow board and prints the pokes needed to align it.

The board is given as 37 digits (0-5) in canonical order: row A first,
left to right within each row (see arrow_puzzle.solver.hex).

Example:
    python main.py 0123450123450123450123450123450123450
    python main.py --file board.txt --strategy layered
    python main.py --random 42 --debug   # Deal a random board and save a debug image
"""

import sys
import random
import logging
import argparse
from pathlib import Path

from arrow_puzzle.solver import (
    Board,
    SolutionContext,
    create_strategy,
    get_strategy_info,
    get_strategy_names,
)
from arrow_puzzle.solver.arrow import ArrowRangeError
from arrow_puzzle.solver.board import BoardShapeError
from arrow_puzzle.settings import load_settings, save_settings
from arrow_puzzle.debug import save_debug_image


# Configure logging - output to both console and file
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%H:%M:%S",
    handlers=[
        logging.StreamHandler(),  # Console output
        logging.FileHandler("solver.log", mode='w', encoding='utf-8')  # File output
    ]
)
logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INCOMPLETE = 1
EXIT_BAD_BOARD = 2


def parse_args(argv=None):
    """Parse command line arguments."""
    strategies = "; ".join(f"{s['name']}: {s['description']}" for s in get_strategy_info())
    parser = argparse.ArgumentParser(
        description="Arrow Puzzle Solver - Pokes that align a hexagonal arrow board",
        epilog=f"Strategies - {strategies}"
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "board",
        nargs="?",
        help="37 digits (0-5) in canonical order"
    )
    source.add_argument(
        "--file", "-f",
        type=Path,
        help="Read the board digits from a text file"
    )
    source.add_argument(
        "--random", "-r",
        type=int,
        metavar="SEED",
        help="Deal a solvable random board from the given seed"
    )
    parser.add_argument(
        "--strategy", "-s",
        choices=get_strategy_names(),
        help="Solving strategy (default: saved setting)"
    )
    parser.add_argument(
        "--workers", "-w",
        type=int,
        help="Threads for orientation search, 0 = sequential (default: saved setting)"
    )
    parser.add_argument(
        "--debug", "-d",
        action="store_true",
        help="Enable debug logging and save an annotated board image"
    )
    parser.add_argument(
        "--save-settings",
        action="store_true",
        help="Remember --strategy, --workers and --debug in config.json"
    )
    return parser.parse_args(argv)


def load_board(args) -> Board:
    """
    Build the board selected on the command line.

    Raises:
        BoardShapeError: If the digits do not describe 37 cells
        ArrowRangeError: If a digit is outside 0-5
        OSError: If the board file cannot be read
    """
    if args.random is not None:
        board = Board.scrambled(random.Random(args.random))
        logger.info(f"Dealt board {board.to_string()} from seed {args.random}")
        return board
    if args.file is not None:
        return Board.parse(args.file.read_text(encoding='utf-8'))
    return Board.parse(args.board)


def main(argv=None) -> int:
    """Solve one board and print the result."""
    args = parse_args(argv)

    # CLI flags override saved settings
    settings = load_settings()
    if args.strategy:
        settings["strategy_name"] = args.strategy
    if args.workers is not None:
        settings["max_workers"] = args.workers
    if args.debug:
        settings["debug_enabled"] = True
    if args.save_settings:
        save_settings(settings)

    debug_mode = settings["debug_enabled"]
    if debug_mode:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        board = load_board(args)
    except (BoardShapeError, ArrowRangeError, OSError) as e:
        logger.error(f"Invalid board: {e}")
        return EXIT_BAD_BOARD

    strategy_name = settings["strategy_name"]
    kwargs = {"max_workers": settings["max_workers"]} if strategy_name == "orientation_search" else {}
    try:
        strategy = create_strategy(strategy_name, **kwargs)
    except ValueError as e:
        logger.error(str(e))
        return EXIT_BAD_BOARD

    print(board)
    print()

    solution = strategy.solve(SolutionContext(board=board))
    print(solution.describe())

    if debug_mode:
        path = save_debug_image(board, solution)
        logger.info(f"Debug image saved: {path}")

    if not solution.is_complete:
        logger.error("Board cannot be aligned; it was probably misread")
        return EXIT_INCOMPLETE
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())

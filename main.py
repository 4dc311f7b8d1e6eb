"""Generate a random Sudoku puzzle, print it, then print its solution."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from puzzle import DEFAULT_REMOVALS, SudokuPuzzle
from solver import SudokuSolver
from utils import DEFAULT_CELL_SIZE, render_board_image, render_text_board, save_board_image

log = logging.getLogger(__name__)

EXIT_SOLVED = 0
EXIT_UNSOLVED = 1


def run(
    seed: Optional[int] = None,
    removals: int = DEFAULT_REMOVALS,
    max_backtracks: Optional[int] = None,
    save_image: Optional[str] = None,
    image_width: Optional[int] = None,
) -> int:
    solver = SudokuSolver(max_backtracks=max_backtracks)
    sudoku = SudokuPuzzle(removals=removals, seed=seed, solver=solver)
    puzzle = sudoku.puzzle

    print("ORIGINAL BOARD")
    print(render_text_board(puzzle))
    print()

    solved = sudoku.solve()
    if solved is None:
        log.warning("Solver stopped without a solution (status: %s)", solver.last_status)
        print(f"NO SOLUTION FOUND ({solver.last_status})")
        return EXIT_UNSOLVED

    print("SOLVED BOARD")
    print(render_text_board(solved))

    if save_image:
        image = render_board_image(solved, givens=puzzle, cell_size=DEFAULT_CELL_SIZE, width=image_width)
        target = save_board_image(save_image, image)
        log.info("Saved solved board image to %s", target)
    return EXIT_SOLVED


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Random Sudoku generator and backtracking solver")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the random generator (default: fresh entropy)")
    parser.add_argument(
        "--removals",
        type=int,
        default=DEFAULT_REMOVALS,
        help=f"Random cell draws cleared from the solution (default: {DEFAULT_REMOVALS})",
    )
    parser.add_argument(
        "--max-backtracks",
        type=int,
        default=None,
        help="Give up solving after this many placements (default: unlimited)",
    )
    parser.add_argument("--save-image", type=str, default=None, help="Write the solved board as an image to this path")
    parser.add_argument("--image-width", type=int, default=None, help="Resize the saved image to this width in pixels")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)
    if args.removals < 0:
        parser.error("--removals must be non-negative")
    if args.max_backtracks is not None and args.max_backtracks < 0:
        parser.error("--max-backtracks must be non-negative")
    if args.image_width is not None and args.image_width <= 0:
        parser.error("--image-width must be positive")
    return args


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return run(
        seed=args.seed,
        removals=args.removals,
        max_backtracks=args.max_backtracks,
        save_image=args.save_image,
        image_width=args.image_width,
    )


if __name__ == "__main__":
    sys.exit(main())

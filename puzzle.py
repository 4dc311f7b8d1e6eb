"""Puzzle construction: random full solution plus cell carving."""
from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

import numpy as np

from grid import EMPTY, GRID_SIZE, Cell, Grid, copy_grid, count_empty
from solver import SudokuSolver

log = logging.getLogger(__name__)

# Random (row, col) draws cleared from the solution. Draws repeat, so 75 draws
# clear about 49 distinct cells on average.
DEFAULT_REMOVALS = 75


def carve(
    solution: Sequence[Sequence[int]],
    rng: np.random.Generator,
    removals: int = DEFAULT_REMOVALS,
) -> Tuple[Grid, List[Cell]]:
    """Zero ``removals`` uniformly drawn cells of a copy of ``solution``.

    Positions are drawn with replacement, so the number of distinct blanks is
    at most ``removals``. Returns the puzzle and the drawn positions in order.
    No check is made that the puzzle keeps a unique solution.
    """
    if removals < 0:
        raise ValueError(f"removals must be non-negative, got {removals}")
    puzzle = copy_grid(solution)
    targets: List[Cell] = []
    for _ in range(removals):
        row = int(rng.integers(0, GRID_SIZE))
        col = int(rng.integers(0, GRID_SIZE))
        puzzle[row][col] = EMPTY
        targets.append((row, col))
    return puzzle, targets


class SudokuPuzzle:
    """A generated board: the hidden full solution and the carved puzzle."""

    def __init__(
        self,
        removals: int = DEFAULT_REMOVALS,
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None,
        solver: Optional[SudokuSolver] = None,
    ) -> None:
        if rng is not None and seed is not None:
            raise ValueError("Pass either rng or seed, not both")
        if removals < 0:
            raise ValueError(f"removals must be non-negative, got {removals}")
        self.removals = removals
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.solver = solver if solver is not None else SudokuSolver()
        self._solution = self.solver.fill_board(self.rng)
        self._puzzle, self._targets = carve(self._solution, self.rng, removals)
        log.debug(
            "Carved %d draws into %d blanks (%d clues left)",
            removals,
            count_empty(self._puzzle),
            self.clue_count,
        )

    @property
    def puzzle(self) -> Grid:
        return copy_grid(self._puzzle)

    @property
    def solution(self) -> Grid:
        return copy_grid(self._solution)

    @property
    def removed_cells(self) -> List[Cell]:
        return list(self._targets)

    @property
    def clue_count(self) -> int:
        return GRID_SIZE * GRID_SIZE - count_empty(self._puzzle)

    def solve(self) -> Optional[Grid]:
        """Solve the held puzzle; None means the search found no completion."""
        return self.solver.solve_board(self._puzzle)

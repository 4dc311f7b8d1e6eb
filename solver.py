"""Backtracking Sudoku engine shared by board generation and solving."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, MutableSequence, Optional, Sequence

import numpy as np

from grid import BOX_SIZE, CELL_COUNT, EMPTY, GRID_SIZE, Grid, box_index, box_origin, cell_of, empty_grid, validate_grid

log = logging.getLogger(__name__)

DIGITS = tuple(range(1, GRID_SIZE + 1))


@dataclass(frozen=True)
class SearchPolicy:
    """Knobs selecting how the recursive search walks the board.

    shuffle: try all nine digits in random order instead of the ascending
        candidate list.
    respect_clues: skip pre-filled cells instead of overwriting them.
    """

    shuffle: bool
    respect_clues: bool


GENERATE = SearchPolicy(shuffle=True, respect_clues=False)
SOLVE = SearchPolicy(shuffle=False, respect_clues=True)


def is_valid(board: Sequence[Sequence[int]], row: int, col: int, value: int) -> bool:
    for index in range(GRID_SIZE):
        if board[row][index] == value or board[index][col] == value:
            return False
    start_row, start_col = box_origin(box_index(row, col))
    for r in range(start_row, start_row + BOX_SIZE):
        for c in range(start_col, start_col + BOX_SIZE):
            if board[r][c] == value:
                return False
    return True


def candidates(board: Sequence[Sequence[int]], row: int, col: int) -> List[int]:
    """Digits that can legally go in (row, col), in ascending order."""
    return [value for value in DIGITS if is_valid(board, row, col, value)]


def shuffle_values(values: MutableSequence[int], rng: np.random.Generator) -> MutableSequence[int]:
    """Shuffle in place: position i swaps with a uniform pick from [0, i]."""
    for i in range(len(values)):
        index = int(rng.integers(0, i + 1))
        values[index], values[i] = values[i], values[index]
    return values


class SudokuSolver:
    """Recursive depth-first search over cells 0..80 driven by a SearchPolicy."""

    def __init__(self, max_backtracks: Optional[int] = None) -> None:
        if max_backtracks is not None and max_backtracks < 0:
            raise ValueError("max_backtracks must be non-negative")
        self.max_backtracks = max_backtracks
        self._attempts = 0
        self._limit: Optional[int] = None
        self._cutoff = False
        self.last_status: str = "idle"

    def _reset_state(self, limit: Optional[int] = None) -> None:
        self._attempts = 0
        self._limit = limit
        self._cutoff = False
        self.last_status = "idle"

    @property
    def attempts(self) -> int:
        """Digits placed during the most recent search."""
        return self._attempts

    def fill_board(self, rng: np.random.Generator) -> Grid:
        """Build a complete random solution starting from an empty board."""
        self._reset_state()
        board = empty_grid()
        if not self._search(board, 0, GENERATE, rng):
            # An empty board always has a completion.
            raise RuntimeError("Generation search exhausted an empty board")
        self.last_status = "solved"
        log.debug("Generated full board after %d placements", self._attempts)
        return board

    def solve_board(
        self,
        board: Sequence[Sequence[int]],
        policy: SearchPolicy = SOLVE,
        rng: Optional[np.random.Generator] = None,
    ) -> Optional[Grid]:
        """Return a completed copy of ``board`` or None when no completion exists.

        ``last_status`` tells the outcomes apart: "solved", "invalid" (clues
        already conflict), "unsolved" (search exhausted) or "cutoff" (the
        max_backtracks budget ran out first). Malformed boards raise
        InvalidGridError and a policy that may overwrite clues raises
        ValueError, both before any search.
        """
        if not policy.respect_clues:
            raise ValueError("Solving must keep the given clues; use fill_board for a fresh board")
        working = validate_grid(board)
        self._reset_state(self.max_backtracks)
        if not self._is_consistent(working):
            self.last_status = "invalid"
            log.debug("Rejected board with conflicting clues")
            return None
        if self._search(working, 0, policy, rng):
            self.last_status = "solved"
            log.debug("Solved board after %d placements", self._attempts)
            return working
        self.last_status = "cutoff" if self._cutoff else "unsolved"
        log.debug("No solution found (%s) after %d placements", self.last_status, self._attempts)
        return None

    def _is_consistent(self, board: Grid) -> bool:
        for row in range(GRID_SIZE):
            for col in range(GRID_SIZE):
                value = board[row][col]
                if value == EMPTY:
                    continue
                board[row][col] = EMPTY
                legal = is_valid(board, row, col, value)
                board[row][col] = value
                if not legal:
                    return False
        return True

    def _budget_spent(self) -> bool:
        return self._limit is not None and self._attempts >= self._limit

    def _search(
        self,
        board: Grid,
        index: int,
        policy: SearchPolicy,
        rng: Optional[np.random.Generator],
    ) -> bool:
        if index == CELL_COUNT:
            return True
        row, col = cell_of(index)
        if policy.respect_clues and board[row][col] != EMPTY:
            return self._search(board, index + 1, policy, rng)

        board[row][col] = EMPTY
        if policy.shuffle:
            if rng is None:
                raise ValueError("A shuffling search needs a random generator")
            values = shuffle_values(list(DIGITS), rng)
        else:
            values = candidates(board, row, col)

        for value in values:
            if self._budget_spent():
                self._cutoff = True
                board[row][col] = EMPTY
                return False
            if policy.shuffle and not is_valid(board, row, col, value):
                continue
            board[row][col] = value
            self._attempts += 1
            if self._search(board, index + 1, policy, rng):
                return True
            board[row][col] = EMPTY
        board[row][col] = EMPTY
        return False


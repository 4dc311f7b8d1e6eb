"""Grid container helpers: construction, copying, validation and box math."""
from __future__ import annotations

import numbers
from typing import Iterator, List, Sequence, Tuple

GRID_SIZE = 9
BOX_SIZE = 3
CELL_COUNT = GRID_SIZE * GRID_SIZE
EMPTY = 0

Grid = List[List[int]]
Cell = Tuple[int, int]


class InvalidGridError(ValueError):
    """Raised when a board is not a 9x9 grid of integers in 0..9."""


def empty_grid() -> Grid:
    return [[EMPTY] * GRID_SIZE for _ in range(GRID_SIZE)]


def copy_grid(grid: Sequence[Sequence[int]]) -> Grid:
    return [list(row) for row in grid]


def cell_of(index: int) -> Cell:
    """Map a linear index 0..80 to its (row, col) coordinate."""
    return divmod(index, GRID_SIZE)


def box_index(row: int, col: int) -> int:
    return (row // BOX_SIZE) * BOX_SIZE + col // BOX_SIZE


def box_origin(box: int) -> Cell:
    """Top-left (row, col) of a 3x3 box numbered 0..8 left to right, top to bottom."""
    return (box // BOX_SIZE) * BOX_SIZE, (box % BOX_SIZE) * BOX_SIZE


def box_cells(box: int) -> Iterator[Cell]:
    start_row, start_col = box_origin(box)
    for r in range(start_row, start_row + BOX_SIZE):
        for c in range(start_col, start_col + BOX_SIZE):
            yield r, c


def _is_row_like(obj: object) -> bool:
    return hasattr(obj, "__len__") and hasattr(obj, "__getitem__") and not isinstance(obj, (str, bytes))


def validate_grid(grid: Sequence[Sequence[int]]) -> Grid:
    """Check shape and cell values, returning a private copy of the board.

    Booleans are rejected even though they are ints; a board of True/False
    is almost certainly a mask passed by mistake.
    """
    if not _is_row_like(grid) or len(grid) != GRID_SIZE:
        raise InvalidGridError(f"Expected a sequence of {GRID_SIZE} rows")
    checked: Grid = []
    for row_idx, row in enumerate(grid):
        if not _is_row_like(row) or len(row) != GRID_SIZE:
            raise InvalidGridError(f"Row {row_idx} must hold {GRID_SIZE} cells")
        checked_row: List[int] = []
        for col_idx, value in enumerate(row):
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise InvalidGridError(f"Cell ({row_idx}, {col_idx}) is not an integer: {value!r}")
            if not EMPTY <= value <= GRID_SIZE:
                raise InvalidGridError(f"Cell ({row_idx}, {col_idx}) out of range 0..9: {value}")
            checked_row.append(int(value))
        checked.append(checked_row)
    return checked


def count_empty(grid: Sequence[Sequence[int]]) -> int:
    return sum(1 for row in grid for value in row if value == EMPTY)


def is_complete(grid: Sequence[Sequence[int]]) -> bool:
    """True when every row, column and box holds each digit 1..9 exactly once."""
    digits = set(range(1, GRID_SIZE + 1))
    for row in range(GRID_SIZE):
        if set(grid[row]) != digits:
            return False
    for col in range(GRID_SIZE):
        if {grid[row][col] for row in range(GRID_SIZE)} != digits:
            return False
    for box in range(GRID_SIZE):
        if {grid[r][c] for r, c in box_cells(box)} != digits:
            return False
    return True

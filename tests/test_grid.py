import numpy as np
import pytest

from grid import (
    InvalidGridError,
    box_cells,
    box_index,
    box_origin,
    cell_of,
    copy_grid,
    count_empty,
    empty_grid,
    is_complete,
    validate_grid,
)


def test_empty_grid_rows_are_independent():
    grid = empty_grid()
    grid[0][0] = 4
    assert grid[1][0] == 0
    assert count_empty(grid) == 80


def test_copy_grid_is_deep(solution):
    copied = copy_grid(solution)
    copied[4][4] = 0
    assert solution[4][4] == 5


def test_linear_index_wraps_rows():
    assert cell_of(0) == (0, 0)
    assert cell_of(8) == (0, 8)
    assert cell_of(9) == (1, 0)
    assert cell_of(80) == (8, 8)


@pytest.mark.parametrize(
    "row, col, box, origin",
    [(0, 0, 0, (0, 0)), (1, 7, 2, (0, 6)), (4, 4, 4, (3, 3)), (8, 2, 6, (6, 0)), (6, 8, 8, (6, 6))],
)
def test_box_math(row, col, box, origin):
    assert box_index(row, col) == box
    assert box_origin(box) == origin
    assert (row, col) in set(box_cells(box))


def test_is_complete(solution, puzzle):
    assert is_complete(solution)
    assert not is_complete(puzzle)
    solution[0][0], solution[0][1] = solution[0][1], solution[0][0]
    assert not is_complete(solution)


def test_validate_grid_accepts_numpy_rows(puzzle):
    checked = validate_grid(np.array(puzzle))
    assert checked == puzzle
    assert all(type(value) is int for row in checked for value in row)


@pytest.mark.parametrize(
    "board",
    [
        [[0] * 9 for _ in range(8)],
        [[0] * 8 for _ in range(9)],
        [[0] * 9 for _ in range(8)] + [[0] * 8 + [10]],
        [[0] * 9 for _ in range(8)] + [[0] * 8 + [-1]],
        [[0] * 9 for _ in range(8)] + [[0] * 8 + [1.5]],
        [[0] * 9 for _ in range(8)] + [[0] * 8 + [True]],
        ["123456789"] * 9,
        "0" * 81,
    ],
)
def test_validate_grid_rejects_malformed(board):
    with pytest.raises(InvalidGridError):
        validate_grid(board)


def test_invalid_grid_error_is_value_error():
    assert issubclass(InvalidGridError, ValueError)

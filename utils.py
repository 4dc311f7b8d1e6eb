"""Rendering helpers: ASCII boards for the console and drawn board images."""
from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence, Union

import cv2
import imutils
import numpy as np
from matplotlib import colormaps

from grid import BOX_SIZE, EMPTY, GRID_SIZE

DEFAULT_CELL_SIZE = 60
HORIZONTAL_BAR = "+-------+-------+-------+"
GIVEN_COLOR = (0, 0, 0)
THIN_LINE_COLOR = (170, 170, 170)
HEAVY_LINE_COLOR = (0, 0, 0)

# Soft-green palette for filled-in digits, stored BGR for OpenCV
_DIGIT_COLORS = (colormaps["Greens"](np.linspace(0.55, 0.95, 10))[:, 2::-1] * 255).astype("uint8")


def render_text_board(board: Sequence[Sequence[int]]) -> str:
    """Format a board with box separators; blanks render as spaces."""
    lines: List[str] = [HORIZONTAL_BAR]
    for row in range(GRID_SIZE):
        parts = ["|"]
        for col in range(GRID_SIZE):
            value = board[row][col]
            parts.append(" " if value == EMPTY else str(value))
            if col % BOX_SIZE == BOX_SIZE - 1:
                parts.append("|")
        lines.append(" ".join(parts))
        if row % BOX_SIZE == BOX_SIZE - 1:
            lines.append(HORIZONTAL_BAR)
    return "\n".join(lines)


def _draw_grid_lines(canvas: np.ndarray, cell_size: int) -> None:
    extent = cell_size * GRID_SIZE
    for i in range(GRID_SIZE + 1):
        heavy = i % BOX_SIZE == 0
        color = HEAVY_LINE_COLOR if heavy else THIN_LINE_COLOR
        thickness = 3 if heavy else 1
        offset = min(i * cell_size, extent - 1)
        cv2.line(canvas, (offset, 0), (offset, extent - 1), color, thickness)
        cv2.line(canvas, (0, offset), (extent - 1, offset), color, thickness)


def render_board_image(
    board: Sequence[Sequence[int]],
    givens: Optional[Sequence[Sequence[int]]] = None,
    cell_size: int = DEFAULT_CELL_SIZE,
    width: Optional[int] = None,
) -> np.ndarray:
    """Draw ``board`` on a white BGR canvas.

    Cells that are non-zero in ``givens`` are drawn as clues in black; every
    other digit uses the green palette. Without ``givens`` all digits count
    as clues. ``width`` rescales the finished image, keeping the aspect ratio.
    """
    if cell_size < 10:
        raise ValueError(f"cell_size must be at least 10 pixels, got {cell_size}")
    if width is not None and width <= 0:
        raise ValueError(f"width must be positive, got {width}")
    extent = cell_size * GRID_SIZE
    canvas = np.full((extent, extent, 3), 255, dtype="uint8")
    _draw_grid_lines(canvas, cell_size)

    scale = cell_size / 60.0
    for row in range(GRID_SIZE):
        for col in range(GRID_SIZE):
            value = board[row][col]
            if value == EMPTY:
                continue
            is_given = givens is None or givens[row][col] != EMPTY
            color = GIVEN_COLOR if is_given else tuple(int(channel) for channel in _DIGIT_COLORS[value])
            text = str(value)
            text_size, _ = cv2.getTextSize(text, cv2.FONT_HERSHEY_SIMPLEX, scale, 2)
            text_x = int(col * cell_size + (cell_size - text_size[0]) / 2)
            text_y = int(row * cell_size + (cell_size + text_size[1]) / 2)
            cv2.putText(
                canvas,
                text,
                (text_x, text_y),
                cv2.FONT_HERSHEY_SIMPLEX,
                scale,
                color,
                2,
                cv2.LINE_AA,
            )

    if width is not None and width != extent:
        canvas = imutils.resize(canvas, width=width)
    return canvas


def save_board_image(path: Union[str, Path], image: np.ndarray) -> Path:
    target = Path(path).expanduser()
    target.parent.mkdir(parents=True, exist_ok=True)
    try:
        written = cv2.imwrite(str(target), image)
    except cv2.error as exc:
        raise RuntimeError(f"Unable to write image to {target}: {exc}") from exc
    if not written:
        raise RuntimeError(f"Unable to write image to {target}")
    return target

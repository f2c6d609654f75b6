"""Pixel <-> board-intersection conversion. Pure functions, no state."""

from __future__ import annotations

import math

GRID_SIZE = 30  # px between adjacent lines
BOARD_MARGIN = 30  # px from the canvas edge to the first line
STONE_RADIUS = 14


def cell_to_pixel(
    row: int,
    col: int,
    *,
    grid: int = GRID_SIZE,
    margin: int = BOARD_MARGIN,
) -> tuple[int, int]:
    """Centre of the intersection ``(row, col)`` as ``(x, y)``."""
    return margin + col * grid, margin + row * grid


def pixel_to_cell(
    x: float,
    y: float,
    *,
    grid: int = GRID_SIZE,
    margin: int = BOARD_MARGIN,
) -> tuple[int, int]:
    """Nearest intersection to the pixel ``(x, y)`` as ``(row, col)``.

    Halfway pixels round up. The result may lie outside the board; check
    with :func:`is_on_board`.
    """
    return _round_half_up((y - margin) / grid), _round_half_up((x - margin) / grid)


def is_on_board(row: int, col: int, size: int) -> bool:
    return 0 <= row < size and 0 <= col < size


def board_extent(
    size: int,
    *,
    grid: int = GRID_SIZE,
    margin: int = BOARD_MARGIN,
) -> int:
    """Width (= height) in px of a canvas holding a *size* x *size* grid."""
    return 2 * margin + max(size - 1, 0) * grid


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)

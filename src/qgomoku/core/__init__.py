"""Core domain layer: cells, board, coordinates. No Qt dependencies.

Quick start::

    from qgomoku.core import Board, Tier

    board = Board(18)
    board.set_tier(0, 0, Tier.P90)
    print(board.get(0, 0))
"""

from qgomoku.core.board import Board
from qgomoku.core.cell import EMPTY, Cell, ClassicalCell, EmptyCell, TierCell, visual_of
from qgomoku.core.coords import (
    BOARD_MARGIN,
    GRID_SIZE,
    STONE_RADIUS,
    board_extent,
    cell_to_pixel,
    is_on_board,
    pixel_to_cell,
)
from qgomoku.core.enums import Player, StoneVisual, Tier
from qgomoku.core.errors import (
    CellOccupied,
    GameError,
    MoveRejected,
    OutOfBounds,
    RequestFailed,
    StaleObservationResponse,
)

__all__ = [
    # Enums
    "Player",
    "StoneVisual",
    "Tier",
    # Cells
    "EMPTY",
    "Cell",
    "ClassicalCell",
    "EmptyCell",
    "TierCell",
    "visual_of",
    # Board / geometry
    "BOARD_MARGIN",
    "Board",
    "GRID_SIZE",
    "STONE_RADIUS",
    "board_extent",
    "cell_to_pixel",
    "is_on_board",
    "pixel_to_cell",
    # Errors
    "CellOccupied",
    "GameError",
    "MoveRejected",
    "OutOfBounds",
    "RequestFailed",
    "StaleObservationResponse",
]

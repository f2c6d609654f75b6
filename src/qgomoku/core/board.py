"""Board - the N x N grid of cell values."""

from __future__ import annotations

from collections.abc import Callable, Iterator

from qgomoku.core.cell import EMPTY, Cell, ClassicalCell, EmptyCell, TierCell
from qgomoku.core.enums import Player, Tier
from qgomoku.core.errors import CellOccupied, OutOfBounds

CellChangedCallback = Callable[[int, int, Cell], None]  # row, col, new value


class Board:
    """Mutable row-major grid indexed by ``(row, col)``.

    Cell values are immutable, so a copy of the row lists is a full deep
    copy of the board.
    """

    __slots__ = ("_size", "_grid", "on_cell_changed")

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError(f"Board size must be positive, got {size}")
        self._size = size
        self._grid: list[list[Cell]] = [[EMPTY] * size for _ in range(size)]
        self.on_cell_changed: list[CellChangedCallback] = []

    @property
    def size(self) -> int:
        return self._size

    # -- Element access -----------------------------------------------------

    def get(self, row: int, col: int) -> Cell:
        self._check(row, col)
        return self._grid[row][col]

    def __getitem__(self, pos: tuple[int, int]) -> Cell:
        return self.get(*pos)

    def is_empty(self, row: int, col: int) -> bool:
        return isinstance(self.get(row, col), EmptyCell)

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self._size and 0 <= col < self._size

    # -- Mutation -----------------------------------------------------------

    def set_tier(self, row: int, col: int, tier: Tier) -> None:
        """Place an unobserved stone. The cell must be empty."""
        if not self.is_empty(row, col):
            raise CellOccupied(row, col)
        cell = TierCell(Tier(tier))
        self._grid[row][col] = cell
        self._emit(row, col, cell)

    def set_classical(self, row: int, col: int, player: Player) -> None:
        """Paint a collapsed value, overwriting whatever the cell holds."""
        self._check(row, col)
        cell = ClassicalCell(Player(player))
        self._grid[row][col] = cell
        self._emit(row, col, cell)

    def snapshot(self) -> Board:
        """Independent copy of the grid. Listeners are not copied."""
        b = Board(self._size)
        b._grid = [row.copy() for row in self._grid]
        return b

    def replace_with(self, board: Board) -> None:
        """Swap in the contents of *board* wholesale. No callbacks fire."""
        if board.size != self._size:
            raise ValueError(
                f"Cannot replace a {self._size}x{self._size} board "
                f"with a {board.size}x{board.size} one"
            )
        self._grid = [row.copy() for row in board._grid]

    def clear(self) -> None:
        self._grid = [[EMPTY] * self._size for _ in range(self._size)]

    # -- Query helpers ------------------------------------------------------

    def stones(self) -> Iterator[tuple[int, int, Cell]]:
        """Yield ``(row, col, cell)`` for every non-empty cell."""
        for r, row in enumerate(self._grid):
            for c, cell in enumerate(row):
                if not isinstance(cell, EmptyCell):
                    yield r, c, cell

    def stone_count(self) -> int:
        return sum(1 for _ in self.stones())

    def rows(self) -> list[tuple[Cell, ...]]:
        """Read-only view of the grid."""
        return [tuple(row) for row in self._grid]

    # -- Internal -----------------------------------------------------------

    def _check(self, row: int, col: int) -> None:
        if not self.in_bounds(row, col):
            raise OutOfBounds(row, col, self._size)

    def _emit(self, row: int, col: int, cell: Cell) -> None:
        for cb in self.on_cell_changed:
            cb(row, col, cell)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._size == other._size and self._grid == other._grid

    def __repr__(self) -> str:
        return "\n".join(
            " ".join(f"{str(cell):>2}" for cell in row) for row in self._grid
        )

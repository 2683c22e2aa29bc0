from __future__ import annotations

from typing import Sequence

import numpy as np

from .pieces import Piece, TetrominoType


MAX_CELL_VALUE = len(TetrominoType)


class GameGrid:
    """Fixed rows x cols board of cell values.

    The grid uses 0 for empty cells and the tetromino id (1..7) for locked
    cells. Row 0 is the top of the visible field.
    """

    def __init__(self, rows: int, cols: int) -> None:
        self.rows = int(rows)
        self.cols = int(cols)
        self.grid = np.zeros((self.rows, self.cols), dtype=np.int8)

    @property
    def shape(self) -> tuple[int, int]:
        return self.rows, self.cols

    def reset(self) -> None:
        self.grid.fill(0)

    def is_inside(self, col: int, row: int) -> bool:
        return 0 <= col < self.cols and 0 <= row < self.rows

    def is_occupied(self, row: int, col: int) -> bool:
        return bool(self.grid[row, col] != 0)

    def merge(self, piece: Piece) -> None:
        """Write the piece's color into every covered cell at row >= 0."""
        for col, row in piece.cells():
            if row < 0:
                continue
            assert self.is_inside(col, row), f"merge outside grid at col={col} row={row}"
            self.grid[row, col] = piece.color

    def full_rows(self) -> np.ndarray:
        return np.where(np.all(self.grid != 0, axis=1))[0]

    def clear_full_rows(self) -> int:
        """Remove full rows, add empty rows at the top, return how many went."""
        full_rows = self.full_rows()
        if full_rows.size == 0:
            return 0
        num = int(full_rows.size)
        kept = np.delete(self.grid, full_rows, axis=0)
        new_rows = np.zeros((num, self.cols), dtype=np.int8)
        self.grid = np.vstack((new_rows, kept))
        assert self.grid.shape == (self.rows, self.cols)
        return num

    def load(self, rows: Sequence[Sequence[int]]) -> None:
        values = np.asarray(rows, dtype=np.int64)
        if values.shape != (self.rows, self.cols):
            raise ValueError(f"expected a {self.rows}x{self.cols} matrix, got {values.shape}")
        if values.min() < 0 or values.max() > MAX_CELL_VALUE:
            raise ValueError(f"cell values must lie in 0..{MAX_CELL_VALUE}")
        self.grid = values.astype(np.int8)

    def filled_cells(self) -> int:
        return int(np.count_nonzero(self.grid))

    def get_max_height(self) -> int:
        # y=0 is top; find first non-empty from top
        non_empty_rows = np.where(np.any(self.grid != 0, axis=1))[0]
        if non_empty_rows.size == 0:
            return 0
        return self.rows - int(non_empty_rows[0])

    def clone_state(self) -> np.ndarray:
        return self.grid.copy()

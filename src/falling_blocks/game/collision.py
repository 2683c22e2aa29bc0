from __future__ import annotations

from .grid import GameGrid
from .pieces import Piece


def collides(piece: Piece, board: GameGrid) -> bool:
    """True if the piece leaves the side walls or floor, or overlaps a locked cell.

    Cells above the top edge (row < 0) only collide with the walls.
    """
    for col, row in piece.cells():
        if col < 0 or col >= board.cols or row >= board.rows:
            return True
        if row >= 0 and board.is_occupied(row, col):
            return True
    return False

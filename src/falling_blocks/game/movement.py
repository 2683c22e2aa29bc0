from __future__ import annotations

from .collision import collides
from .grid import GameGrid
from .pieces import Piece


def _shift(piece: Piece, board: GameGrid, dx: int, dy: int) -> bool:
    piece.x += dx
    piece.y += dy
    if collides(piece, board):
        piece.x -= dx
        piece.y -= dy
        return False
    return True


def move(piece: Piece, board: GameGrid, direction: int) -> bool:
    """Shift one column left (-1) or right (+1); False and unchanged when blocked."""
    if direction not in (-1, 1):
        raise ValueError(f"direction must be -1 or +1, got {direction!r}")
    return _shift(piece, board, direction, 0)


def step_down(piece: Piece, board: GameGrid) -> bool:
    return _shift(piece, board, 0, 1)


def landing_y(piece: Piece, board: GameGrid) -> int:
    """Row the piece would rest on if dropped straight down."""
    probe = piece.copy()
    while step_down(probe, board):
        pass
    return probe.y

from __future__ import annotations

from typing import Iterator

import numpy as np

from .collision import collides
from .grid import GameGrid
from .pieces import Piece, Shape


def rotate_shape(shape: Shape) -> Shape:
    """Rotate a shape matrix 90 degrees clockwise (transpose, then reverse rows)."""
    return np.ascontiguousarray(shape.T[:, ::-1])


def kick_offsets(width: int) -> Iterator[int]:
    """Horizontal offsets tried after a blocked rotation: 0, +1, -1, +2, -2, ..."""
    yield 0
    for magnitude in range(1, width + 1):
        yield magnitude
        yield -magnitude


def rotate(piece: Piece, board: GameGrid) -> bool:
    """Rotate `piece` clockwise in place, kicking sideways if needed.

    Shape and position change together or not at all. Returns whether the
    rotation was applied.
    """
    rotated = rotate_shape(piece.shape)
    trial = Piece(rotated, piece.x, piece.y, piece.color)
    for offset in kick_offsets(trial.width):
        trial.x = piece.x + offset
        if not collides(trial, board):
            piece.shape = rotated
            piece.x = trial.x
            return True
    return False

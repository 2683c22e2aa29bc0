import itertools

import numpy as np

from falling_blocks.game import GameGrid, Piece, TetrominoType

KIND_ORDER = list(TetrominoType)


def index_of(kind):
    return KIND_ORDER.index(kind)


def sequence(*kinds):
    """Index source that cycles through the given tetromino kinds."""
    cycle = itertools.cycle([index_of(k) for k in kinds])
    return lambda: next(cycle)


def board_with_rows(rows=20, cols=10, filled=None):
    """Board whose rows listed in `filled` ({row: values}) are preset."""
    board = GameGrid(rows, cols)
    for row, values in (filled or {}).items():
        board.grid[row, :] = values
    return board


def piece(shape, x=0, y=0, color=None):
    arr = np.array(shape, dtype=np.int8)
    if color is None:
        color = int(arr.max())
    return Piece(arr, x, y, color)

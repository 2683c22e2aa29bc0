from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Callable, List, Optional, Tuple

import numpy as np


class TetrominoType(IntEnum):
    I = 1
    J = 2
    L = 3
    O = 4
    S = 5
    T = 6
    Z = 7


Shape = np.ndarray


TEMPLATES = {
    TetrominoType.I: np.array([[1, 1, 1, 1]], dtype=np.int8),
    TetrominoType.J: np.array([[2, 0, 0], [2, 2, 2]], dtype=np.int8),
    TetrominoType.L: np.array([[0, 0, 3], [3, 3, 3]], dtype=np.int8),
    TetrominoType.O: np.array([[4, 4], [4, 4]], dtype=np.int8),
    TetrominoType.S: np.array([[0, 5, 5], [5, 5, 0]], dtype=np.int8),
    TetrominoType.T: np.array([[0, 6, 0], [6, 6, 6]], dtype=np.int8),
    TetrominoType.Z: np.array([[7, 7, 0], [0, 7, 7]], dtype=np.int8),
}

for _kind, _template in TEMPLATES.items():
    assert set(np.unique(_template).tolist()) <= {0, int(_kind)}, f"template {_kind.name} mixes colors"
    _template.setflags(write=False)


def template(kind: TetrominoType) -> Shape:
    """Return a writable copy of the template for `kind`."""
    return TEMPLATES[TetrominoType(kind)].copy()


@dataclass(eq=False)
class Piece:
    shape: Shape
    x: int
    y: int
    color: int

    @property
    def kind(self) -> TetrominoType:
        return TetrominoType(self.color)

    @property
    def width(self) -> int:
        return int(self.shape.shape[1])

    @property
    def height(self) -> int:
        return int(self.shape.shape[0])

    def cells(self) -> List[Tuple[int, int]]:
        """Board (col, row) pairs covered by the piece's nonzero cells."""
        rows, cols = np.nonzero(self.shape)
        return [(self.x + int(dx), self.y + int(dy)) for dy, dx in zip(rows, cols)]

    def copy(self) -> "Piece":
        return Piece(self.shape.copy(), self.x, self.y, self.color)


IndexSource = Callable[[], int]


@dataclass
class PieceFactory:
    """Builds spawn-positioned pieces from a pluggable index source.

    `index_source` returns an index in 0..6 (into `TetrominoType` order). When
    omitted, a `random.Random` seeded with `seed` picks uniformly.
    """

    cols: int
    index_source: Optional[IndexSource] = None
    seed: Optional[int] = None
    _rng: random.Random = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._rng = random.Random(self.seed)
        if self.index_source is None:
            kinds = len(TetrominoType)
            self.index_source = lambda: self._rng.randrange(kinds)

    def create(self) -> Piece:
        index = int(self.index_source())
        assert 0 <= index < len(TetrominoType), f"piece index out of range: {index}"
        return self.create_type(list(TetrominoType)[index])

    def create_type(self, kind: TetrominoType) -> Piece:
        shape = template(kind)
        x = self.cols // 2 - shape.shape[1] // 2
        return Piece(shape=shape, x=x, y=0, color=int(kind))

"""Game module for Falling Blocks.

Exports the core game engine and supporting classes:
- GameGrid: Board representation and row clearing
- Piece, PieceFactory, TetrominoType: Tetromino templates and spawning
- collides: Collision test of a piece against the board
- rotate, move: Rotation with wall kicks and horizontal movement
- ScoringRules, LineClearer: Line-clear scoring and level progression
- GameSession: Tick/command driven state machine
"""

from .grid import GameGrid
from .pieces import Piece, PieceFactory, TetrominoType, TEMPLATES
from .collision import collides
from .rotation import rotate, rotate_shape, kick_offsets
from .movement import move, step_down, landing_y
from .rules import ScoringRules, Progress, LineClearer
from .core import GameSession, GameConfig, GamePhase, Action, Snapshot

__all__ = [
    "GameGrid",
    "Piece",
    "PieceFactory",
    "TetrominoType",
    "TEMPLATES",
    "collides",
    "rotate",
    "rotate_shape",
    "kick_offsets",
    "move",
    "step_down",
    "landing_y",
    "ScoringRules",
    "Progress",
    "LineClearer",
    "GameSession",
    "GameConfig",
    "GamePhase",
    "Action",
    "Snapshot",
]

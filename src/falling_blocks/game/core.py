from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Optional

import numpy as np

from .collision import collides
from .grid import GameGrid
from .movement import landing_y, move, step_down
from .pieces import TEMPLATES, IndexSource, Piece, PieceFactory
from .rotation import rotate
from .rules import LineClearer, Progress, ScoringRules


logger = logging.getLogger(__name__)


class Action(IntEnum):
    NONE = 0
    LEFT = 1
    RIGHT = 2
    ROTATE = 3
    SOFT_DROP = 4
    HARD_DROP = 5
    TOGGLE_PAUSE = 6
    START = 7


class GamePhase(Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


@dataclass
class GameConfig:
    rows: int = 20
    cols: int = 10
    random_seed: Optional[int] = None
    rules: ScoringRules = field(default_factory=ScoringRules)

    def __post_init__(self) -> None:
        if self.rows <= 0 or self.cols <= 0:
            raise ValueError(f"board dimensions must be positive, got {self.rows}x{self.cols}")
        widest = max(max(t.shape) for t in TEMPLATES.values())
        if self.cols < widest or self.rows < widest:
            raise ValueError(f"board must be at least {widest} cells in each direction")


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of a session for renderers and score displays."""

    grid: np.ndarray
    current: Optional[Piece]
    next: Optional[Piece]
    ghost_y: Optional[int]
    score: int
    level: int
    lines: int
    phase: GamePhase


class GameSession:
    """Falling-block game state machine driven by `tick` and player commands.

    Idle -> Running <-> Paused, Running -> GameOver. `start()` restarts from
    any phase. Commands and ticks outside Running are ignored.
    """

    def __init__(self, config: Optional[GameConfig] = None, index_source: Optional[IndexSource] = None) -> None:
        self.config = config or GameConfig()
        self.rules = self.config.rules
        self.board = GameGrid(self.config.rows, self.config.cols)
        self.factory = PieceFactory(self.config.cols, index_source=index_source, seed=self.config.random_seed)
        self.line_clearer = LineClearer(self.rules)
        self.progress = Progress.initial(self.rules)
        self.phase = GamePhase.IDLE
        self.drop_counter_ms = 0.0
        self.current: Optional[Piece] = None
        self.next_piece: Optional[Piece] = None

    # ---------- Read-only accessors ----------
    @property
    def score(self) -> int:
        return self.progress.score

    @property
    def level(self) -> int:
        return self.progress.level

    @property
    def lines(self) -> int:
        return self.progress.lines

    @property
    def drop_interval_ms(self) -> int:
        return self.progress.drop_interval_ms

    @property
    def is_running(self) -> bool:
        return self.phase is GamePhase.RUNNING

    @property
    def is_paused(self) -> bool:
        return self.phase is GamePhase.PAUSED

    @property
    def is_game_over(self) -> bool:
        return self.phase is GamePhase.GAME_OVER

    # ---------- Lifecycle ----------
    def start(self) -> None:
        self.board.reset()
        self.progress = Progress.initial(self.rules)
        self.drop_counter_ms = 0.0
        self.next_piece = self.factory.create()
        self._spawn_piece()
        self.phase = GamePhase.RUNNING
        logger.info("session started (%dx%d)", self.board.rows, self.board.cols)
        if collides(self.current, self.board):
            self._game_over()

    def toggle_pause(self) -> bool:
        if self.phase is GamePhase.RUNNING:
            self.phase = GamePhase.PAUSED
        elif self.phase is GamePhase.PAUSED:
            self.phase = GamePhase.RUNNING
        else:
            return False
        return True

    def tick(self, delta_ms: float) -> None:
        """Advance the gravity timer; forces one drop once the interval is exceeded."""
        if not self._accepts_commands():
            return
        self.drop_counter_ms += delta_ms
        if self.drop_counter_ms > self.drop_interval_ms:
            self._drop()

    # ---------- Player commands ----------
    def move_left(self) -> bool:
        if not self._accepts_commands():
            return False
        return move(self.current, self.board, -1)

    def move_right(self) -> bool:
        if not self._accepts_commands():
            return False
        return move(self.current, self.board, 1)

    def rotate(self) -> bool:
        if not self._accepts_commands():
            return False
        return rotate(self.current, self.board)

    def soft_drop(self) -> bool:
        if not self._accepts_commands():
            return False
        self._drop()
        self.progress.score += self.rules.soft_drop_points
        return True

    def hard_drop(self) -> bool:
        if not self._accepts_commands():
            return False
        rows = 0
        while step_down(self.current, self.board):
            rows += 1
        self.progress.score += rows * self.rules.hard_drop_points_per_row
        self._lock_piece()
        self.drop_counter_ms = 0.0
        return True

    def step(self, action: Action) -> bool:
        """Dispatch one input command; returns whether it had any effect."""
        action = Action(action)
        if action == Action.START:
            self.start()
            return True
        if action == Action.TOGGLE_PAUSE:
            return self.toggle_pause()
        if action == Action.LEFT:
            return self.move_left()
        if action == Action.RIGHT:
            return self.move_right()
        if action == Action.ROTATE:
            return self.rotate()
        if action == Action.SOFT_DROP:
            return self.soft_drop()
        if action == Action.HARD_DROP:
            return self.hard_drop()
        return False

    # ---------- Internals ----------
    def _accepts_commands(self) -> bool:
        return self.phase is GamePhase.RUNNING and self.current is not None

    def _spawn_piece(self) -> None:
        self.current = self.next_piece
        self.next_piece = self.factory.create()

    def _drop(self) -> None:
        if not step_down(self.current, self.board):
            self._lock_piece()
        self.drop_counter_ms = 0.0

    def _lock_piece(self) -> None:
        assert self.current is not None
        self.board.merge(self.current)
        logger.debug("locked %s at x=%d y=%d", self.current.kind.name, self.current.x, self.current.y)
        self.line_clearer.clear(self.board, self.progress)
        self._spawn_piece()
        if collides(self.current, self.board):
            self._game_over()

    def _game_over(self) -> None:
        self.phase = GamePhase.GAME_OVER
        logger.info("game over: score=%d level=%d lines=%d", self.score, self.level, self.lines)

    # ---------- Observers ----------
    def ghost_y(self) -> Optional[int]:
        if self.current is None or self.is_game_over:
            return None
        return landing_y(self.current, self.board)

    def snapshot(self) -> Snapshot:
        return Snapshot(
            grid=self.board.clone_state(),
            current=self.current.copy() if self.current is not None else None,
            next=self.next_piece.copy() if self.next_piece is not None else None,
            ghost_y=self.ghost_y(),
            score=self.score,
            level=self.level,
            lines=self.lines,
            phase=self.phase,
        )

    def get_state(self) -> np.ndarray:
        # Overlay current piece on a copy of the grid for observation
        state = self.board.clone_state()
        if self.current is not None and not self.is_game_over:
            for col, row in self.current.cells():
                if self.board.is_inside(col, row):
                    # Use negative to indicate falling piece overlay
                    state[row, col] = -self.current.color
        return state

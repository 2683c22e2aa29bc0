from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from falling_blocks.game import Action, GameConfig, GamePhase, GameSession, TetrominoType
from falling_blocks.visualization.palette import color_for_value


# Agent actions are the in-game commands; pause and restart stay with the env
AGENT_ACTIONS = (
    Action.NONE,
    Action.LEFT,
    Action.RIGHT,
    Action.ROTATE,
    Action.SOFT_DROP,
    Action.HARD_DROP,
)


class FallingBlocksEnv(gym.Env):
    """
    Frame-stepped falling-block environment.

    Every step applies one command and then advances the game clock by
    `frame_ms`, so gravity keeps pulling the piece down while the agent acts.

    Actions (6 total):
      0: No-op
      1: Move Left
      2: Move Right
      3: Rotate CW
      4: Soft Drop
      5: Hard Drop

    Observation: the board with locked cells as 1..7 and the falling piece
    overlaid as -1..-7. Reward: score gained during the step.
    """

    metadata = {"render_modes": ["rgb_array"], "render_fps": 60}

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        render_mode: Optional[str] = None,
        frame_ms: float = 1000.0 / 60.0,
        max_episode_steps: int = 10_000,
    ) -> None:
        super().__init__()
        self.config = config or GameConfig()
        self.session = GameSession(self.config)
        self.render_mode = render_mode
        self.frame_ms = float(frame_ms)
        self.max_episode_steps = int(max_episode_steps)

        kinds = len(TetrominoType)
        self.observation_space = spaces.Box(
            low=-kinds, high=kinds, shape=(self.config.rows, self.config.cols), dtype=np.int8
        )
        self.action_space = spaces.Discrete(len(AGENT_ACTIONS))

        self._steps = 0

    def _get_obs(self) -> np.ndarray:
        return self.session.get_state()

    def _get_info(self) -> Dict[str, Any]:
        return {
            "score": self.session.score,
            "level": self.session.level,
            "lines": self.session.lines,
            "max_height": self.session.board.get_max_height(),
            "filled_cells": self.session.board.filled_cells(),
            "steps": self._steps,
        }

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[np.ndarray, Dict[str, Any]]:
        super().reset(seed=seed)
        # Piece order follows the env's seeded generator
        rng = self.np_random
        kinds = len(TetrominoType)
        self.session = GameSession(self.config, index_source=lambda: int(rng.integers(kinds)))
        self.session.start()
        self._steps = 0
        return self._get_obs(), self._get_info()

    def step(self, action: int):
        if self.session.phase is GamePhase.IDLE:
            raise RuntimeError("call reset() before step()")
        command = AGENT_ACTIONS[int(action)]
        score_before = self.session.score

        self.session.step(command)
        self.session.tick(self.frame_ms)
        self._steps += 1

        reward = float(self.session.score - score_before)
        terminated = bool(self.session.is_game_over)
        truncated = self._steps >= self.max_episode_steps and not terminated
        return self._get_obs(), reward, terminated, truncated, self._get_info()

    def render(self) -> Optional[np.ndarray]:
        if self.render_mode != "rgb_array":
            return None
        # Create a simple RGB image from the grid
        grid = self.session.get_state()
        cell = 12
        h, w = grid.shape
        img = np.zeros((h * cell, w * cell, 3), dtype=np.uint8)
        for y in range(h):
            for x in range(w):
                color = color_for_value(grid[y, x])
                img[y * cell : (y + 1) * cell, x * cell : (x + 1) * cell, :] = color
        return img

    def close(self) -> None:
        pass

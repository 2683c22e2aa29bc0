from __future__ import annotations

import logging
from dataclasses import dataclass

from .grid import GameGrid


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScoringRules:
    line_clear_scores: tuple[int, int, int, int, int] = (0, 100, 300, 500, 800)
    lines_per_level: int = 10
    base_drop_interval_ms: int = 1000
    drop_interval_step_ms: int = 100
    min_drop_interval_ms: int = 100
    soft_drop_points: int = 1
    hard_drop_points_per_row: int = 2

    def __post_init__(self) -> None:
        if len(self.line_clear_scores) != 5 or self.line_clear_scores[0] != 0:
            raise ValueError("line_clear_scores must list 5 values starting with 0")
        if self.lines_per_level <= 0:
            raise ValueError("lines_per_level must be positive")
        if self.min_drop_interval_ms <= 0 or self.base_drop_interval_ms < self.min_drop_interval_ms:
            raise ValueError("drop intervals must be positive and base >= min")

    def score_for_lines(self, lines: int, level: int = 1) -> int:
        if lines <= 0:
            return 0
        if lines <= 4:
            return self.line_clear_scores[lines] * level
        # Only reachable when a loaded board already holds full rows
        return (self.line_clear_scores[4] + (lines - 4) * 400) * level

    def level_for_lines(self, lines: int) -> int:
        return lines // self.lines_per_level + 1

    def drop_interval_for_level(self, level: int) -> int:
        interval = self.base_drop_interval_ms - (level - 1) * self.drop_interval_step_ms
        return max(self.min_drop_interval_ms, interval)


@dataclass
class Progress:
    """Score, level and line counters of one session."""

    score: int = 0
    level: int = 1
    lines: int = 0
    drop_interval_ms: int = 1000

    @classmethod
    def initial(cls, rules: ScoringRules) -> "Progress":
        return cls(drop_interval_ms=rules.drop_interval_for_level(1))


class LineClearer:
    def __init__(self, rules: ScoringRules) -> None:
        self.rules = rules

    def clear(self, board: GameGrid, progress: Progress) -> int:
        """Remove full rows from `board` and credit them to `progress`.

        Scoring uses the level in effect before the clear; level and drop
        interval are recomputed afterwards.
        """
        cleared = board.clear_full_rows()
        if cleared == 0:
            return 0
        progress.lines += cleared
        progress.score += self.rules.score_for_lines(cleared, progress.level)
        level = self.rules.level_for_lines(progress.lines)
        if level != progress.level:
            logger.debug("level up: %d -> %d", progress.level, level)
        progress.level = level
        progress.drop_interval_ms = self.rules.drop_interval_for_level(level)
        logger.debug("cleared %d row(s); lines=%d score=%d", cleared, progress.lines, progress.score)
        return cleared

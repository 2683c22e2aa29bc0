from __future__ import annotations

from typing import Optional, Tuple

import numpy as np
import pygame

from falling_blocks.game import GamePhase, Piece, Snapshot
from .palette import color_for_value


class Renderer:
    """Draws a session snapshot: board, falling piece, ghost, preview and HUD."""

    def __init__(self, rows: int, cols: int, cell_size: int = 30, margin: int = 20, panel_cells: int = 6) -> None:
        self.rows = rows
        self.cols = cols
        self.cell_size = cell_size
        self.margin = margin
        self.panel_w = panel_cells * cell_size
        self._font: Optional[pygame.font.Font] = None
        self._big_font: Optional[pygame.font.Font] = None

    def window_size(self) -> Tuple[int, int]:
        width = self.margin * 3 + self.cols * self.cell_size + self.panel_w
        height = self.margin * 2 + self.rows * self.cell_size
        return width, height

    def _fonts(self) -> Tuple[pygame.font.Font, pygame.font.Font]:
        if self._font is None or self._big_font is None:
            self._font = pygame.font.SysFont(None, 24)
            self._big_font = pygame.font.SysFont(None, 40)
        return self._font, self._big_font

    def _cell_rect(self, x: int, y: int, origin: Tuple[int, int], size: int) -> pygame.Rect:
        return pygame.Rect(origin[0] + x * size, origin[1] + y * size, size - 1, size - 1)

    def _grid_surface(self, state: np.ndarray) -> pygame.Surface:
        h, w = state.shape
        surf = pygame.Surface((w * self.cell_size, h * self.cell_size))
        surf.fill((30, 30, 36))
        for y in range(h):
            for x in range(w):
                color = color_for_value(int(state[y, x]))
                pygame.draw.rect(surf, color, self._cell_rect(x, y, (0, 0), self.cell_size))
        return surf

    def _draw_piece(self, surf: pygame.Surface, piece: Piece, y: int, outline: bool = False) -> None:
        color = color_for_value(piece.color)
        for col, row in Piece(piece.shape, piece.x, y, piece.color).cells():
            if row < 0:
                continue
            rect = self._cell_rect(col, row, (0, 0), self.cell_size)
            if outline:
                pygame.draw.rect(surf, color, rect.inflate(-6, -6), 2)
            else:
                pygame.draw.rect(surf, color, rect)

    def _draw_panel(self, screen: pygame.Surface, snap: Snapshot) -> None:
        font, _ = self._fonts()
        x0 = self.margin * 2 + self.cols * self.cell_size
        y = self.margin
        for label, value in (("Score", snap.score), ("Level", snap.level), ("Lines", snap.lines)):
            text = font.render(f"{label}: {value}", True, (220, 220, 230))
            screen.blit(text, (x0, y))
            y += 28

        y += 12
        screen.blit(font.render("Next", True, (220, 220, 230)), (x0, y))
        y += 28
        if snap.next is not None:
            preview = max(8, self.cell_size * 2 // 3)
            for col, row in Piece(snap.next.shape, 0, 0, snap.next.color).cells():
                pygame.draw.rect(screen, color_for_value(snap.next.color), self._cell_rect(col, row, (x0, y), preview))

    def _draw_banner(self, screen: pygame.Surface, message: str) -> None:
        _, big_font = self._fonts()
        text = big_font.render(message, True, (255, 255, 255))
        board_center = (self.margin + self.cols * self.cell_size // 2, self.margin + self.rows * self.cell_size // 2)
        screen.blit(text, text.get_rect(center=board_center))

    def draw(self, screen: pygame.Surface, snap: Snapshot) -> None:
        board = self._grid_surface(snap.grid)
        if snap.current is not None and snap.phase is not GamePhase.GAME_OVER:
            if snap.ghost_y is not None:
                self._draw_piece(board, snap.current, snap.ghost_y, outline=True)
            self._draw_piece(board, snap.current, snap.current.y)

        screen.fill((10, 10, 14))
        screen.blit(board, (self.margin, self.margin))
        self._draw_panel(screen, snap)

        if snap.phase is GamePhase.IDLE:
            self._draw_banner(screen, "Press R to start")
        elif snap.phase is GamePhase.PAUSED:
            self._draw_banner(screen, "Paused")
        elif snap.phase is GamePhase.GAME_OVER:
            self._draw_banner(screen, f"Game Over - {snap.score}")
        pygame.display.flip()

from __future__ import annotations

import argparse
import logging
from typing import Dict, Optional, Sequence

import pygame

from falling_blocks.game import Action, GameConfig, GameSession
from .renderer import Renderer


logger = logging.getLogger(__name__)


KEY_TO_ACTION: Dict[int, Action] = {
    pygame.K_LEFT: Action.LEFT,
    pygame.K_RIGHT: Action.RIGHT,
    pygame.K_UP: Action.ROTATE,
    pygame.K_DOWN: Action.SOFT_DROP,
    pygame.K_SPACE: Action.HARD_DROP,
    pygame.K_p: Action.TOGGLE_PAUSE,
    pygame.K_r: Action.START,
}


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Play Falling Blocks with the keyboard.")
    p.add_argument("--seed", type=int, default=None, help="Seed for the piece generator")
    p.add_argument("--cell-size", type=int, default=30)
    p.add_argument("--fps", type=int, default=60)
    p.add_argument("--verbose", action="store_true", help="Log engine events at DEBUG level")
    return p


def handle_event(session: GameSession, event: pygame.event.Event) -> bool:
    """Route one pygame event to the session; False means the player quit."""
    if event.type == pygame.QUIT:
        return False
    if event.type == pygame.KEYDOWN:
        if event.key == pygame.K_ESCAPE:
            return False
        action = KEY_TO_ACTION.get(event.key)
        if action is not None:
            session.step(action)
    return True


def run(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    pygame.init()
    try:
        clock = pygame.time.Clock()
        session = GameSession(GameConfig(random_seed=args.seed))
        renderer = Renderer(session.board.rows, session.board.cols, cell_size=args.cell_size)

        screen = pygame.display.set_mode(renderer.window_size())
        pygame.display.set_caption("Falling Blocks")

        session.start()
        running = True
        while running:
            elapsed_ms = clock.tick(args.fps)
            for event in pygame.event.get():
                if not handle_event(session, event):
                    running = False

            # Gravity
            session.tick(elapsed_ms)

            # Render
            renderer.draw(screen, session.snapshot())
    finally:
        pygame.quit()
        logger.debug("window closed")


if __name__ == "__main__":  # pragma: no cover
    run()

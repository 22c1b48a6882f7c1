from __future__ import annotations

import argparse
import logging
from typing import Dict

import pygame

from tetris_arena.game import Action, GameConfig, GameController
from .renderer import Renderer


KEY_TO_ACTION: Dict[int, Action] = {
    pygame.K_RIGHT: Action.RIGHT,
    pygame.K_d: Action.RIGHT,
    pygame.K_LEFT: Action.LEFT,
    pygame.K_q: Action.LEFT,
    pygame.K_DOWN: Action.DROP,
    pygame.K_s: Action.DROP,
    pygame.K_a: Action.ROTATE_CCW,
    pygame.K_e: Action.ROTATE_CW,
    # Reserved for a hard drop, which is not supported
    pygame.K_UP: Action.NONE,
    pygame.K_z: Action.NONE,
}


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Play Tetris Arena with the keyboard")
    p.add_argument("--width", type=int, default=12)
    p.add_argument("--height", type=int, default=20)
    p.add_argument("--interval", type=float, default=1000, help="Gravity interval in milliseconds")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--scale", type=int, default=30, help="Pixel size of a cell")
    p.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p


def run(config: GameConfig, scale: int = 30) -> None:
    pygame.init()
    try:
        clock = pygame.time.Clock()
        game = GameController(config, clock=lambda: float(pygame.time.get_ticks()))
        renderer = Renderer(cell_size=scale)
        screen = pygame.display.set_mode(renderer.window_size(config.width, config.height))
        pygame.display.set_caption("Tetris Arena")

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    else:
                        action = KEY_TO_ACTION.get(event.key)
                        if action is not None:
                            game.apply(action)

            game.tick(float(pygame.time.get_ticks()))
            renderer.draw(screen, game.get_state(), game.score, game.last_sweep_was_tetris)
            clock.tick(60)
    finally:
        pygame.quit()


def main() -> None:
    args = build_parser().parse_args()
    logging.basicConfig(level=args.log_level, format="[tetris-arena] %(asctime)s %(levelname)s %(message)s")
    config = GameConfig(width=args.width, height=args.height, drop_interval_ms=args.interval, random_seed=args.seed)
    run(config, scale=args.scale)


if __name__ == "__main__":  # pragma: no cover
    main()

from __future__ import annotations

import argparse
from typing import Dict, Optional, Sequence

import pygame

from falling_block_rl.game import Action, FallingBlockGame, GameConfig, GameOver
from .renderer import Renderer


KEY_TO_ACTION: Dict[int, Action] = {
    pygame.K_LEFT: Action.LEFT,
    pygame.K_RIGHT: Action.RIGHT,
    pygame.K_UP: Action.ROTATE_CW,
    pygame.K_z: Action.ROTATE_CCW,
    pygame.K_DOWN: Action.SOFT_DROP,
    pygame.K_SPACE: Action.HARD_DROP,
    pygame.K_p: Action.PAUSE,
}


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Play the falling block game")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--cell-size", type=int, default=28)
    p.add_argument("--tick-ms", type=int, default=GameConfig.tick_ms,
                   help="Milliseconds per game tick; a piece falls one row every 5 ticks")
    return p


def run(config: Optional[GameConfig] = None, cell_size: int = 28) -> int:
    """Run the interactive loop until the window closes or the game ends.

    Returns the final score.
    """
    config = config or GameConfig()
    game = FallingBlockGame(config)
    renderer = Renderer(cell_size=cell_size)

    pygame.init()
    try:
        screen = pygame.display.set_mode(renderer.window_size(game))
        pygame.display.set_caption("Falling Blocks")
        clock = pygame.time.Clock()
        last_tick = pygame.time.get_ticks()

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

            now = pygame.time.get_ticks()
            if now - last_tick >= config.tick_ms:
                last_tick = now
                try:
                    game.tick()
                except GameOver:
                    running = False

            renderer.draw(screen, game)
            clock.tick(60)
    finally:
        pygame.quit()
    return game.score


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    score = run(GameConfig(random_seed=args.seed, tick_ms=args.tick_ms), cell_size=args.cell_size)
    print(f"Final score: {score}")


if __name__ == "__main__":  # pragma: no cover
    main()

from __future__ import annotations

import pygame

from falling_block_rl.game import FallingBlockGame
from .palette import rgb_for


class Renderer:
    def __init__(self, cell_size: int = 30, margin: int = 20) -> None:
        self.cell_size = cell_size
        self.margin = margin
        self._font = None

    def window_size(self, game: FallingBlockGame) -> tuple[int, int]:
        width = game.grid.width * self.cell_size + self.margin * 2
        height = game.grid.height * self.cell_size + self.margin * 3
        return width, height

    def _cell_rect(self, y: int, x: int) -> pygame.Rect:
        return pygame.Rect(
            x * self.cell_size,
            y * self.cell_size,
            self.cell_size - 1,
            self.cell_size - 1,
        )

    def _grid_surface(self, game: FallingBlockGame) -> pygame.Surface:
        grid = game.grid
        surf = pygame.Surface((grid.width * self.cell_size, grid.height * self.cell_size))
        surf.fill((30, 30, 36))
        for y, row in enumerate(grid.rows()):
            for x, block in enumerate(row):
                pygame.draw.rect(surf, rgb_for(block.color), self._cell_rect(y, x))
        if not game.game_over:
            for y, x in game.piece.cells():
                pygame.draw.rect(surf, rgb_for(game.piece.color), self._cell_rect(y, x))
        return surf

    def draw(self, screen: pygame.Surface, game: FallingBlockGame) -> None:
        if self._font is None:
            self._font = pygame.font.SysFont(None, 28)
        screen.fill((10, 10, 14))
        screen.blit(self._grid_surface(game), (self.margin, self.margin * 2))
        status = f"score {game.score}"
        if game.paused:
            status += "  PAUSED"
        text = self._font.render(status, True, (230, 230, 230))
        screen.blit(text, (self.margin, self.margin // 2))
        pygame.display.flip()

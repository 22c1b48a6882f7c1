from __future__ import annotations

import numpy as np
import pygame

from .palette import BACKGROUND, TEXT, color_for_value


class Renderer:
    def __init__(self, cell_size: int = 30, panel_height: int = 40) -> None:
        self.cell_size = cell_size
        self.panel_height = panel_height
        self._font: pygame.font.Font | None = None

    def window_size(self, width: int, height: int) -> tuple[int, int]:
        return width * self.cell_size, height * self.cell_size + self.panel_height

    def _grid_surface(self, state: np.ndarray) -> pygame.Surface:
        h, w = state.shape
        surf = pygame.Surface((w * self.cell_size, h * self.cell_size))
        surf.fill(BACKGROUND)
        for y in range(h):
            for x in range(w):
                v = int(state[y, x])
                if v == 0:
                    continue
                rect = pygame.Rect(x * self.cell_size, y * self.cell_size, self.cell_size, self.cell_size)
                pygame.draw.rect(surf, color_for_value(v), rect)
        return surf

    def _panel_text(self, score: int, tetris: bool) -> str:
        return f"Score: {score}" + ("   TETRIS!" if tetris else "")

    def draw(self, screen: pygame.Surface, state: np.ndarray, score: int, tetris: bool) -> None:
        if self._font is None:
            self._font = pygame.font.SysFont(None, 28)
        screen.fill(BACKGROUND)
        screen.blit(self._grid_surface(state), (0, 0))
        text = self._font.render(self._panel_text(score, tetris), True, TEXT)
        grid_h = state.shape[0] * self.cell_size
        screen.blit(text, (8, grid_h + (self.panel_height - text.get_height()) // 2))
        pygame.display.flip()

"""Simple ``pygame`` window for drawing grid cells and text."""

from __future__ import annotations

import pygame


Colour = tuple[int, int, int]
Rect = tuple[float, float, float, float]

DEFAULT_WINDOW_SIZE = (1000, 800)


class Window:
    """``pygame`` backed drawing surface."""

    def __init__(
        self,
        size: tuple[int, int] = DEFAULT_WINDOW_SIZE,
        *,
        resizable: bool = True,
        caption: str = "A* Grid Search",
    ) -> None:
        self._flags = pygame.RESIZABLE if resizable else 0

        if not pygame.get_init(): pygame.init()
        if not pygame.font.get_init(): pygame.font.init()
        if not pygame.display.get_init(): pygame.display.init()

        self._surface = pygame.display.set_mode(size, self._flags)
        pygame.display.set_caption(caption)

        try:
            self._font = pygame.font.SysFont(None, 24)
        except pygame.error:
            self._font = pygame.font.Font(None, 24)

    @property
    def size(self) -> tuple[int, int]:
        return self._surface.get_size()

    def resize(self, size: tuple[int, int]) -> None:
        self._surface = pygame.display.set_mode(size, self._flags)

    def fill_cell(self, rect: Rect, colour: Colour, outline: Colour | None = (0, 0, 0)) -> None:
        r = pygame.Rect(int(rect[0]), int(rect[1]), max(1, round(rect[2])), max(1, round(rect[3])))
        pygame.draw.rect(self._surface, colour, r)
        if outline is not None:
            pygame.draw.rect(self._surface, outline, r, 1)

    def draw_line(
        self,
        start: tuple[float, float],
        end: tuple[float, float],
        colour: Colour = (255, 255, 255),
        width: int = 2,
    ) -> None:
        pygame.draw.line(self._surface, colour, start, end, width)

    def draw_text(self, text: str, x: int, y: int, colour: Colour = (255, 255, 255)) -> None:
        if not self._font: return
        text_surf = self._font.render(text, True, colour)
        self._surface.blit(text_surf, (x, y))

    def refresh(self) -> None:
        pygame.display.flip()

    def clear(self, colour: Colour = (255, 255, 255)) -> None:
        self._surface.fill(colour)


__all__ = ["Window", "DEFAULT_WINDOW_SIZE"]

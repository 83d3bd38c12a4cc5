"""Renderer painting grid and solver state onto a :class:`Window`."""

from __future__ import annotations

from ..core.cell import Cell
from ..core.grid import Grid
from ..core.solver import AStarSolver, SolveStatus
from ..utils import observer
from .window import Window


WALL_COLOUR = (0, 0, 0)
FREE_COLOUR = (255, 255, 255)
CLOSED_COLOUR = (255, 0, 0)
OPEN_COLOUR = (0, 128, 0)
PATH_COLOUR = (0, 0, 255)
PATH_LINE_COLOUR = (255, 255, 255)
BACKGROUND_COLOUR = (255, 255, 255)
TEXT_COLOUR = (60, 60, 60)

STATUS_TEXT = {
    SolveStatus.UNINITIALIZED: "Waiting",
    SolveStatus.RUNNING: "Searching...",
    SolveStatus.SOLVED: "Solution found!",
    SolveStatus.UNSOLVABLE: "No solution found.",
}


class Renderer:
    """Draw walls, closed set (red), open set (green) and path (blue)."""

    def __init__(self, window: Window | None = None, padding: int = 20) -> None:
        self.window = window if window is not None else Window()
        self.padding = padding
        self.show_fps: bool = False

    def cell_size(self, grid: Grid) -> tuple[float, float] | None:
        """Return the on-screen ``(width, height)`` of one cell, or ``None`` if no room."""

        draw_w = self.window.size[0] - self.padding * 2
        draw_h = self.window.size[1] - self.padding * 2
        if draw_w <= 0 or draw_h <= 0:
            return None
        return draw_w / grid.columns, draw_h / grid.rows

    def _cell_rect(self, cell: Cell, size: tuple[float, float]) -> tuple[float, float, float, float]:
        cell_w, cell_h = size
        return (self.padding + cell.x * cell_w, self.padding + cell.y * cell_h, cell_w, cell_h)

    def _cell_centre(self, cell: Cell, size: tuple[float, float]) -> tuple[float, float]:
        x, y, w, h = self._cell_rect(cell, size)
        return x + w / 2, y + h / 2

    def update(self, grid: Grid, solver: AStarSolver) -> None:
        size = self.cell_size(grid)
        if size is None:
            return
        window = self.window

        window.clear(BACKGROUND_COLOUR)
        for cell in grid.cells():
            window.fill_cell(self._cell_rect(cell, size), WALL_COLOUR if cell.is_wall else FREE_COLOUR)

        for cell in solver.closed_set:
            window.fill_cell(self._cell_rect(cell, size), CLOSED_COLOUR)
        for cell in solver.open_set:
            window.fill_cell(self._cell_rect(cell, size), OPEN_COLOUR)
        path = solver.current_path
        for cell in path:
            window.fill_cell(self._cell_rect(cell, size), PATH_COLOUR)

        for a, b in zip(path, path[1:]):
            window.draw_line(self._cell_centre(a, size), self._cell_centre(b, size), PATH_LINE_COLOUR, 2)

        window.draw_text(STATUS_TEXT[solver.status], self.padding, 0, TEXT_COLOUR)
        if self.show_fps:
            window.draw_text(observer.format_fps(), self.window.size[0] // 2, 0, TEXT_COLOUR)


__all__ = ["Renderer"]

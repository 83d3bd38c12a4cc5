"""Fixed-size 2D grid of :class:`Cell` objects with 8-way adjacency."""

from __future__ import annotations

from random import Random
from typing import Iterator, List, Sequence

from .cell import Cell


DEFAULT_WALL_PROBABILITY = 0.3

WALL_GLYPH = "#"
FREE_GLYPH = "."


class Grid:
    """Own every cell of a ``columns`` x ``rows`` board.

    Walls are rolled once per cell from ``rng`` at construction. Neighbour
    lists are a snapshot: call :meth:`add_neighbours` again after changing
    walls that should affect traversal.
    """

    def __init__(
        self,
        columns: int,
        rows: int,
        rng: Random | None = None,
        wall_probability: float = DEFAULT_WALL_PROBABILITY,
    ) -> None:
        if columns <= 0 or rows <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {columns}x{rows}")
        if not 0.0 <= wall_probability <= 1.0:
            raise ValueError(f"Wall probability must be within [0, 1], got {wall_probability}")

        self.columns: int = columns
        self.rows: int = rows
        rnd = rng if rng is not None else Random()
        # Indexed [x][y] so iteration matches the column-major build order.
        self._cells: List[List[Cell]] = [
            [Cell(x, y, is_wall=rnd.random() < wall_probability) for y in range(rows)]
            for x in range(columns)
        ]

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------
    @classmethod
    def from_layout(cls, lines: Sequence[str]) -> "Grid":
        """Build a grid from rows of text where ``#`` marks a wall.

        Every line must have the same length. Neighbours are linked before
        returning.
        """

        if not lines:
            raise ValueError("Layout must contain at least one row")
        width = len(lines[0])
        if any(len(line) != width for line in lines):
            raise ValueError("Layout rows must all have the same length")

        grid = cls(width, len(lines), wall_probability=0.0)
        for y, line in enumerate(lines):
            for x, char in enumerate(line):
                grid._cells[x][y].is_wall = char == WALL_GLYPH
        grid.add_neighbours()
        return grid

    def to_layout(self) -> List[str]:
        """Return the wall mask as text rows (inverse of :meth:`from_layout`)."""

        return [
            "".join(
                WALL_GLYPH if self._cells[x][y].is_wall else FREE_GLYPH
                for x in range(self.columns)
            )
            for y in range(self.rows)
        ]

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def get_cell(self, x: int, y: int) -> Cell:
        """Return the cell at ``(x, y)``; out-of-range access raises ``IndexError``."""

        if not self.is_in_bounds(x, y):
            raise IndexError(
                f"Cell ({x}, {y}) is outside a {self.columns}x{self.rows} grid"
            )
        return self._cells[x][y]

    def is_in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.columns and 0 <= y < self.rows

    def is_free(self, x: int, y: int) -> bool:
        """Return ``True`` if ``(x, y)`` exists and is not a wall."""

        if not self.is_in_bounds(x, y):
            return False
        return not self._cells[x][y].is_wall

    def cells(self) -> Iterator[Cell]:
        """Yield every cell, x outer and y inner."""

        for column in self._cells:
            yield from column

    def __len__(self) -> int:
        return self.columns * self.rows

    def __contains__(self, cell: object) -> bool:
        if not isinstance(cell, Cell) or not self.is_in_bounds(cell.x, cell.y):
            return False
        return self._cells[cell.x][cell.y] is cell

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def set_wall(self, x: int, y: int, is_wall: bool) -> None:
        """Change the wall flag of ``(x, y)``; neighbours are not rebuilt."""

        self.get_cell(x, y).is_wall = is_wall

    def add_neighbours(self) -> None:
        """Rebuild every cell's neighbour list.

        Orthogonal neighbours are linked whenever in bounds, walls included;
        the solver filters walls when expanding. A diagonal is linked only if
        both orthogonal cells framing it are free, so paths never cut a wall
        corner. Order: right, left, down, up, top-left, top-right,
        bottom-left, bottom-right.
        """

        cells = self._cells
        last_x = self.columns - 1
        last_y = self.rows - 1
        free = self.is_free

        for x in range(self.columns):
            for y in range(self.rows):
                neighbours = cells[x][y].neighbours
                neighbours.clear()

                if x < last_x:
                    neighbours.append(cells[x + 1][y])
                if x > 0:
                    neighbours.append(cells[x - 1][y])
                if y < last_y:
                    neighbours.append(cells[x][y + 1])
                if y > 0:
                    neighbours.append(cells[x][y - 1])

                if x > 0 and y > 0 and free(x - 1, y) and free(x, y - 1):
                    neighbours.append(cells[x - 1][y - 1])
                if x < last_x and y > 0 and free(x + 1, y) and free(x, y - 1):
                    neighbours.append(cells[x + 1][y - 1])
                if x > 0 and y < last_y and free(x - 1, y) and free(x, y + 1):
                    neighbours.append(cells[x - 1][y + 1])
                if x < last_x and y < last_y and free(x + 1, y) and free(x, y + 1):
                    neighbours.append(cells[x + 1][y + 1])


__all__ = ["Grid", "DEFAULT_WALL_PROBABILITY", "WALL_GLYPH", "FREE_GLYPH"]

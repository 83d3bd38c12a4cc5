"""ASCII terminal renderer for solver state."""

from __future__ import annotations

import sys
from typing import Dict, List, TextIO, Tuple

from ...core.cell import Coord
from ...core.grid import Grid
from ...core.solver import AStarSolver


# Basic ANSI colour codes used by :class:`TerminalView`
_COLOURS = {
    "black": "\x1b[30m",
    "red": "\x1b[31m",
    "green": "\x1b[32m",
    "yellow": "\x1b[33m",
    "blue": "\x1b[34m",
    "white": "\x1b[37m",
    "reset": "\x1b[0m",
}

# Later layers win: walls, then closed, open, path, endpoints
_GLYPHS: Dict[str, Tuple[str, str]] = {
    "free": (".", "white"),
    "wall": ("#", "black"),
    "closed": ("x", "red"),
    "open": ("o", "green"),
    "path": ("*", "blue"),
}
ENDPOINT_COLOUR = "yellow"


class TerminalView:
    """Grid viewer using ANSI colours."""

    def __init__(self, stream: TextIO | None = None, colour: bool = True) -> None:
        self.stream = stream
        self.colour = colour
        self.enabled: bool = True

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def toggle(self) -> bool:
        self.enabled = not self.enabled
        return self.enabled

    def render_lines(self, grid: Grid, solver: AStarSolver, start: Coord | None = None) -> List[str]:
        """Return one string per grid row describing ``solver``'s state."""

        layers: Dict[Coord, str] = {}
        for cell in solver.closed_set:
            layers[cell.coord] = "closed"
        for cell in solver.open_set:
            layers[cell.coord] = "open"
        for cell in solver.current_path:
            layers[cell.coord] = "path"

        marks: Dict[Coord, str] = {}
        if start is not None:
            marks[start] = "S"
        if solver.end is not None:
            marks[solver.end.coord] = "E"

        lines: List[str] = []
        for y in range(grid.rows):
            row: List[str] = []
            for x in range(grid.columns):
                coord = (x, y)
                if coord in marks:
                    glyph, colour = marks[coord], ENDPOINT_COLOUR
                elif grid.get_cell(x, y).is_wall:
                    glyph, colour = _GLYPHS["wall"]
                else:
                    glyph, colour = _GLYPHS[layers.get(coord, "free")]
                row.append(f"{_COLOURS[colour]}{glyph}" if self.colour else glyph)
            if self.colour:
                row.append(_COLOURS["reset"])
            lines.append("".join(row))
        return lines

    def render(self, grid: Grid, solver: AStarSolver, start: Coord | None = None) -> None:
        """Clear the screen and draw the grid to the output stream."""

        if not self.enabled:
            return
        out = self.stream if self.stream is not None else sys.stdout
        lines = self.render_lines(grid, solver, start)
        if self.colour:
            out.write("\x1b[H\x1b[2J")  # clear screen
        out.write("\n".join(lines) + "\n")
        out.write(
            f"{solver.status.value}: open={len(solver.open_set)} "
            f"closed={len(solver.closed_set)} path={len(solver.current_path)}\n"
        )
        out.flush()


__all__ = ["TerminalView"]

"""Grid cell holding A* scores and neighbour links."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple


Coord = Tuple[int, int]


@dataclass(eq=False)
class Cell:
    """Single grid position.

    Cells compare by identity. ``parent`` is the coordinate of the predecessor
    on the best known path rather than a reference to it; the owning
    :class:`~grid_astar.core.grid.Grid` resolves it back to a cell.
    """

    x: int
    y: int
    is_wall: bool = False
    f: int = 0
    g: int = 0
    h: int = 0
    parent: Optional[Coord] = None
    neighbours: List["Cell"] = field(default_factory=list, repr=False)

    @property
    def coord(self) -> Coord:
        return (self.x, self.y)

    def reset_scores(self) -> None:
        """Clear search state left behind by a previous solve."""

        self.f = self.g = self.h = 0
        self.parent = None


__all__ = ["Cell", "Coord"]

# -*- coding: utf-8 -*-
"""
Wall editing affordances used by a host (click-to-toggle, enclosing a cell).

All edits go through Grid.set_wall / Grid.toggle_wall so both sides of an
edge always change together.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Tuple

from ..errors import OutOfBounds, ParseError
from .grid import Grid
from .point import Point

logger = logging.getLogger(__name__)


class WallEditor:
    def __init__(self, grid: Grid, cell_size: float = 20.0):
        self.grid = grid
        self.cell_size = cell_size

    def toggle(self, a, b) -> bool:
        """Flip the wall between adjacent cells a and b; returns the new state."""
        state = self.grid.toggle_wall(a, b)
        logger.debug("Toggled wall %s|%s -> %s", a, b, "on" if state else "off")
        return state

    def set(self, a, b, present: bool = True) -> None:
        self.grid.set_wall(a, b, present)

    def toggle_many(self, pairs: Iterable[Tuple[Point, Point]]) -> List[bool]:
        return [self.toggle(a, b) for a, b in pairs]

    def enclose(self, p) -> None:
        """Wall off every side of p."""
        p = self.grid.require(p)
        for q in self.grid.neighbors(p):
            self.grid.set_wall(p, q, True)

    def wall_line(self, points: Iterable[Point], side: Tuple[int, int]) -> None:
        """
        Put a wall between each point and its neighbor at offset `side`
        (dx, dy). Points whose neighbor would leave the grid are skipped.
        """
        dx, dy = side
        for p in points:
            p = self.grid.require(p)
            qx, qy = p.x + dx, p.y + dy
            if 0 <= qx < self.grid.width and 0 <= qy < self.grid.height:
                self.grid.set_wall(p, Point(qx, qy), True)

    def clear(self) -> None:
        self.grid.clear_walls()

    def cell_at(self, px: float, py: float, cell_size: Optional[float] = None) -> Point:
        """Map a pixel position on the host canvas to the cell under it."""
        if cell_size is None:
            cell_size = self.cell_size
        if cell_size <= 0:
            raise ParseError(f"cell size must be positive, got {cell_size}")
        if px < 0 or py < 0:
            raise OutOfBounds(f"pixel ({px}, {py}) is outside the canvas")
        return self.grid.require(Point(int(px // cell_size), int(py // cell_size)))

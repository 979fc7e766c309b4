# -*- coding: utf-8 -*-
"""
Maze grid and its affordances.
Exposes:
- Point, parse_point, make_point
- Grid, Cell
- WallEditor (toggle / enclose / click-to-cell)
- reset (clear search annotations, keep walls)
- carve_maze, generate_maze (perfect mazes by recursive backtracking)
"""

from __future__ import annotations

from .point import Point, parse_point, make_point
from .grid import Grid, Cell
from .walls import WallEditor
from .reset import reset
from .generator import carve_maze, generate_maze, braid

__all__ = [
    "Point",
    "parse_point",
    "make_point",
    "Grid",
    "Cell",
    "WallEditor",
    "reset",
    "carve_maze",
    "generate_maze",
    "braid",
]

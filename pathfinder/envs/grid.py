#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
grid.py
-------
Rectangular maze grid with per-edge walls and per-cell search annotations.

Storage (all numpy, indexed [y, x]):
- walls    : (H, W, 4) bool, one bit per direction (up, right, down, left).
             A wall between two adjacent cells is always stored on both.
             Bits pointing outside the grid are never set.
- visited  : (H, W) bool, cell has been expanded by the last search.
- dist     : (H, W) float64, distance label from start (inf = unset).
- par_x/y  : (H, W) int32, parent coordinate (-1 = unset).
- on_path  : (H, W) bool, cell belongs to the last reconstructed path.

A fresh grid is fully open (no walls). Use envs.generator.carve_maze for a
perfect maze.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from numbers import Integral
from typing import List, Optional, Tuple

import numpy as np
from scipy.sparse import coo_matrix
from scipy.sparse.csgraph import connected_components

from ..errors import GridBusy, InvalidSize, NotAdjacent, OutOfBounds
from .point import Point, as_point

logger = logging.getLogger(__name__)

UP, RIGHT, DOWN, LEFT = 0, 1, 2, 3

# (dx, dy) per direction, in the fixed neighbor enumeration order
DELTAS_4 = np.array([(0, -1), (1, 0), (0, 1), (-1, 0)], dtype=np.int8)

OPPOSITE = (DOWN, LEFT, UP, RIGHT)


def _check_dim(value, name: str) -> int:
    if value is None:
        raise InvalidSize(f"missing grid {name}")
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise InvalidSize(f"grid {name} must be an integer, got {value!r}")
    if value <= 0:
        raise InvalidSize(f"grid {name} must be positive, got {value}")
    return int(value)


@dataclass(frozen=True)
class Cell:
    """Read-only snapshot of one grid position."""
    point: Point
    walls: Tuple[bool, bool, bool, bool]   # up, right, down, left
    visited: bool
    distance: Optional[float]
    parent: Optional[Point]
    on_path: bool


class Grid:
    def __init__(self, width: int, height: Optional[int] = None):
        self.width = _check_dim(width, "width")
        self.height = _check_dim(width if height is None else height, "height")
        H, W = self.height, self.width

        self.walls = np.zeros((H, W, 4), dtype=bool)
        # True where the neighbor in that direction exists
        self.edge_mask = np.ones((H, W, 4), dtype=bool)
        self.edge_mask[0, :, UP] = False
        self.edge_mask[:, W - 1, RIGHT] = False
        self.edge_mask[H - 1, :, DOWN] = False
        self.edge_mask[:, 0, LEFT] = False

        self.visited = np.zeros((H, W), dtype=bool)
        self.dist = np.full((H, W), np.inf, dtype=np.float64)
        self.par_x = np.full((H, W), -1, dtype=np.int32)
        self.par_y = np.full((H, W), -1, dtype=np.int32)
        self.on_path = np.zeros((H, W), dtype=bool)

        self._active_run = None
        logger.debug("Created %dx%d grid", W, H)

    # ------------------------------------------------------------------ basics

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.height, self.width)

    @property
    def size(self) -> int:
        return self.width * self.height

    def contains(self, p: Point) -> bool:
        return 0 <= p.x < self.width and 0 <= p.y < self.height

    def require(self, p) -> Point:
        """Coerce to Point and check bounds; raises OutOfBounds."""
        p = as_point(p)
        if not self.contains(p):
            raise OutOfBounds(f"point {p} is outside the {self.width}x{self.height} grid")
        return p

    def points(self):
        for y in range(self.height):
            for x in range(self.width):
                yield Point(x, y)

    def _direction(self, a: Point, b: Point) -> int:
        dx, dy = b.x - a.x, b.y - a.y
        for k, (ddx, ddy) in enumerate(DELTAS_4):
            if dx == ddx and dy == ddy:
                return k
        raise NotAdjacent(f"cells {a} and {b} are not adjacent")

    # --------------------------------------------------------------- neighbors

    def neighbors(self, p) -> List[Point]:
        """In-bounds 4-neighbors in up, right, down, left order."""
        p = self.require(p)
        out = []
        for k, (dx, dy) in enumerate(DELTAS_4):
            if self.edge_mask[p.y, p.x, k]:
                out.append(Point(p.x + int(dx), p.y + int(dy)))
        return out

    def open_neighbors(self, p) -> List[Point]:
        """Neighbors reachable from p without crossing a wall."""
        p = self.require(p)
        out = []
        for k, (dx, dy) in enumerate(DELTAS_4):
            if self.edge_mask[p.y, p.x, k] and not self.walls[p.y, p.x, k]:
                out.append(Point(p.x + int(dx), p.y + int(dy)))
        return out

    # ------------------------------------------------------------------- walls

    def has_wall(self, a, b) -> bool:
        a, b = self.require(a), self.require(b)
        k = self._direction(a, b)
        return bool(self.walls[a.y, a.x, k])

    def set_wall(self, a, b, present: bool = True) -> None:
        a, b = self.require(a), self.require(b)
        k = self._direction(a, b)
        self._check_idle()
        self.walls[a.y, a.x, k] = present
        self.walls[b.y, b.x, OPPOSITE[k]] = present

    def toggle_wall(self, a, b) -> bool:
        """Flip the wall between adjacent a and b; returns the new state."""
        a, b = self.require(a), self.require(b)
        k = self._direction(a, b)
        self._check_idle()
        new = not self.walls[a.y, a.x, k]
        self.walls[a.y, a.x, k] = new
        self.walls[b.y, b.x, OPPOSITE[k]] = new
        return bool(new)

    def fill_walls(self) -> None:
        self._check_idle()
        self.walls[...] = self.edge_mask

    def clear_walls(self) -> None:
        self._check_idle()
        self.walls[...] = False

    def wall_count(self) -> int:
        """Number of walled edges (each counted once)."""
        return int(self.walls.sum()) // 2

    def open_edge_count(self) -> int:
        return int(self.edge_mask.sum() - self.walls.sum()) // 2

    # ---------------------------------------------------------------- analysis

    def regions(self) -> Tuple[int, np.ndarray]:
        """
        Connected regions through open edges.

        Returns (n_regions, labels) with labels shaped (H, W).
        """
        H, W = self.shape
        idx = np.arange(H * W).reshape(H, W)
        right = self.edge_mask[:, :, RIGHT] & ~self.walls[:, :, RIGHT]
        down = self.edge_mask[:, :, DOWN] & ~self.walls[:, :, DOWN]
        src = np.concatenate([idx[right], idx[down]])
        dst = np.concatenate([idx[right] + 1, idx[down] + W])
        adj = coo_matrix((np.ones(src.size, dtype=np.int8), (src, dst)), shape=(H * W, H * W))
        n, labels = connected_components(adj, directed=False)
        return int(n), labels.reshape(H, W)

    def connected(self, a, b) -> bool:
        a, b = self.require(a), self.require(b)
        _, labels = self.regions()
        return bool(labels[a.y, a.x] == labels[b.y, b.x])

    # ------------------------------------------------------------- annotations

    def cell(self, p) -> Cell:
        p = self.require(p)
        d = float(self.dist[p.y, p.x])
        px, py = int(self.par_x[p.y, p.x]), int(self.par_y[p.y, p.x])
        return Cell(
            point=p,
            walls=tuple(bool(w) for w in self.walls[p.y, p.x]),
            visited=bool(self.visited[p.y, p.x]),
            distance=None if np.isinf(d) else d,
            parent=None if px < 0 else Point(px, py),
            on_path=bool(self.on_path[p.y, p.x]),
        )

    def parent_of(self, p: Point) -> Optional[Point]:
        px = int(self.par_x[p.y, p.x])
        if px < 0:
            return None
        return Point(px, int(self.par_y[p.y, p.x]))

    def reset_annotations(self) -> None:
        self.visited[...] = False
        self.dist[...] = np.inf
        self.par_x[...] = -1
        self.par_y[...] = -1
        self.on_path[...] = False

    def mark_path(self, path) -> None:
        for p in path:
            self.on_path[p.y, p.x] = True

    # -------------------------------------------------------------- run guard

    @property
    def busy(self) -> bool:
        run = self._active_run
        return run is not None and not run.done

    def attach_run(self, run) -> None:
        """Register `run` as the grid's only live search; cancels the previous one."""
        prev = self._active_run
        if prev is not None and prev is not run and not prev.done:
            logger.debug("Cancelling superseded search run on %dx%d grid", self.width, self.height)
            prev.cancel()
        self._active_run = run

    def release_run(self, run) -> None:
        if self._active_run is run:
            self._active_run = None

    def cancel_active_run(self) -> None:
        run = self._active_run
        if run is not None and not run.done:
            run.cancel()
        self._active_run = None

    def _check_idle(self) -> None:
        if self.busy:
            raise GridBusy("walls cannot change while a search is running; cancel it first")

    # ------------------------------------------------------------------- misc

    def copy(self) -> "Grid":
        g = Grid(self.width, self.height)
        g.walls = self.walls.copy()
        g.visited = self.visited.copy()
        g.dist = self.dist.copy()
        g.par_x = self.par_x.copy()
        g.par_y = self.par_y.copy()
        g.on_path = self.on_path.copy()
        return g

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, height={self.height}, walls={self.wall_count()})"

    def __str__(self) -> str:
        from ..render import to_ascii  # lazy import
        return to_ascii(self)

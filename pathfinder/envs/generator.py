#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
generator.py
------------
Perfect-maze generation by randomized recursive backtracking.

Every wall is raised first, then a depth-first walk from `start` knocks down
the wall between the current cell and a randomly chosen unvisited neighbor,
backing up when a cell has none left. The result is a spanning tree over
all cells: exactly one region, W*H - 1 open edges, and a unique simple path
between any two cells.

Reproducibility: pass an explicit np.random.Generator or an integer seed.

Usage (quick smoke test):
    python -m pathfinder.envs.generator
"""

from __future__ import annotations

import logging
from typing import Optional, Union

import numpy as np

from ..errors import ParseError
from .grid import DOWN, RIGHT, Grid
from .point import Point

logger = logging.getLogger(__name__)

RngLike = Union[None, int, np.random.Generator]


def _as_rng(rng: RngLike) -> np.random.Generator:
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


def carve_maze(grid: Grid, start: Optional[Point] = None, rng: RngLike = None) -> Grid:
    """Turn `grid` into a perfect maze in place and return it."""
    rng = _as_rng(rng)
    start = grid.require(start if start is not None else Point(0, 0))

    grid.fill_walls()
    visited = np.zeros(grid.shape, dtype=bool)
    visited[start.y, start.x] = True
    stack = [start]

    while stack:
        current = stack[-1]
        unvisited = [q for q in grid.neighbors(current) if not visited[q.y, q.x]]
        if not unvisited:
            stack.pop()
            continue
        nxt = unvisited[int(rng.integers(len(unvisited)))]
        grid.set_wall(current, nxt, False)
        visited[nxt.y, nxt.x] = True
        stack.append(nxt)

    logger.debug("Carved %dx%d maze from %s (%d open edges)",
                 grid.width, grid.height, start, grid.open_edge_count())
    return grid


def braid(grid: Grid, fraction: float, rng: RngLike = None) -> int:
    """
    Knock down a random `fraction` of the remaining walls, adding loops so
    that algorithms can disagree on the route. Returns the number removed.
    """
    if not 0.0 <= fraction <= 1.0:
        raise ParseError(f"braid fraction must be in [0, 1], got {fraction}")
    rng = _as_rng(rng)
    # each wall once: the right and down bits of every cell
    ys, xs, ks = np.nonzero(grid.walls[:, :, RIGHT:DOWN + 1])
    n = int(round(len(ys) * fraction))
    if n <= 0:
        return 0
    for i in rng.choice(len(ys), size=n, replace=False):
        a = Point(int(xs[i]), int(ys[i]))
        b = Point(a.x + 1, a.y) if ks[i] == 0 else Point(a.x, a.y + 1)
        grid.set_wall(a, b, False)
    logger.debug("Braided %d walls", n)
    return n


def generate_maze(size: int, rng: RngLike = None, start: Optional[Point] = None) -> Grid:
    """Fresh size x size grid carved into a perfect maze."""
    return carve_maze(Grid(size), start=start, rng=rng)


if __name__ == "__main__":
    g = generate_maze(8, rng=0)
    print(g)
    n, _ = g.regions()
    print(f"regions={n} open_edges={g.open_edge_count()}")

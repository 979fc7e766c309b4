#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Depth-First Search planner (not optimal, but a useful contrast when
animating).
- LIFO frontier; neighbors pushed in reverse so "up" is tried first.
- Stops as soon as the goal is visited; the path is whatever branch led
  there, often long and twisty.
"""

from __future__ import annotations
from typing import Iterator

from ..envs.grid import Grid
from .base import Algorithm, SearchStep
from .run import Planner


class DFSPlanner(Planner):
    algorithm = Algorithm.DFS

    def expand(self, grid: Grid, start, goal) -> Iterator[SearchStep]:
        dist, par_x, par_y, visited = grid.dist, grid.par_x, grid.par_y, grid.visited

        stack = [start]
        dist[start.y, start.x] = 0.0
        n = 0

        while stack:
            cur = stack.pop()
            if visited[cur.y, cur.x]:
                continue
            visited[cur.y, cur.x] = True
            d = float(dist[cur.y, cur.x])
            if cur == goal:
                yield SearchStep(n, cur, d, len(stack))
                return
            # later pushes win, so parent always points at the cell that
            # will actually pop this one
            for nxt in reversed(grid.open_neighbors(cur)):
                if visited[nxt.y, nxt.x]:
                    continue
                dist[nxt.y, nxt.x] = d + self.step_cost
                par_x[nxt.y, nxt.x] = cur.x
                par_y[nxt.y, nxt.x] = cur.y
                stack.append(nxt)
            yield SearchStep(n, cur, d, len(stack))
            n += 1

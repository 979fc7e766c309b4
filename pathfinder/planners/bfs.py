#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Breadth-First Search planner (unweighted shortest hops).
- FIFO frontier; neighbors discovered in up, right, down, left order.
- A cell gets its distance and parent when first discovered and is
  marked visited when popped.
"""

from __future__ import annotations
from typing import Iterator
from collections import deque
import numpy as np

from ..envs.grid import Grid
from .base import Algorithm, SearchStep
from .run import Planner


class BFSPlanner(Planner):
    algorithm = Algorithm.BFS

    def expand(self, grid: Grid, start, goal) -> Iterator[SearchStep]:
        dist, par_x, par_y, visited = grid.dist, grid.par_x, grid.par_y, grid.visited

        dq = deque([start])
        dist[start.y, start.x] = 0.0
        n = 0

        while dq:
            cur = dq.popleft()
            visited[cur.y, cur.x] = True
            d = float(dist[cur.y, cur.x])
            if cur == goal:
                yield SearchStep(n, cur, d, len(dq))
                return
            for nxt in grid.open_neighbors(cur):
                if np.isfinite(dist[nxt.y, nxt.x]):
                    continue
                dist[nxt.y, nxt.x] = d + self.step_cost
                par_x[nxt.y, nxt.x] = cur.x
                par_y[nxt.y, nxt.x] = cur.y
                dq.append(nxt)
            yield SearchStep(n, cur, d, len(dq))
            n += 1

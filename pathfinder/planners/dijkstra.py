#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Dijkstra planner for maze grids.
- Uniform edge relaxation, no heuristic (A* with h=0).
- Heap entries are (priority, insertion counter, point); a better distance
  re-inserts the cell and the stale entry is skipped on pop.
"""

from __future__ import annotations
from typing import Iterator, List, Tuple
import heapq
import itertools

from ..envs.grid import Grid
from ..envs.point import Point
from .base import Algorithm, SearchStep
from .run import Planner


class DijkstraPlanner(Planner):
    algorithm = Algorithm.DIJKSTRA

    def _priority(self, g: float, p: Point, goal: Point) -> float:
        return g

    def expand(self, grid: Grid, start, goal) -> Iterator[SearchStep]:
        dist, par_x, par_y, visited = grid.dist, grid.par_x, grid.par_y, grid.visited
        counter = itertools.count()

        dist[start.y, start.x] = 0.0
        pq: List[Tuple[float, int, Point]] = [(self._priority(0.0, start, goal), next(counter), start)]
        n = 0

        while pq:
            _, _, cur = heapq.heappop(pq)
            if visited[cur.y, cur.x]:
                continue
            visited[cur.y, cur.x] = True
            d = float(dist[cur.y, cur.x])
            if cur == goal:
                yield SearchStep(n, cur, d, len(pq))
                return
            for nxt in grid.open_neighbors(cur):
                if visited[nxt.y, nxt.x]:
                    continue
                nd = d + self.step_cost
                if nd < dist[nxt.y, nxt.x]:
                    dist[nxt.y, nxt.x] = nd
                    par_x[nxt.y, nxt.x] = cur.x
                    par_y[nxt.y, nxt.x] = cur.y
                    heapq.heappush(pq, (self._priority(nd, nxt, goal), next(counter), nxt))
            yield SearchStep(n, cur, d, len(pq))
            n += 1

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
A* planner for maze grids.
- Same relaxation as Dijkstra, frontier keyed by g + h.
- Heuristic: Manhattan distance. Moves are axis-aligned with unit cost, so
  it is admissible and consistent and the path length matches BFS.
"""

from __future__ import annotations

from ..envs.point import Point
from .base import Algorithm
from .dijkstra import DijkstraPlanner


def manhattan(a: Point, b: Point) -> float:
    return float(abs(a.x - b.x) + abs(a.y - b.y))


class AStarPlanner(DijkstraPlanner):
    algorithm = Algorithm.ASTAR

    def _heuristic(self, p: Point, goal: Point) -> float:
        return manhattan(p, goal) * self.step_cost

    def _priority(self, g: float, p: Point, goal: Point) -> float:
        return g + self._heuristic(p, goal)

# -*- coding: utf-8 -*-
"""
Planners on maze grids with a unified API:
planner.search(grid, start, goal, sink=None) -> SearchRun (lazy steps)
planner.plan(grid, start, goal)
  -> {'success': bool, 'path': List[(x, y)] or None}
"""

from __future__ import annotations
from typing import Dict, Optional, Type

from .base import NOT_FOUND, Algorithm, SearchResult, SearchStep
from .run import Planner, SearchRun
from .reconstruct import reconstruct
from .a_star import AStarPlanner
from .dijkstra import DijkstraPlanner
from .bfs import BFSPlanner
from .dfs import DFSPlanner

# One planner per Algorithm member, no others
PLANNERS: Dict[Algorithm, Type[Planner]] = {
    Algorithm.BFS: BFSPlanner,
    Algorithm.DFS: DFSPlanner,
    Algorithm.DIJKSTRA: DijkstraPlanner,
    Algorithm.ASTAR: AStarPlanner,
}
assert set(PLANNERS) == set(Algorithm)


def get_planner(algorithm) -> Planner:
    return PLANNERS[Algorithm.parse(algorithm)]()


def search(grid, start, goal, algorithm, sink=None) -> SearchRun:
    """Start a lazy search; OutOfBounds is raised here, before any step."""
    return get_planner(algorithm).search(grid, start, goal, sink=sink)


__all__ = [
    "Algorithm",
    "SearchStep",
    "SearchResult",
    "NOT_FOUND",
    "Planner",
    "SearchRun",
    "AStarPlanner",
    "DijkstraPlanner",
    "BFSPlanner",
    "DFSPlanner",
    "PLANNERS",
    "get_planner",
    "search",
    "reconstruct",
]

# -*- coding: utf-8 -*-
"""Rebuild the start->goal path from the parent links a search left on the grid."""

from __future__ import annotations

import logging

from ..envs.grid import Grid
from .base import NOT_FOUND, SearchResult

logger = logging.getLogger(__name__)


def reconstruct(grid: Grid, start, goal) -> SearchResult:
    start, goal = grid.require(start), grid.require(goal)
    if not grid.visited[goal.y, goal.x]:
        return NOT_FOUND

    path = [goal]
    cur = goal
    # a simple path never has more than width*height cells
    for _ in range(grid.size):
        if cur == start:
            path.reverse()
            return SearchResult.from_path(path)
        cur = grid.parent_of(cur)
        if cur is None:
            return NOT_FOUND
        path.append(cur)

    logger.warning("Parent chain from %s did not reach %s within %d steps", goal, start, grid.size)
    return NOT_FOUND

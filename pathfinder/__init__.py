# -*- coding: utf-8 -*-
"""
Top-level package for the maze pathfinding engine.
Provides the host-facing API plus a convenience planner factory.
"""

from __future__ import annotations
from typing import Any

from .errors import (
    MazeError, InvalidSize, OutOfBounds, NotAdjacent, ParseError,
    UninitializedGrid, GridBusy, SearchCancelled,
)
from .envs import Point, Grid, Cell, WallEditor, parse_point, make_point
from .planners import Algorithm, SearchResult, SearchStep, SearchRun, NOT_FOUND
from .events import VisualizationEventSink, RecordingSink, LoggingSink, MultiSink
from .host import (
    initialize_engine, create_maze, attach_wall_editor,
    find_path, start_search, clear,
)

__all__ = [
    "__version__",
    "get_planner",
    "MazeError", "InvalidSize", "OutOfBounds", "NotAdjacent", "ParseError",
    "UninitializedGrid", "GridBusy", "SearchCancelled",
    "Point", "Grid", "Cell", "WallEditor", "parse_point", "make_point",
    "Algorithm", "SearchResult", "SearchStep", "SearchRun", "NOT_FOUND",
    "VisualizationEventSink", "RecordingSink", "LoggingSink", "MultiSink",
    "initialize_engine", "create_maze", "attach_wall_editor",
    "find_path", "start_search", "clear",
]

__version__ = "0.1.0"


def get_planner(name: str) -> Any:
    """
    Factory: instantiate a planner by name.

    Parameters
    ----------
    name : str or Algorithm
        One of: 'bfs', 'dfs', 'dijkstra', 'a_star' (aliases such as 'A*'
        and 'astar' are accepted)

    Returns
    -------
    planner instance
    """
    from .planners import get_planner as _get  # lazy import
    return _get(name)

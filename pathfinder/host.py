# -*- coding: utf-8 -*-
"""
Entry points for a visual host (web canvas, tkinter, notebook, CLI).

The host owns exactly one live Grid and passes it into every call; nothing
here keeps a "current maze" of its own. A typical session:

    initialize_engine()
    grid = create_maze(10)                  # 11 x 11 open grid
    editor = attach_wall_editor(grid)
    editor.toggle(Point(0, 0), Point(1, 0))
    result = find_path(grid, Point(0, 0), Point(10, 10), Algorithm.ASTAR, sink)
    clear(grid)
"""

from __future__ import annotations

import logging
from typing import Optional

from .config import EngineConfig
from .envs.generator import carve_maze
from .envs.grid import Grid
from .envs.point import Point, make_point, parse_point
from .envs.reset import reset
from .envs.walls import WallEditor
from .errors import InvalidSize, UninitializedGrid
from .events import VisualizationEventSink
from .planners import Algorithm, SearchResult, SearchRun, search

logger = logging.getLogger(__name__)

_config: Optional[EngineConfig] = None


def initialize_engine(config: Optional[EngineConfig] = None) -> EngineConfig:
    """One-time setup; later calls without a config return the active one."""
    global _config
    if config is None and _config is not None:
        return _config
    cfg = (config or EngineConfig()).validate()
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=cfg.log_level.upper(),
                            format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger("pathfinder").setLevel(cfg.log_level.upper())
    _config = cfg
    logger.debug("Engine initialized: %s", cfg)
    return cfg


def _require_grid(grid) -> Grid:
    if grid is None:
        raise UninitializedGrid("no maze has been generated yet")
    return grid


def create_maze(size: Optional[int] = None, carve: Optional[bool] = None,
                seed: Optional[int] = None) -> Grid:
    """
    Fresh (size+1) x (size+1) grid. Open unless `carve` (or the config)
    asks for a perfect maze.
    """
    cfg = initialize_engine()
    if size is None:
        raise InvalidSize("missing grid size")
    if isinstance(size, bool) or not isinstance(size, int) or size < 1:
        raise InvalidSize(f"maze size must be an integer >= 1, got {size!r}")
    grid = Grid(size + 1)
    if carve is None:
        carve = cfg.carve
    if carve:
        carve_maze(grid, rng=cfg.seed if seed is None else seed)
    logger.info("Generated %dx%d maze", grid.width, grid.height)
    return grid


def attach_wall_editor(grid: Grid) -> WallEditor:
    cfg = initialize_engine()
    return WallEditor(_require_grid(grid), cell_size=cfg.cell_size)


def start_search(grid: Grid, start, goal, algorithm,
                 sink: Optional[VisualizationEventSink] = None) -> SearchRun:
    """Lazy search for frame-by-frame animation; pull with run.advance()."""
    return search(_require_grid(grid), start, goal, Algorithm.parse(algorithm), sink=sink)


def find_path(grid: Grid, start, goal, algorithm,
              sink: Optional[VisualizationEventSink] = None) -> SearchResult:
    return start_search(grid, start, goal, algorithm, sink=sink).run()


def clear(grid: Grid) -> Grid:
    return reset(_require_grid(grid))


def point(x, y, grid: Optional[Grid] = None) -> Point:
    return make_point(x, y, grid)


__all__ = [
    "Algorithm",
    "Point",
    "initialize_engine",
    "create_maze",
    "attach_wall_editor",
    "start_search",
    "find_path",
    "clear",
    "point",
    "parse_point",
]

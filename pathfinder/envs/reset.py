# -*- coding: utf-8 -*-
"""Clear per-search annotations between runs; walls are left untouched."""

from __future__ import annotations

import logging

from .grid import Grid

logger = logging.getLogger(__name__)


def reset(grid: Grid) -> Grid:
    grid.cancel_active_run()
    grid.reset_annotations()
    logger.debug("Cleared search state on %dx%d grid", grid.width, grid.height)
    return grid

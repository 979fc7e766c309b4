# -*- coding: utf-8 -*-
"""
Step-by-step search execution.

Planner subclasses implement `expand(grid, start, goal)`, a generator that
writes visited/dist/parent annotations into the grid and yields one
SearchStep per expansion. SearchRun wraps that generator so a host can pull
one step per animation frame:

    run = BFSPlanner().search(grid, start, goal, sink=my_sink)
    while True:
        out = run.advance()          # SearchStep ... then SearchResult
        if isinstance(out, SearchResult):
            break

The result always comes from the parent links (reconstruct), never from the
step stream.
"""

from __future__ import annotations

import logging
import time
from typing import Dict, Iterator, Optional, Union

from ..envs.grid import Grid
from ..errors import SearchCancelled
from ..events import NULL_SINK, VisualizationEventSink
from .base import Algorithm, SearchResult, SearchStep
from .reconstruct import reconstruct

logger = logging.getLogger(__name__)


class SearchRun:
    def __init__(self, grid: Grid, start, goal, algorithm: Algorithm,
                 steps: Iterator[SearchStep], sink: Optional[VisualizationEventSink] = None):
        self.grid = grid
        self.start = start
        self.goal = goal
        self.algorithm = algorithm
        self.sink = sink or NULL_SINK
        self.result: Optional[SearchResult] = None
        self.steps_taken = 0
        self.cancelled = False
        self._steps = steps
        self._t0 = time.perf_counter()
        self.execution_time = 0.0

    @property
    def done(self) -> bool:
        return self.cancelled or self.result is not None

    def advance(self) -> Union[SearchStep, SearchResult]:
        """Next SearchStep, or the terminal SearchResult once the search is over."""
        if self.cancelled:
            raise SearchCancelled(f"{self.algorithm.label} search {self.start} -> {self.goal} was cancelled")
        if self.result is not None:
            return self.result
        try:
            step = next(self._steps)
        except StopIteration:
            return self._finish()
        self.steps_taken += 1
        self.sink.on_visited(step)
        return step

    def _finish(self) -> SearchResult:
        result = reconstruct(self.grid, self.start, self.goal)
        self.result = result
        self.execution_time = time.perf_counter() - self._t0
        self.grid.release_run(self)
        if result.found:
            self.grid.mark_path(result.path)
            for p in result.path:
                self.sink.on_path(p)
            self.sink.on_finished(result)
        else:
            self.sink.on_failed(result)
        logger.debug("%s %s -> %s: %s after %d expansions",
                     self.algorithm.label, self.start, self.goal,
                     f"{len(result)} cells" if result.found else "not found", self.steps_taken)
        return result

    def run(self) -> SearchResult:
        """Drain the remaining steps and return the result."""
        while True:
            out = self.advance()
            if isinstance(out, SearchResult):
                return out

    def cancel(self) -> None:
        if self.done:
            return
        self.cancelled = True
        self._steps.close()
        self.grid.release_run(self)

    def __iter__(self):
        return self

    def __next__(self) -> SearchStep:
        out = self.advance()
        if isinstance(out, SearchResult):
            raise StopIteration
        return out


class Planner:
    """Base class: subclasses set `algorithm` and implement `expand`."""
    algorithm: Algorithm
    step_cost = 1.0

    def expand(self, grid: Grid, start, goal) -> Iterator[SearchStep]:
        raise NotImplementedError

    def search(self, grid: Grid, start, goal,
               sink: Optional[VisualizationEventSink] = None) -> SearchRun:
        start, goal = grid.require(start), grid.require(goal)
        run = SearchRun(grid, start, goal, self.algorithm,
                        self.expand(grid, start, goal), sink=sink)
        grid.attach_run(run)
        grid.reset_annotations()
        run.sink.on_started(grid, start, goal, self.algorithm)
        return run

    def plan(self, grid: Grid, start, goal) -> Dict:
        """Run to completion; returns {'success': bool, 'path': [(x, y), ...] or None}."""
        return self.search(grid, start, goal).run().as_dict()

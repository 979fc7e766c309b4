# -*- coding: utf-8 -*-
"""
Visualization event sinks.

A search run reports to a sink as it is advanced:
  on_started(grid, start, goal, algorithm)
  on_visited(step)            once per expansion, in expansion order
  on_path(point)              once per path cell, start to goal, after success
  on_finished(result)         search found a path
  on_failed(result)           goal unreachable

The base class ignores every event, so hosts only override what they draw.
"""

from __future__ import annotations

import logging
from typing import Any, List, Tuple

logger = logging.getLogger(__name__)


class VisualizationEventSink:
    def on_started(self, grid, start, goal, algorithm) -> None:
        pass

    def on_visited(self, step) -> None:
        pass

    def on_path(self, point) -> None:
        pass

    def on_finished(self, result) -> None:
        pass

    def on_failed(self, result) -> None:
        pass


NULL_SINK = VisualizationEventSink()


class RecordingSink(VisualizationEventSink):
    """Keeps every event as a (kind, payload) tuple; handy for tests and replays."""

    def __init__(self):
        self.events: List[Tuple[str, Any]] = []

    def on_started(self, grid, start, goal, algorithm):
        self.events.append(("started", (start, goal, algorithm)))

    def on_visited(self, step):
        self.events.append(("visited", step))

    def on_path(self, point):
        self.events.append(("path", point))

    def on_finished(self, result):
        self.events.append(("finished", result))

    def on_failed(self, result):
        self.events.append(("failed", result))

    def of_kind(self, kind: str) -> List[Any]:
        return [payload for k, payload in self.events if k == kind]

    @property
    def visited(self):
        return [step.point for step in self.of_kind("visited")]

    @property
    def path(self):
        return self.of_kind("path")


class MultiSink(VisualizationEventSink):
    """Fan every event out to several sinks, in order."""

    def __init__(self, *sinks: VisualizationEventSink):
        self.sinks = sinks

    def on_started(self, grid, start, goal, algorithm):
        for s in self.sinks:
            s.on_started(grid, start, goal, algorithm)

    def on_visited(self, step):
        for s in self.sinks:
            s.on_visited(step)

    def on_path(self, point):
        for s in self.sinks:
            s.on_path(point)

    def on_finished(self, result):
        for s in self.sinks:
            s.on_finished(result)

    def on_failed(self, result):
        for s in self.sinks:
            s.on_failed(result)


class LoggingSink(VisualizationEventSink):
    """Writes events to a logger; visits go to DEBUG, outcomes to INFO."""

    def __init__(self, log: logging.Logger = logger):
        self.log = log

    def on_started(self, grid, start, goal, algorithm):
        self.log.info("Searching %s -> %s with %s on %dx%d grid",
                      start, goal, algorithm.label, grid.width, grid.height)

    def on_visited(self, step):
        self.log.debug("step %d: %s (d=%g, frontier=%d)",
                       step.index, step.point, step.distance, step.frontier)

    def on_finished(self, result):
        self.log.info("Path found: %d cells", len(result))

    def on_failed(self, result):
        self.log.info("No path found")

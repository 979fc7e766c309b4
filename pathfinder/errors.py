# -*- coding: utf-8 -*-
"""
Exception hierarchy for the maze engine.

Input errors (bad sizes, coordinates, wall pairs) are raised synchronously
at the call site. An unreachable goal is *not* an error: it is reported as
a SearchResult with found == False.
"""


class MazeError(Exception):
    """Base exception for the pathfinder package."""


class InvalidSize(MazeError, ValueError):
    """Grid size is missing, not an integer, or not positive."""


class OutOfBounds(MazeError, ValueError):
    """A point lies outside the grid."""


class NotAdjacent(MazeError, ValueError):
    """A wall operation was given two cells that do not share an edge."""


class ParseError(MazeError, ValueError):
    """Malformed coordinate, algorithm name or config value from the host."""


class UninitializedGrid(MazeError, RuntimeError):
    """An operation needs a grid but none has been created yet."""


class GridBusy(MazeError, RuntimeError):
    """Walls were edited while a search run on the grid is unfinished."""


class SearchCancelled(MazeError, RuntimeError):
    """A search run was advanced after it was cancelled or superseded."""

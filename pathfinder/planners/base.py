# -*- coding: utf-8 -*-
"""
Core search types shared by every planner.

- Algorithm    : closed set of search strategies, parsed from host strings.
- SearchStep   : one expansion event (drives animation only).
- SearchResult : found path (start..goal inclusive) or not found.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple

from ..envs.point import Point
from ..errors import ParseError


class Algorithm(Enum):
    BFS = "bfs"
    DFS = "dfs"
    DIJKSTRA = "dijkstra"
    ASTAR = "a_star"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def parse(cls, name) -> "Algorithm":
        """Map a host-side name ('bfs', 'A*', 'a-star', 'Dijkstra', ...) to a member."""
        if isinstance(name, cls):
            return name
        if name is None:
            raise ParseError("missing algorithm name")
        key = str(name).strip().lower().replace("-", "_").replace(" ", "_")
        key = _ALIASES.get(key, key)
        for alg in cls:
            if key in (alg.value, alg.name.lower()):
                return alg
        raise ParseError(f"Unknown algorithm '{name}'. Available: {[a.value for a in cls]}")


_ALIASES = {
    "a*": "a_star",
    "astar": "a_star",
    "breadth_first": "bfs",
    "depth_first": "dfs",
}

_LABELS = {
    Algorithm.BFS: "BFS",
    Algorithm.DFS: "DFS",
    Algorithm.DIJKSTRA: "Dijkstra",
    Algorithm.ASTAR: "A*",
}


@dataclass(frozen=True)
class SearchStep:
    index: int          # 0-based expansion counter
    point: Point        # cell being expanded
    distance: float     # its distance label at expansion time
    frontier: int       # frontier size after the expansion

    def to_dict(self) -> Dict:
        return {
            "step": self.index,
            "current": [self.point.x, self.point.y],
            "distance": self.distance,
            "frontier": self.frontier,
        }


@dataclass(frozen=True)
class SearchResult:
    path: Optional[Tuple[Point, ...]] = None

    @property
    def found(self) -> bool:
        return self.path is not None

    def __len__(self) -> int:
        return 0 if self.path is None else len(self.path)

    @property
    def hops(self) -> int:
        return max(len(self) - 1, 0)

    @classmethod
    def from_path(cls, path) -> "SearchResult":
        return cls(path=tuple(path))

    def as_dict(self) -> Dict:
        return {
            "success": self.found,
            "path": None if self.path is None else [p.as_tuple() for p in self.path],
        }


NOT_FOUND = SearchResult()

# -*- coding: utf-8 -*-
"""
Validated 2D integer coordinate shared by the grid, the planners and the host.

Points use (x, y) = (column, row); grid arrays are indexed [y, x].
"""

from __future__ import annotations
from dataclasses import dataclass
from numbers import Integral
from typing import Optional, Tuple

from ..errors import ParseError


def _as_coord(value, name: str) -> int:
    # bool is an Integral subclass; a checkbox value is not a coordinate
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise ParseError(f"{name} must be a non-negative integer, got {value!r}")
    value = int(value)
    if value < 0:
        raise ParseError(f"{name} must be a non-negative integer, got {value}")
    return value


@dataclass(frozen=True)
class Point:
    x: int
    y: int

    def __post_init__(self):
        object.__setattr__(self, "x", _as_coord(self.x, "x"))
        object.__setattr__(self, "y", _as_coord(self.y, "y"))

    def manhattan(self, other: "Point") -> int:
        return abs(self.x - other.x) + abs(self.y - other.y)

    def is_adjacent(self, other: "Point") -> bool:
        return self.manhattan(other) == 1

    def as_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def __str__(self) -> str:
        return f"{self.x},{self.y}"


def parse_point(text: str, grid=None) -> Point:
    """
    Parse an "x,y" string typed by a user.

    Raises ParseError for anything that is not two non-negative integers, or
    (when `grid` is given) for a point that falls outside it.
    """
    if text is None:
        raise ParseError("missing coordinate")
    parts = str(text).strip().split(",")
    if len(parts) != 2:
        raise ParseError(f"expected 'x,y', got {text!r}")
    digits = [p.strip() for p in parts]
    if not all(d.isascii() and d.isdigit() for d in digits):
        raise ParseError(f"expected 'x,y' with integer parts, got {text!r}")
    x, y = (int(d) for d in digits)
    return make_point(x, y, grid)


def make_point(x, y, grid=None) -> Point:
    """Build a Point at the host boundary, optionally checked against `grid`."""
    p = Point(x, y)
    if grid is not None and not grid.contains(p):
        raise ParseError(f"point {p} is outside the {grid.width}x{grid.height} grid")
    return p


def as_point(value: Optional[object]) -> Point:
    """Accept a Point or an (x, y) pair."""
    if isinstance(value, Point):
        return value
    try:
        x, y = value  # type: ignore[misc]
    except (TypeError, ValueError) as e:
        raise ParseError(f"expected a Point or (x, y) pair, got {value!r}") from e
    return Point(x, y)

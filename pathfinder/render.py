# -*- coding: utf-8 -*-
"""
Rendering helpers for maze grids.

- to_ascii      : text lattice, '#' for walls, '.' for open space,
                  '*' for the path, 'S' / 'G' for the endpoints.
- render_grid   : matplotlib axes with visited shading, walls and the path.
- save_figure   : render_grid straight to an image file.
- steps_to_json : serializable trace of a search (summary + steps).
"""

from __future__ import annotations

import json
import os
from datetime import datetime
from typing import Dict, List, Optional, Sequence

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.collections import LineCollection

from .envs.grid import DOWN, RIGHT, Grid
from .envs.point import Point


def to_ascii(grid: Grid, path: Optional[Sequence[Point]] = None,
             start: Optional[Point] = None, goal: Optional[Point] = None) -> str:
    """
    Draw the grid on a (2H+1) x (2W+1) character lattice: cell (x, y) sits at
    row 2y+1, column 2x+1 and the edges between cells sit in between.
    """
    H, W = grid.shape
    rows = [["#"] * (2 * W + 1) for _ in range(2 * H + 1)]
    for y in range(H):
        for x in range(W):
            rows[2 * y + 1][2 * x + 1] = "."
            if x + 1 < W and not grid.walls[y, x, RIGHT]:
                rows[2 * y + 1][2 * x + 2] = "."
            if y + 1 < H and not grid.walls[y, x, DOWN]:
                rows[2 * y + 2][2 * x + 1] = "."

    path = list(path or [])
    for p in path:
        rows[2 * p.y + 1][2 * p.x + 1] = "*"
    for a, b in zip(path[:-1], path[1:]):
        rows[a.y + b.y + 1][a.x + b.x + 1] = "*"
    if start is not None:
        rows[2 * start.y + 1][2 * start.x + 1] = "S"
    if goal is not None:
        rows[2 * goal.y + 1][2 * goal.x + 1] = "G"
    return "\n".join("".join(r) for r in rows)


def _wall_segments(grid: Grid) -> List:
    H, W = grid.shape
    segs = []
    ys, xs = np.nonzero(grid.walls[:, :, RIGHT])
    for y, x in zip(ys, xs):
        segs.append([(x + 0.5, y - 0.5), (x + 0.5, y + 0.5)])
    ys, xs = np.nonzero(grid.walls[:, :, DOWN])
    for y, x in zip(ys, xs):
        segs.append([(x - 0.5, y + 0.5), (x + 0.5, y + 0.5)])
    return segs


def render_grid(grid: Grid, ax=None, path: Optional[Sequence[Point]] = None,
                start: Optional[Point] = None, goal: Optional[Point] = None,
                title: Optional[str] = None, show_visited: bool = True):
    """
    Render a Grid.

    Layers:
      - background (white), visited cells (light gray), path cells (pale red)
      - walls as black segments, outer border
      - path polyline, start (blue) and goal (green) markers
    """
    H, W = grid.shape
    if ax is None:
        _, ax = plt.subplots(figsize=(max(3, W / 3), max(3, H / 3)), dpi=120)

    rgb = np.ones((H, W, 3), dtype=float)
    if show_visited:
        rgb[grid.visited] = 0.85
    rgb[grid.on_path] = (1.0, 0.8, 0.8)
    ax.imshow(rgb, interpolation="nearest", origin="upper")

    segs = _wall_segments(grid)
    if segs:
        ax.add_collection(LineCollection(segs, colors="k", linewidths=2))
    ax.plot([-0.5, W - 0.5, W - 0.5, -0.5, -0.5],
            [-0.5, -0.5, H - 0.5, H - 0.5, -0.5], color="k", lw=2)

    if path:
        ax.plot([p.x for p in path], [p.y for p in path], color="firebrick", lw=2, alpha=0.8)
    if start is not None:
        ax.plot(start.x, start.y, marker="o", markersize=8, markeredgecolor="k",
                markerfacecolor="cornflowerblue", lw=0)
    if goal is not None:
        ax.plot(goal.x, goal.y, marker="*", markersize=10, markeredgecolor="k",
                markerfacecolor="forestgreen", lw=0)

    ax.set_xlim(-0.6, W - 0.4)
    ax.set_ylim(H - 0.4, -0.6)
    ax.set_xticks([]); ax.set_yticks([])
    if title:
        ax.set_title(title, fontsize=10)
    return ax


def save_figure(grid: Grid, out_path: str, **kwargs) -> str:
    fig, ax = plt.subplots(figsize=(max(3, grid.width / 3), max(3, grid.height / 3)), dpi=120)
    render_grid(grid, ax=ax, **kwargs)
    fig.tight_layout()
    out_dir = os.path.dirname(out_path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    fig.savefig(out_path, bbox_inches="tight")
    plt.close(fig)
    return out_path


def steps_to_json(grid: Grid, start: Point, goal: Point, algorithm, steps, result,
                  execution_time: Optional[float] = None) -> Dict:
    summary = {
        "algorithm": algorithm.value,
        "grid_size": [grid.width, grid.height],
        "start": [start.x, start.y],
        "goal": [goal.x, goal.y],
        "num_walls": grid.wall_count(),
        "execution_time": execution_time,
        "total_steps": len(steps),
        "path_found": result.found,
        "timestamp": datetime.now().strftime("%Y%m%d_%H%M%S"),
    }
    if result.found:
        summary["path_length"] = len(result)
        summary["path"] = [[p.x, p.y] for p in result.path]
    return {"summary": summary, "steps": [s.to_dict() for s in steps]}


def save_steps(path: str, trace: Dict) -> str:
    out_dir = os.path.dirname(path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(trace, f, indent=2)
    return path

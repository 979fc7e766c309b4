#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
solve.py
--------
Build one maze, run one algorithm on it, and report the result.

Example:
  python -m pathfinder.cli.solve \
      --size 10 --carve --seed 3 \
      --algorithm a_star --start 0,0 --goal 10,10 \
      --wall 0,0:1,0 --png results/maze.png --steps-json results/trace.json
"""

from __future__ import annotations
import argparse
import sys
from typing import List, Optional, Tuple

from ..config import EngineConfig, load_config
from ..envs.point import Point, parse_point
from ..errors import MazeError, ParseError
from ..events import LoggingSink, MultiSink, RecordingSink
from ..host import attach_wall_editor, create_maze, initialize_engine, start_search
from ..planners import Algorithm
from ..render import save_figure, save_steps, steps_to_json, to_ascii


def _parse_wall(text: str) -> Tuple[str, str]:
    parts = text.split(":")
    if len(parts) != 2:
        raise ParseError(f"expected 'x1,y1:x2,y2', got {text!r}")
    return parts[0], parts[1]


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Solve a grid maze with BFS, DFS, Dijkstra or A*.")
    ap.add_argument("--config", default=None, help="JSON config file (flags override it)")
    ap.add_argument("--size", type=int, default=None, help="maze size n; the grid is (n+1)x(n+1)")
    ap.add_argument("--algorithm", default=None, help="bfs | dfs | dijkstra | a_star")
    ap.add_argument("--start", default="0,0", help="start cell as x,y")
    ap.add_argument("--goal", default=None, help="goal cell as x,y (default: opposite corner)")
    ap.add_argument("--carve", action="store_true", default=None, help="carve a perfect maze first")
    ap.add_argument("--seed", type=int, default=None, help="carving RNG seed")
    ap.add_argument("--wall", action="append", default=[], metavar="X1,Y1:X2,Y2",
                    help="toggle the wall between two adjacent cells (repeatable)")
    ap.add_argument("--no-ascii", action="store_true", help="do not print the maze")
    ap.add_argument("--png", default=None, help="save a rendering to this path")
    ap.add_argument("--steps-json", default=None, help="save the step trace to this path")
    ap.add_argument("--log-level", default=None, help="DEBUG | INFO | WARNING | ERROR")
    return ap


def run(args) -> int:
    cfg = load_config(args.config) if args.config else EngineConfig()
    cfg = cfg.replace(default_size=args.size, seed=args.seed, carve=args.carve,
                      algorithm=args.algorithm, log_level=args.log_level)
    initialize_engine(cfg)

    grid = create_maze(cfg.default_size, carve=cfg.carve, seed=cfg.seed)
    editor = attach_wall_editor(grid)
    for text in args.wall:
        a, b = _parse_wall(text)
        editor.toggle(parse_point(a, grid), parse_point(b, grid))

    start = parse_point(args.start, grid)
    goal = parse_point(args.goal, grid) if args.goal else Point(grid.width - 1, grid.height - 1)
    algorithm = Algorithm.parse(cfg.algorithm)

    recorder = RecordingSink()
    search = start_search(grid, start, goal, algorithm, sink=MultiSink(recorder, LoggingSink()))
    result = search.run()

    if not args.no_ascii:
        print(to_ascii(grid, path=result.path, start=start, goal=goal))
    if result.found:
        print(f"[OK] {algorithm.label}: path of {len(result)} cells ({result.hops} moves), "
              f"{search.steps_taken} expansions, {search.execution_time:.4f}s")
    else:
        print(f"[OK] {algorithm.label}: no path from {start} to {goal} "
              f"({search.steps_taken} expansions)")

    if args.png:
        title = f"{algorithm.label}: {'success' if result.found else 'fail'}"
        save_figure(grid, args.png, path=result.path, start=start, goal=goal, title=title)
        print(f"Saved: {args.png}")
    if args.steps_json:
        trace = steps_to_json(grid, start, goal, algorithm, recorder.of_kind("visited"),
                              result, execution_time=search.execution_time)
        save_steps(args.steps_json, trace)
        print(f"Saved: {args.steps_json}")
    return 0 if result.found else 1


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        return run(args)
    except MazeError as e:
        print(f"[ERR] {type(e).__name__}: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())

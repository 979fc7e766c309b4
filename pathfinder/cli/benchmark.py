#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
benchmark.py
------------
Run every algorithm on the same carved (optionally braided) mazes and
compare path length, expansions and wall-clock time.

Example:
  python -m pathfinder.cli.benchmark \
      --sizes 10,20,40 --seeds 5 --braid 0.1 \
      --outdir results/csv
"""

from __future__ import annotations
import argparse
import os
import sys
import time
from typing import Dict, List, Optional

import numpy as np
import pandas as pd
from tqdm import tqdm

from ..envs.generator import braid, carve_maze
from ..envs.grid import Grid
from ..envs.point import Point
from ..errors import MazeError, ParseError
from ..planners import PLANNERS, Algorithm


def _parse_sizes(s: str) -> List[int]:
    try:
        sizes = [int(tok) for tok in s.split(",") if tok.strip()]
    except ValueError as e:
        raise ParseError(f"--sizes must be comma-separated integers, got {s!r}") from e
    if not sizes or any(n < 1 for n in sizes):
        raise ParseError(f"--sizes must be positive, got {s!r}")
    return sizes


def run_case(algorithm: Algorithm, grid: Grid, start: Point, goal: Point) -> Dict:
    planner = PLANNERS[algorithm]()
    t0 = time.perf_counter()
    search = planner.search(grid, start, goal)
    result = search.run()
    t1 = time.perf_counter()
    return {
        "algorithm": algorithm.value,
        "success": int(result.found),
        "path_cells": len(result),
        "expansions": search.steps_taken,
        "time_s": t1 - t0,
    }


def benchmark(sizes: List[int], seeds: int, braid_fraction: float = 0.0,
              progress: bool = True) -> pd.DataFrame:
    rows = []
    total = len(sizes) * seeds * len(Algorithm)
    with tqdm(total=total, desc="Benchmark", disable=not progress) as pbar:
        for n in sizes:
            for seed in range(seeds):
                rng = np.random.default_rng(seed)
                base = carve_maze(Grid(n + 1), rng=rng)
                if braid_fraction > 0:
                    braid(base, braid_fraction, rng=rng)
                start, goal = Point(0, 0), Point(base.width - 1, base.height - 1)
                for algorithm in Algorithm:
                    row = run_case(algorithm, base.copy(), start, goal)
                    row.update({"size": n, "seed": seed, "braid": braid_fraction})
                    rows.append(row)
                    pbar.update(1)
    return pd.DataFrame(rows)


def summarize(df: pd.DataFrame) -> pd.DataFrame:
    return df.groupby(["size", "algorithm"]).agg({
        "success": "mean",
        "path_cells": "mean",
        "expansions": "mean",
        "time_s": "mean",
    }).reset_index()


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Compare BFS, DFS, Dijkstra and A* on carved mazes.")
    ap.add_argument("--sizes", default="10,20", help="comma-separated maze sizes n (grid is n+1 per side)")
    ap.add_argument("--seeds", type=int, default=3, help="mazes per size")
    ap.add_argument("--braid", type=float, default=0.0, help="fraction of walls removed after carving")
    ap.add_argument("--outdir", default=None, help="write benchmark.csv and summary.csv here")
    ap.add_argument("--quiet", action="store_true", help="no progress bar")
    args = ap.parse_args(argv)

    try:
        sizes = _parse_sizes(args.sizes)
        if args.seeds < 1:
            raise ParseError(f"--seeds must be >= 1, got {args.seeds}")
        df = benchmark(sizes, args.seeds, braid_fraction=args.braid, progress=not args.quiet)
    except MazeError as e:
        print(f"[ERR] {type(e).__name__}: {e}", file=sys.stderr)
        return 2

    summary = summarize(df)
    print(summary.to_string(index=False))
    if args.outdir:
        os.makedirs(args.outdir, exist_ok=True)
        raw_csv = os.path.join(args.outdir, "benchmark.csv")
        sum_csv = os.path.join(args.outdir, "summary.csv")
        df.to_csv(raw_csv, index=False)
        summary.to_csv(sum_csv, index=False)
        print(f"[OK] Wrote: {raw_csv}")
        print(f"[OK] Wrote: {sum_csv}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

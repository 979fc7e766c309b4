# -*- coding: utf-8 -*-
"""
Command-line entry points (run with `python -m pathfinder.cli.<name>`):

- solve      : build a maze, optionally carve/wall it, run one algorithm, print
               the ASCII maze and optionally save a PNG and a JSON step trace
- benchmark  : every algorithm on carved mazes of several sizes; CSV + summary
"""
__all__ = [
    "solve",
    "benchmark",
]

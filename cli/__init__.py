# -*- coding: utf-8 -*-
"""
Command-line entry points (run with `python -m cli.<name>`):

- solve      : p1 shortest path + first disconnecting obstruction, with timing
- visualize  : per-probe ASCII/PNG frames for the linear and narrowing finders
- benchmark  : random-instance sweep, finder agreement and probe counts to CSV
"""
__all__ = [
    "solve",
    "visualize",
    "benchmark",
]

# -*- coding: utf-8 -*-
"""
Obstruction grids and their inputs.
Exposes:
- Grid, Cell and the NEVER / INF sentinels (grid.py)
- parse_arrivals / load_arrivals / validate_arrivals (loader.py)

Random arrival orders (generate_arrivals) are not re-exported: they need SciPy,
so import them from envs.generator directly.
"""

from __future__ import annotations

from .grid import Cell, DELTAS_4, DIRECTIONS, Grid, INF, NEVER
from .loader import format_coord, load_arrivals, parse_arrivals, validate_arrivals

__all__ = [
    "Cell",
    "DELTAS_4",
    "DIRECTIONS",
    "Grid",
    "INF",
    "NEVER",
    "format_coord",
    "load_arrivals",
    "parse_arrivals",
    "validate_arrivals",
]

# -*- coding: utf-8 -*-
"""
Reading and validating obstruction arrival lists.

File format: one "x,y" record per line, in arrival order. Blank lines are
ignored. The Grid itself never checks its input, so every CLI goes through
validate_arrivals() before building one.
"""

from __future__ import annotations
import os
from typing import Iterable, List, Tuple

Coord = Tuple[int, int]


def parse_arrivals(lines: Iterable[str]) -> List[Coord]:
    out: List[Coord] = []
    for lineno, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line:
            continue
        parts = line.split(",")
        if len(parts) != 2:
            raise ValueError(f"line {lineno}: expected 'x,y', got {line!r}")
        try:
            x, y = int(parts[0]), int(parts[1])
        except ValueError:
            raise ValueError(f"line {lineno}: non-integer coordinate in {line!r}") from None
        out.append((x, y))
    return out


def load_arrivals(path: str) -> List[Coord]:
    if not os.path.isfile(path):
        raise FileNotFoundError(f"No such input file: {path}")
    with open(path, "r") as f:
        return parse_arrivals(f)


def validate_arrivals(arrivals: Iterable[Coord], width: int, height: int) -> None:
    """Raise ValueError for the first coordinate outside [0,width) x [0,height)."""
    for t, (x, y) in enumerate(arrivals):
        if not (0 <= x < width and 0 <= y < height):
            raise ValueError(
                f"arrival {t} at ({x}, {y}) lies outside the {width}x{height} grid"
            )


def format_coord(coord: Coord) -> str:
    """Inverse of one parsed record, e.g. (6, 1) -> '6,1'."""
    return f"{coord[0]},{coord[1]}"

# -*- coding: utf-8 -*-
"""
Plain-text frames of a finished search.

  '#'  obstructed under the threshold
  'O'  on the recovered path
  '.'  free

One row per grid row, top row first.
"""

from __future__ import annotations
import os
from typing import Iterable, List, Optional, Tuple

from planners import reconstruct_path


def render_ascii(grid, threshold: int, path: Optional[Iterable[Tuple[int, int]]] = None) -> str:
    """Render the grid; a path cell on a wall is an error unless it is the goal."""
    on_path = set(path or ())
    goal = grid.position(grid.target)
    rows: List[str] = []
    blocked = grid.blocked_mask(threshold)
    for y in range(grid.height):
        chars = []
        for x in range(grid.width):
            is_blocked = bool(blocked[y, x])
            is_path = (x, y) in on_path
            if is_blocked and is_path and (x, y) != goal:
                raise ValueError(f"path crosses obstructed cell ({x}, {y}) at threshold {threshold}")
            chars.append("#" if is_blocked else "O" if is_path else ".")
        rows.append("".join(chars))
    return "\n".join(rows) + "\n"


def dump_frame(grid, threshold: int, iteration: int, outdir: str, prefix: str) -> str:
    """
    Write the path currently recorded in the grid's predecessor links to
    <outdir>/<prefix>/<iteration>.txt and return that path.
    """
    path = reconstruct_path(grid, grid.target)
    frame_dir = os.path.join(outdir, prefix)
    os.makedirs(frame_dir, exist_ok=True)
    out_path = os.path.join(frame_dir, f"{iteration}.txt")
    with open(out_path, "w") as f:
        f.write(render_ascii(grid, threshold, path))
    return out_path

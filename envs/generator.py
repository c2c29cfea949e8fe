#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
generator.py
------------
Random obstruction arrival orders for tests and benchmarks.

- Every order is a permutation of the non-corner cells (optionally truncated),
  so the two corners themselves never become walls.
- Reproducibility: explicit np.random.Generator.
- ensure_status="disconnect" retries until the full order cuts the corners
  apart (judged by the connected-component oracle in eval.oracle).

Usage (quick smoke test):
    python3 -m envs.generator
"""

from __future__ import annotations

from typing import List, Optional, Tuple

import numpy as np

from envs.grid import Grid
from eval.oracle import corners_connected

Coord = Tuple[int, int]


def _corner_free_cells(width: int, height: int) -> np.ndarray:
    ys, xs = np.divmod(np.arange(width * height), width)
    cells = np.column_stack([xs, ys])
    keep = ~(((xs == 0) & (ys == 0)) | ((xs == width - 1) & (ys == height - 1)))
    return cells[keep]


def generate_arrivals(width: int,
                      height: int,
                      count: Optional[int] = None,
                      rng: Optional[np.random.Generator] = None,
                      ensure_status: str = "any",
                      max_tries: int = 200) -> List[Coord]:
    """
    Parameters
    ----------
    width, height : grid dimensions
    count : number of arrivals (default: every non-corner cell)
    rng : np.random.Generator (default: fresh unseeded generator)
    ensure_status : 'any' | 'disconnect'
    max_tries : retries for ensure_status='disconnect'

    Returns
    -------
    list of (x, y) in arrival order
    """
    if ensure_status not in ("any", "disconnect"):
        raise ValueError(f"Unknown ensure_status '{ensure_status}'")
    rng = rng if rng is not None else np.random.default_rng()
    cells = _corner_free_cells(width, height)
    n = len(cells) if count is None else min(int(count), len(cells))

    for _ in range(max_tries):
        order = cells[rng.permutation(len(cells))[:n]]
        arrivals = [(int(x), int(y)) for x, y in order]
        if ensure_status == "any":
            return arrivals
        if not corners_connected(Grid(arrivals, width, height), n):
            return arrivals
    raise RuntimeError(
        f"Could not generate a disconnecting order for {width}x{height} with {n} arrivals"
    )


if __name__ == "__main__":
    rng = np.random.default_rng(0)
    arr = generate_arrivals(7, 7, rng=rng, ensure_status="disconnect")
    print(f"{len(arr)} arrivals, first five: {arr[:5]}")

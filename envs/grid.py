#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
grid.py
-------
Fixed-size 2D grid whose cells become permanent walls one at a time.

Cells live in flat NumPy arrays (row-major, index = y * width + x); neighbour
links are stored as indices into the same arrays, never as object references,
so a Grid can be copied without dangling links.

Per-cell state:
- blocked_at : arrival index at which the cell becomes a wall (NEVER otherwise)
- cost       : best known path cost from the search source (INF = unvisited)
- pred       : predecessor index on the best known path (-1 = none)
- neighbors  : (N, 4) table, columns follow DIRECTIONS, -1 = out of bounds

Grid convention: a cell is obstructed under threshold T iff blocked_at < T.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Tuple

import numpy as np


NEVER = np.iinfo(np.int64).max
INF = np.iinfo(np.int64).max

DIRECTIONS: Tuple[str, ...] = ("up", "right", "down", "left")

# 4-connected neighbourhood deltas as (dx, dy), same order as DIRECTIONS
DELTAS_4 = np.array([
    (0, -1), (1, 0), (0, 1), (-1, 0)
], dtype=np.int8)


@dataclass(frozen=True)
class Cell:
    """Read-only snapshot of one cell."""
    x: int
    y: int
    blocked_at: int
    cost: int
    pred: int
    neighbors: Tuple[int, ...]

    @property
    def visited(self) -> bool:
        return self.cost != INF

    def is_blocked(self, threshold: int) -> bool:
        return self.blocked_at < threshold


class Grid:
    """Obstruction grid built once from an arrival order and reused across searches."""

    def __init__(self, arrivals: Iterable[Sequence[int]], width: int, height: int):
        self.width = int(width)
        self.height = int(height)
        n = self.width * self.height

        self.blocked_at = np.full(n, NEVER, dtype=np.int64)
        self.cost = np.full(n, INF, dtype=np.int64)
        self.pred = np.full(n, -1, dtype=np.int64)

        # i-th arrival blocks at time i; a repeated coordinate keeps the later index
        for t, (x, y) in enumerate(arrivals):
            self.blocked_at[int(y) * self.width + int(x)] = t

        self.neighbors = self._link_neighbors(self.width, self.height)

    @staticmethod
    def _link_neighbors(width: int, height: int) -> np.ndarray:
        ys, xs = np.divmod(np.arange(width * height, dtype=np.int64), width)
        table = np.full((width * height, len(DIRECTIONS)), -1, dtype=np.int64)
        for k, (dx, dy) in enumerate(DELTAS_4):
            nx, ny = xs + int(dx), ys + int(dy)
            ok = (nx >= 0) & (nx < width) & (ny >= 0) & (ny < height)
            table[ok, k] = ny[ok] * width + nx[ok]
        return table

    # ------------------------------------------------------------------ #

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.height, self.width)

    def __len__(self) -> int:
        return self.width * self.height

    @property
    def source(self) -> int:
        """Far corner (width-1, height-1); every search starts here."""
        return self.index(self.width - 1, self.height - 1)

    @property
    def target(self) -> int:
        """Near corner (0, 0)."""
        return 0

    def index(self, x: int, y: int) -> int:
        return int(y) * self.width + int(x)

    def position(self, i: int) -> Tuple[int, int]:
        y, x = divmod(int(i), self.width)
        return (x, y)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cell(self, x: int, y: int) -> Cell:
        i = self.index(x, y)
        return Cell(
            x=int(x), y=int(y),
            blocked_at=int(self.blocked_at[i]),
            cost=int(self.cost[i]),
            pred=int(self.pred[i]),
            neighbors=tuple(int(j) for j in self.neighbors[i] if j >= 0),
        )

    def neighbor(self, x: int, y: int, direction: str) -> Optional[int]:
        """Index of the neighbour of (x, y) in 'direction', or None when out of bounds."""
        if not self.in_bounds(x, y):
            return None
        j = int(self.neighbors[self.index(x, y), DIRECTIONS.index(direction)])
        return None if j < 0 else j

    def is_blocked(self, i: int, threshold: int) -> bool:
        return bool(self.blocked_at[i] < threshold)

    def blocked_mask(self, threshold: int) -> np.ndarray:
        """(H, W) bool array: True = obstructed under 'threshold'."""
        return (self.blocked_at < threshold).reshape(self.height, self.width)

    def cost_map(self) -> np.ndarray:
        """(H, W) float array of current costs, inf where unvisited."""
        out = self.cost.astype(np.float64)
        out[self.cost == INF] = np.inf
        return out.reshape(self.height, self.width)

    def reset(self) -> None:
        """Forget the previous search; obstruction times and links are untouched."""
        self.cost.fill(INF)
        self.pred.fill(-1)

    def copy(self) -> "Grid":
        g = Grid.__new__(Grid)
        g.width, g.height = self.width, self.height
        g.blocked_at = self.blocked_at.copy()
        g.cost = self.cost.copy()
        g.pred = self.pred.copy()
        g.neighbors = self.neighbors.copy()
        return g

    def __repr__(self) -> str:
        n_blocked = int((self.blocked_at != NEVER).sum())
        return f"Grid(width={self.width}, height={self.height}, obstructions={n_blocked})"

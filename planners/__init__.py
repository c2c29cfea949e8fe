# -*- coding: utf-8 -*-
"""
Planners on obstruction grids with a unified API:
planner.plan(grid: Grid, threshold: int)
  -> {'success': bool, 'cost': int, 'path': List[(x,y)] or None, 'expanded': int}

Every planner searches from the far corner to the near corner and mutates the
grid's cost/pred arrays; shortest_path() wraps plan() with the reset.
"""

from __future__ import annotations
from typing import Any, Dict, Optional, Type

from .common import UNREACHABLE, reconstruct_path
from .bucket import BucketPlanner
from .bfs import BFSPlanner

# Mapping used by factories/CLIs
PLANNERS: Dict[str, Type] = {
    "bucket": BucketPlanner,
    "bfs": BFSPlanner,
}


def get_planner(name: str, **kwargs) -> Any:
    """
    Factory: instantiate a planner by name.

    Parameters
    ----------
    name : str
        One of: 'bucket', 'bfs'
    kwargs : dict
        Passed to the planner constructor (e.g., with_path=False)
    """
    name = name.strip().lower()
    if name not in PLANNERS:
        raise ValueError(f"Unknown planner '{name}'. Available: {sorted(PLANNERS)}")
    return PLANNERS[name](**kwargs)


def shortest_path(grid, threshold: int, planner: Optional[Any] = None, reset: bool = True) -> int:
    """
    Minimum moves from the far corner to (0, 0) with the first 'threshold'
    obstructions present, or UNREACHABLE.
    """
    if planner is None:
        planner = BucketPlanner(with_path=False)
    if reset:
        grid.reset()
    return int(planner.plan(grid, threshold)['cost'])


__all__ = [
    "BucketPlanner",
    "BFSPlanner",
    "PLANNERS",
    "UNREACHABLE",
    "get_planner",
    "reconstruct_path",
    "shortest_path",
]

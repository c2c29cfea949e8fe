# -*- coding: utf-8 -*-
"""Shared pieces of the grid planners: the unreachable sentinel and path recovery."""

from __future__ import annotations
from typing import Dict, List, Optional, Tuple

UNREACHABLE = -1


def reconstruct_path(grid, goal: int) -> Optional[List[Tuple[int, int]]]:
    """
    Follow predecessor links from 'goal' back to the search source.
    Returns (x, y) positions ordered source -> goal, or None if goal was never reached.
    """
    if grid.pred[goal] == -1 and goal != grid.source:
        return None
    path = []
    i = int(goal)
    while i != -1:
        path.append(grid.position(i))
        i = int(grid.pred[i])
    path.reverse()
    return path


def failure(expanded: int = 0) -> Dict:
    return {'success': False, 'cost': UNREACHABLE, 'path': None, 'expanded': expanded}

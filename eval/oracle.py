#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
oracle.py
---------
Search-free reachability answers, used to cross-check the planners and finders.

Connectivity comes from 4-connected component labelling of the free cells
(scipy.ndimage.label). The goal cell is labelled as free even when it is
obstructed, matching the planners, which test for the goal before testing
for walls.
"""

from __future__ import annotations

import numpy as np

try:
    from scipy.ndimage import label as cc_label
except Exception as e:
    raise ImportError(
        "scipy.ndimage is required for the connectivity oracle. Install with: pip install scipy"
    ) from e

# 4-connected structuring element
CROSS = np.array([[0, 1, 0],
                  [1, 1, 1],
                  [0, 1, 0]], dtype=np.uint8)


def corners_connected(grid, threshold: int) -> bool:
    """True if the far corner reaches (0, 0) with the first 'threshold' obstructions present."""
    src, goal = grid.source, grid.target
    if src == goal:
        return True
    if grid.is_blocked(src, threshold):
        return False

    free = ~grid.blocked_mask(threshold)
    gx, gy = grid.position(goal)
    free[gy, gx] = True

    labels, _ = cc_label(free.astype(np.uint8), structure=CROSS)
    sx, sy = grid.position(src)
    return bool(labels[sy, sx] == labels[gy, gx])


def brute_force_critical(grid, max_time: int) -> int:
    """
    Finder answer computed by a full forward sweep of the oracle:
    the threshold just before the first disconnected one, or max_time when
    the corners stay connected throughout.
    """
    for t in range(max_time + 1):
        if not corners_connected(grid, t):
            return max(t - 1, 0)
    return int(max_time)

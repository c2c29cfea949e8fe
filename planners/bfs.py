#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Breadth-First Search planner (unweighted shortest hops).
- Same contract as BucketPlanner; a FIFO queue replaces the cost buckets,
  which is equivalent because every move costs 1.
- Goal test before wall test; walls never relax their neighbours.
"""

from __future__ import annotations
from typing import Dict
from collections import deque

from .common import failure, reconstruct_path


class BFSPlanner:
    def __init__(self, with_path: bool = True):
        self.with_path = with_path

    def plan(self, grid, threshold: int) -> Dict:
        src, goal = grid.source, grid.target
        cost, pred = grid.cost, grid.pred
        blocked_at, neighbors = grid.blocked_at, grid.neighbors

        cost[src] = 0
        dq = deque()
        dq.append(src)
        expanded = 0

        while dq:
            node = dq.popleft()
            if node == goal:
                path = reconstruct_path(grid, goal) if self.with_path else None
                return {'success': True, 'cost': int(cost[goal]), 'path': path, 'expanded': expanded}
            if blocked_at[node] < threshold:
                continue
            expanded += 1

            new_cost = int(cost[node]) + 1
            for nb in neighbors[node]:
                if nb < 0 or new_cost >= cost[nb]:
                    continue
                cost[nb] = new_cost
                pred[nb] = node
                dq.append(int(nb))

        return failure(expanded)

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Cost-bucketed shortest-path planner (unit-weight Dijkstra).
- Searches from the far corner to the near corner of a Grid.
- Frontier: dict cost -> list of cell indices, drained in ascending cost order.
- A cell is a wall when its obstruction time is < threshold.
- The goal test runs before the wall test: a goal that already received a
  cost is returned even if it is itself obstructed.
"""

from __future__ import annotations
from typing import Dict, List
import heapq

from envs.grid import INF
from .common import failure, reconstruct_path


class BucketPlanner:
    def __init__(self, with_path: bool = True):
        self.with_path = with_path

    @staticmethod
    def _move(buckets: Dict[int, List[int]], keys: List[int], node: int, old: int, new: int):
        # decrease-key: drop node from its previous bucket, discard that bucket if emptied
        if old != INF and old in buckets:
            bucket = buckets[old]
            if node in bucket:
                bucket.remove(node)
            if not bucket:
                del buckets[old]
        if new not in buckets:
            buckets[new] = []
            heapq.heappush(keys, new)
        buckets[new].append(node)

    def plan(self, grid, threshold: int) -> Dict:
        src, goal = grid.source, grid.target
        cost, pred = grid.cost, grid.pred
        blocked_at, neighbors = grid.blocked_at, grid.neighbors

        cost[src] = 0
        buckets: Dict[int, List[int]] = {0: [src]}
        keys: List[int] = [0]
        expanded = 0

        while buckets:
            k = heapq.heappop(keys)
            nodes = buckets.pop(k, None)
            if nodes is None:
                continue  # bucket emptied by a decrease-key

            for node in nodes:
                if node == goal:
                    path = reconstruct_path(grid, goal) if self.with_path else None
                    return {'success': True, 'cost': int(cost[goal]), 'path': path, 'expanded': expanded}

                if blocked_at[node] < threshold:
                    continue
                expanded += 1

                new_cost = int(cost[node]) + 1
                for nb in neighbors[node]:
                    if nb < 0:
                        continue
                    old = int(cost[nb])
                    if new_cost >= old:
                        continue
                    pred[nb] = node
                    cost[nb] = new_cost
                    self._move(buckets, keys, int(nb), old, new_cost)

        return failure(expanded)

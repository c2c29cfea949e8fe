#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
metrics.py
----------
Checks the threshold finders rely on, computed independently of them.

What's inside
-------------
- monotonicity_report(): costs over a threshold sweep, flags any threshold
  pair where more obstructions made the path shorter or restored it
- finder_agreement(): narrowing vs. linear vs. oracle on one grid
- sum_probes() / sum_time_sec(): runtime helpers for report dicts
"""

from __future__ import annotations
from typing import Any, Dict, Iterable, List, Optional, Tuple
import time

from envs.grid import NEVER
from planners import UNREACHABLE, BucketPlanner, shortest_path
from finders import linear_search, narrowing_search
from .oracle import brute_force_critical


def monotonicity_report(grid,
                        thresholds: Optional[Iterable[int]] = None,
                        planner: Optional[Any] = None) -> Dict:
    """
    Run the planner at every threshold (ascending) and compare consecutive results.

    Returns
    -------
    {'thresholds': [...], 'costs': [...], 'violations': [(t_lo, t_hi), ...], 'monotone': bool}
    """
    if thresholds is None:
        finite = grid.blocked_at[grid.blocked_at != NEVER]
        hi = int(finite.max()) + 1 if finite.size else 0
        thresholds = range(hi + 1)
    ts = sorted(int(t) for t in thresholds)
    costs = [shortest_path(grid, t, planner=planner) for t in ts]

    violations: List[Tuple[int, int]] = []
    for (t_lo, c_lo), (t_hi, c_hi) in zip(zip(ts, costs), zip(ts[1:], costs[1:])):
        if c_hi == UNREACHABLE:
            continue
        if c_lo == UNREACHABLE or c_hi < c_lo:
            violations.append((t_lo, t_hi))

    return {'thresholds': ts, 'costs': costs, 'violations': violations, 'monotone': not violations}


def finder_agreement(grid, max_time: int, planner: Optional[Any] = None) -> Dict:
    planner = planner if planner is not None else BucketPlanner(with_path=False)

    t0 = time.perf_counter()
    fast = narrowing_search(grid, max_time, planner=planner)
    t1 = time.perf_counter()
    slow = linear_search(grid, max_time, planner=planner)
    t2 = time.perf_counter()
    oracle = brute_force_critical(grid, max_time)

    fast['time_sec'] = t1 - t0
    slow['time_sec'] = t2 - t1
    return {
        'narrowing': fast,
        'linear': slow,
        'oracle': oracle,
        'agree': fast['time'] == slow['time'] == oracle,
    }


def sum_probes(reports: Iterable[Dict]) -> int:
    return int(sum(int(r.get('probes', 0)) for r in reports))


def sum_time_sec(reports: Iterable[Dict]) -> float:
    return float(sum(float(r.get('time_sec', 0.0)) for r in reports))

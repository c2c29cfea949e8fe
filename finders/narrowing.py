#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
narrowing.py
------------
Locates the obstruction that first disconnects the two grid corners.

Three phases, each search preceded by grid.reset():
  1. coarse  : halving steps from max_time // 2 toward the boundary
  2. forward : +1 until the search fails (or max_time is reached)
  3. backward: -1 until the search succeeds again (or 0 is reached)

Phase 1 assumes reachability only ever goes from true to false as the
threshold grows. Phases 2 and 3 do not, so the answer is always settled by
the linear scans; phase 1 only shortens them.

The returned time t is the arrival index of the culprit: the search at t
still reaches the goal, the search at t + 1 does not.
"""

from __future__ import annotations
from typing import Any, Callable, Dict, Optional

from planners import BucketPlanner

ProbeCallback = Callable[[int, Dict, str], None]


def probe(grid, planner: Any, time: int) -> Dict:
    grid.reset()
    return planner.plan(grid, time)


def _reachable(res: Dict) -> bool:
    # a zero-move answer (1x1 grid) does not count as reachable here
    return res['cost'] > 0


def narrowing_search(grid,
                     max_time: int,
                     planner: Optional[Any] = None,
                     on_probe: Optional[ProbeCallback] = None) -> Dict:
    """
    Run all three phases and report the result with per-phase probe counts.

    Returns
    -------
    {'time': int, 'probes': int, 'phase_probes': {'coarse': n, 'forward': n, 'backward': n}}
    """
    if planner is None:
        planner = BucketPlanner(with_path=on_probe is not None)
    counts = {'coarse': 0, 'forward': 0, 'backward': 0}

    def run(t: int, phase: str) -> Dict:
        res = probe(grid, planner, t)
        counts[phase] += 1
        if on_probe is not None:
            on_probe(t, res, phase)
        return res

    time = max_time // 2
    step = time // 2
    while step > 0:
        if _reachable(run(time, 'coarse')):
            time += step
        else:
            time -= step
        step //= 2

    while time < max_time:
        if not run(time, 'forward')['success']:
            break
        time += 1

    while time > 0:
        if _reachable(run(time, 'backward')):
            break
        time -= 1

    return {'time': time, 'probes': sum(counts.values()), 'phase_probes': counts}


def find_critical_threshold(grid, max_time: int, planner: Optional[Any] = None,
                            on_probe: Optional[ProbeCallback] = None) -> int:
    return int(narrowing_search(grid, max_time, planner=planner, on_probe=on_probe)['time'])

# -*- coding: utf-8 -*-
"""
Linear sweep: probe every threshold from 0 upward until the search fails,
then step back to the last threshold that still reaches the goal.
Slow, but makes no monotonicity assumption about the early thresholds.
"""

from __future__ import annotations
from typing import Any, Dict, Optional

from planners import BucketPlanner
from .narrowing import ProbeCallback, probe


def linear_search(grid,
                  max_time: int,
                  planner: Optional[Any] = None,
                  on_probe: Optional[ProbeCallback] = None) -> Dict:
    if planner is None:
        planner = BucketPlanner(with_path=on_probe is not None)
    counts = {'forward': 0, 'backward': 0}

    def run(t: int, phase: str) -> Dict:
        res = probe(grid, planner, t)
        counts[phase] += 1
        if on_probe is not None:
            on_probe(t, res, phase)
        return res

    time = 0
    while time < max_time:
        if not run(time, 'forward')['success']:
            break
        time += 1

    while time > 0:
        if run(time, 'backward')['cost'] > 0:
            break
        time -= 1

    return {'time': time, 'probes': sum(counts.values()), 'phase_probes': counts}


def find_critical_threshold_linear(grid, max_time: int, planner: Optional[Any] = None,
                                   on_probe: Optional[ProbeCallback] = None) -> int:
    return int(linear_search(grid, max_time, planner=planner, on_probe=on_probe)['time'])

# -*- coding: utf-8 -*-
"""
Critical-threshold finders with a unified API:
finder(grid, max_time, planner=None, on_probe=None)
  -> {'time': int, 'probes': int, 'phase_probes': Dict[str, int]}

'time' is the arrival index of the obstruction that disconnects the corners.
"""

from __future__ import annotations
from typing import Callable, Dict

from .narrowing import find_critical_threshold, narrowing_search, probe
from .linear import find_critical_threshold_linear, linear_search

# Mapping used by factories/CLIs
FINDERS: Dict[str, Callable] = {
    "narrowing": narrowing_search,
    "linear": linear_search,
}


def get_finder(name: str) -> Callable:
    name = name.strip().lower()
    if name not in FINDERS:
        raise ValueError(f"Unknown finder '{name}'. Available: {sorted(FINDERS)}")
    return FINDERS[name]


__all__ = [
    "FINDERS",
    "find_critical_threshold",
    "find_critical_threshold_linear",
    "get_finder",
    "linear_search",
    "narrowing_search",
    "probe",
]

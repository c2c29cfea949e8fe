# eval/__init__.py
# -*- coding: utf-8 -*-
"""
Evaluation utilities: the connected-component oracle (SciPy) and the
monotonicity / finder-agreement metrics built on it.
"""

from __future__ import annotations

from .oracle import brute_force_critical, corners_connected
from .metrics import (
    finder_agreement,
    monotonicity_report,
    sum_probes,
    sum_time_sec,
)

__all__ = [
    # oracle
    "corners_connected", "brute_force_critical",
    # metrics
    "monotonicity_report", "finder_agreement", "sum_probes", "sum_time_sec",
]

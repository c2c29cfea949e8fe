import os, sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import numpy as np
import pytest
from envs.grid import Grid
from envs.generator import generate_arrivals
from planners import UNREACHABLE
from eval import (brute_force_critical, corners_connected, finder_agreement,
                  monotonicity_report, sum_probes, sum_time_sec)
from tests.example_data import EXAMPLE_ARRIVALS, EXAMPLE_SIZE, EXAMPLE_CRITICAL

def test_generator_never_blocks_corners():
    rng = np.random.default_rng(3)
    arrivals = generate_arrivals(6, 4, rng=rng)
    assert len(arrivals) == 6 * 4 - 2
    assert len(set(arrivals)) == len(arrivals)
    assert (0, 0) not in arrivals and (5, 3) not in arrivals

def test_generator_is_reproducible_and_truncates():
    a = generate_arrivals(8, 8, count=10, rng=np.random.default_rng(5))
    b = generate_arrivals(8, 8, count=10, rng=np.random.default_rng(5))
    assert a == b and len(a) == 10

def test_generator_disconnect_mode():
    rng = np.random.default_rng(9)
    arrivals = generate_arrivals(10, 10, count=40, rng=rng, ensure_status="disconnect")
    assert not corners_connected(Grid(arrivals, 10, 10), len(arrivals))
    with pytest.raises(ValueError):
        generate_arrivals(3, 3, ensure_status="failure")

def test_oracle_on_example():
    g = Grid(EXAMPLE_ARRIVALS, *EXAMPLE_SIZE)
    assert corners_connected(g, 0)
    assert corners_connected(g, EXAMPLE_CRITICAL)
    assert not corners_connected(g, EXAMPLE_CRITICAL + 1)
    assert brute_force_critical(g, len(EXAMPLE_ARRIVALS)) == EXAMPLE_CRITICAL

def test_example_is_monotone():
    g = Grid(EXAMPLE_ARRIVALS, *EXAMPLE_SIZE)
    rep = monotonicity_report(g)
    assert rep['monotone'] and rep['violations'] == []
    assert rep['thresholds'] == list(range(len(EXAMPLE_ARRIVALS) + 1))
    costs = rep['costs']
    assert costs[0] == 12
    reachable = [c for c in costs if c != UNREACHABLE]
    assert reachable == sorted(reachable)
    assert costs.index(UNREACHABLE) == EXAMPLE_CRITICAL + 1

def test_random_instances_are_monotone():
    rng = np.random.default_rng(21)
    for _ in range(5):
        arrivals = generate_arrivals(9, 7, rng=rng)
        rep = monotonicity_report(Grid(arrivals, 9, 7))
        assert rep['monotone']

def test_finder_agreement_report():
    g = Grid(EXAMPLE_ARRIVALS, *EXAMPLE_SIZE)
    rep = finder_agreement(g, len(EXAMPLE_ARRIVALS))
    assert rep['agree']
    assert rep['oracle'] == EXAMPLE_CRITICAL
    assert rep['narrowing']['probes'] < rep['linear']['probes']
    assert sum_probes([rep['narrowing'], rep['linear']]) == rep['narrowing']['probes'] + rep['linear']['probes']
    assert sum_time_sec([rep['narrowing'], rep['linear']]) >= 0.0

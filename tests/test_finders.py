import os, sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import numpy as np
import pytest
from envs.grid import Grid
from envs.generator import generate_arrivals
from planners import UNREACHABLE, get_planner, shortest_path
from finders import (FINDERS, find_critical_threshold, find_critical_threshold_linear,
                     get_finder, narrowing_search)
from eval.oracle import brute_force_critical
from tests.example_data import EXAMPLE_ARRIVALS, EXAMPLE_SIZE, EXAMPLE_CRITICAL, EXAMPLE_CULPRIT

def test_example_critical_obstruction():
    g = Grid(EXAMPLE_ARRIVALS, *EXAMPLE_SIZE)
    t = find_critical_threshold(g, len(EXAMPLE_ARRIVALS))
    assert t == EXAMPLE_CRITICAL
    assert EXAMPLE_ARRIVALS[t] == EXAMPLE_CULPRIT

def test_result_is_last_reachable_threshold():
    g = Grid(EXAMPLE_ARRIVALS, *EXAMPLE_SIZE)
    t = find_critical_threshold(g, len(EXAMPLE_ARRIVALS))
    assert shortest_path(g, t) != UNREACHABLE
    assert shortest_path(g, t + 1) == UNREACHABLE

def test_example_probe_schedule():
    g = Grid(EXAMPLE_ARRIVALS, *EXAMPLE_SIZE)
    seen = []
    rep = narrowing_search(g, len(EXAMPLE_ARRIVALS), on_probe=lambda t, res, phase: seen.append((phase, t)))
    # coarse: 12 -> 18 -> 21 -> 20; forward stops at 21; backward settles on 20
    assert seen == [('coarse', 12), ('coarse', 18), ('coarse', 21),
                    ('forward', 20), ('forward', 21),
                    ('backward', 21), ('backward', 20)]
    assert rep['phase_probes'] == {'coarse': 3, 'forward': 2, 'backward': 2}
    assert rep['probes'] == 7

def test_linear_finder_matches_on_example():
    g = Grid(EXAMPLE_ARRIVALS, *EXAMPLE_SIZE)
    assert find_critical_threshold_linear(g, len(EXAMPLE_ARRIVALS)) == EXAMPLE_CRITICAL

@pytest.mark.parametrize("planner_name", ["bucket", "bfs"])
def test_finders_agree_with_oracle_on_random_instances(planner_name):
    rng = np.random.default_rng(11)
    for _ in range(8):
        w, h = int(rng.integers(3, 14)), int(rng.integers(3, 14))
        arrivals = generate_arrivals(w, h, rng=rng, ensure_status="disconnect")
        g = Grid(arrivals, w, h)
        planner = get_planner(planner_name, with_path=False)
        expected = brute_force_critical(g, len(arrivals))
        assert find_critical_threshold(g, len(arrivals), planner=planner) == expected
        assert find_critical_threshold_linear(g, len(arrivals), planner=planner) == expected

def test_never_disconnected_returns_max_time():
    # two stacked cells are always adjacent, nothing can cut them apart
    g = Grid([], 1, 2)
    assert find_critical_threshold(g, 6) == 6

def test_single_cell_grid_walks_back_to_zero():
    # a zero-move answer is not counted as reachable by the corrections
    g = Grid([], 1, 1)
    assert find_critical_threshold(g, 8) == 0

def test_get_finder():
    assert set(FINDERS) == {"narrowing", "linear"}
    assert get_finder(" Linear ") is FINDERS["linear"]
    with pytest.raises(ValueError):
        get_finder("bisect")

import os, sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import matplotlib
matplotlib.use("Agg")

import pytest
from envs.grid import Grid
from planners import get_planner
from viz.frames import dump_frame, render_ascii
from viz.plot import save_frame
from tests.example_data import EXAMPLE_ARRIVALS, EXAMPLE_SIZE, EXAMPLE_P1_TIME

def _solved(threshold):
    g = Grid(EXAMPLE_ARRIVALS, *EXAMPLE_SIZE)
    g.reset()
    res = get_planner("bucket").plan(g, threshold)
    return g, res

def test_ascii_marks_walls_and_path():
    g, res = _solved(EXAMPLE_P1_TIME)
    text = render_ascii(g, EXAMPLE_P1_TIME, res['path'])
    rows = text.splitlines()
    assert len(rows) == 7 and all(len(r) == 7 for r in rows)
    assert text.count("#") == EXAMPLE_P1_TIME
    assert text.count("O") == res['cost'] + 1
    assert rows[0][0] == "O" and rows[6][6] == "O"
    assert rows[4][5] == "#"  # first arrival (5,4)

def test_ascii_without_path():
    g = Grid([(1, 0)], 2, 2)
    assert render_ascii(g, 1) == ".#\n..\n"

def test_ascii_rejects_path_through_wall():
    g = Grid([(1, 0)], 2, 2)
    with pytest.raises(ValueError):
        render_ascii(g, 1, [(1, 1), (1, 0), (0, 0)])
    # the goal itself may be a wall
    g2 = Grid([(0, 0)], 2, 2)
    assert render_ascii(g2, 1, [(1, 1), (1, 0), (0, 0)]) == "#O\n.O\n"

def test_dump_frame_writes_numbered_file(tmp_path):
    g, _ = _solved(EXAMPLE_P1_TIME)
    out = dump_frame(g, EXAMPLE_P1_TIME, 3, str(tmp_path), "fast")
    assert out == os.path.join(str(tmp_path), "fast", "3.txt")
    with open(out) as f:
        assert f.read() == render_ascii(g, EXAMPLE_P1_TIME, _solved(EXAMPLE_P1_TIME)[1]['path'])

def test_dump_frame_unreachable_has_no_path(tmp_path):
    g, res = _solved(24)
    assert not res['success']
    with open(dump_frame(g, 24, 0, str(tmp_path), "slow")) as f:
        assert "O" not in f.read()

def test_save_frame_png(tmp_path):
    g, res = _solved(EXAMPLE_P1_TIME)
    out = save_frame(g, EXAMPLE_P1_TIME, res['path'], str(tmp_path / "frames" / "0.png"),
                     title="t=12", show_costs=True)
    assert os.path.isfile(out) and os.path.getsize(out) > 0

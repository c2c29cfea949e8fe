import os, sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pytest
from envs.loader import format_coord, load_arrivals, parse_arrivals, validate_arrivals
from tests.example_data import EXAMPLE_PATH

def test_parse_skips_blank_lines_and_whitespace():
    assert parse_arrivals(["5,4\n", "\n", " 4,2 \n", ""]) == [(5, 4), (4, 2)]

def test_parse_reports_line_number():
    with pytest.raises(ValueError, match="line 2"):
        parse_arrivals(["1,2", "3;4"])
    with pytest.raises(ValueError, match="line 1"):
        parse_arrivals(["a,b"])

def test_load_example_file():
    arrivals = load_arrivals(EXAMPLE_PATH)
    assert len(arrivals) == 25
    assert arrivals[0] == (5, 4) and arrivals[-1] == (2, 0)

def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_arrivals(str(tmp_path / "nope.txt"))

def test_validate_rejects_out_of_bounds():
    validate_arrivals([(0, 0), (6, 6)], 7, 7)
    with pytest.raises(ValueError, match="arrival 1"):
        validate_arrivals([(0, 0), (7, 0)], 7, 7)
    with pytest.raises(ValueError):
        validate_arrivals([(-1, 3)], 7, 7)

def test_format_coord():
    assert format_coord((6, 1)) == "6,1"

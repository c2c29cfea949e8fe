#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
solve.py
--------
Answers both questions for one arrival list:
- p1: minimum moves between the corners with the first --time obstructions
- p2: the record of the obstruction that first disconnects the corners
Then prints the elapsed wall time in microseconds.

Example:
  python -m cli.solve --preset example
  python -m cli.solve --input input.txt --size 71x71 --time 1024 --planner bfs

Coordinates are x,y with (0,0) the goal corner; the search starts at the
opposite corner.
"""

from __future__ import annotations
import argparse
import os
import time
from typing import Dict, List, Optional, Tuple

from envs.grid import Grid
from envs.loader import format_coord, load_arrivals, validate_arrivals
from planners import PLANNERS, get_planner, shortest_path
from finders import FINDERS, get_finder

ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

# Canonical configurations: the small worked example and the full-size puzzle
PRESETS: Dict[str, Dict] = {
    "example": {"input": os.path.join(ROOT_DIR, "data", "example.txt"), "size": "7x7", "time": 12},
    "full": {"input": "input.txt", "size": "71x71", "time": 1024},
}


def _parse_size(s: str) -> Tuple[int, int]:
    """'WxH' -> (width, height)."""
    token = s.strip().lower()
    if "x" not in token:
        raise ValueError(f"Bad size '{token}', expected like 71x71")
    w, h = token.split("x")
    return int(w), int(h)


def build_parser(description: str) -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description=description)
    ap.add_argument("--preset", type=str, default=None, choices=sorted(PRESETS),
                    help="Fill --input/--size/--time from a named preset")
    ap.add_argument("--input", type=str, default=None, help="Arrival list, one x,y per line")
    ap.add_argument("--size", type=str, default=None, help="Grid size WxH (e.g., 71x71)")
    ap.add_argument("--time", type=int, default=None, help="Obstructions present for p1")
    ap.add_argument("--planner", type=str, default="bucket", help=f"Planner: {','.join(PLANNERS)}")
    return ap


def resolve_args(args: argparse.Namespace) -> argparse.Namespace:
    """Explicit flags win over the preset; the 'full' preset fills whatever is left."""
    preset = PRESETS[args.preset or "full"]
    for key in ("input", "size", "time"):
        if getattr(args, key) is None:
            setattr(args, key, preset[key])
    return args


def load_validated(path: str, width: int, height: int) -> List[Tuple[int, int]]:
    try:
        arrivals = load_arrivals(path)
        validate_arrivals(arrivals, width, height)
    except (OSError, ValueError) as e:
        raise SystemExit(f"[ERR] {e}")
    return arrivals


def solve(arrivals, width: int, height: int, p1_time: int,
          planner_name: str = "bucket", finder_name: str = "narrowing") -> Dict:
    """Both answers for one arrival list, with the culprit looked up in 'arrivals'."""
    grid = Grid(arrivals, width, height)
    planner = get_planner(planner_name, with_path=False)
    finder = get_finder(finder_name)

    p1 = shortest_path(grid, p1_time, planner=planner)
    report = finder(grid, len(arrivals), planner=planner)
    idx = report["time"]
    culprit: Optional[Tuple[int, int]] = arrivals[idx] if 0 <= idx < len(arrivals) else None
    return {"p1": p1, "p2_index": idx, "p2": culprit, "probes": report["probes"]}


def main(argv: Optional[List[str]] = None):
    ap = build_parser("Shortest corner-to-corner path and the first disconnecting obstruction.")
    ap.add_argument("--finder", type=str, default="narrowing", help=f"Finder: {','.join(FINDERS)}")
    ap.add_argument("--verbose", action="store_true", help="Also print probe counts")
    args = resolve_args(ap.parse_args(argv))

    width, height = _parse_size(args.size)
    start = time.perf_counter()
    arrivals = load_validated(args.input, width, height)
    out = solve(arrivals, width, height, args.time,
                planner_name=args.planner, finder_name=args.finder)
    elapsed_us = int((time.perf_counter() - start) * 1e6)

    print(f"p1: {out['p1']}")
    print(format_coord(out["p2"]) if out["p2"] is not None else "p2: none")
    print(f"{elapsed_us} us")
    if args.verbose:
        print(f"[INFO] culprit index={out['p2_index']} probes={out['probes']}")
    return out


if __name__ == "__main__":
    main()

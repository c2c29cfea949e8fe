#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
visualize.py
------------
Dumps one frame per finder probe so the two finders can be compared:
- <outdir>/slow/<iter>.txt : linear sweep from threshold 0 (forward probes only)
- <outdir>/fast/<iter>.txt : coarse narrowing + corrections
After the fast run, one extra frame shows the first disconnected threshold.
With --png, each frame is also rendered to <iter>.png.

Example:
  python -m cli.visualize --preset example --outdir vis --png
"""

from __future__ import annotations
import os
from typing import Dict, List, Optional

from tqdm import tqdm

from envs.grid import Grid
from planners import get_planner
from finders import linear_search, narrowing_search, probe
from viz.frames import dump_frame
from .solve import _parse_size, build_parser, load_validated, resolve_args


class FrameWriter:
    """on_probe callback: writes a numbered frame for every probe outside skip_phases."""

    def __init__(self, grid: Grid, outdir: str, prefix: str, png: bool = False, pbar=None,
                 skip_phases=()):
        self.grid = grid
        self.skip_phases = frozenset(skip_phases)
        self.outdir = outdir
        self.prefix = prefix
        self.png = png
        self.pbar = pbar
        self.iteration = 0
        self.written: List[str] = []

    def __call__(self, time: int, res: Dict, phase: str) -> None:
        if self.pbar is not None:
            self.pbar.update(1)
            self.pbar.set_postfix(phase=phase, t=time)
        if phase in self.skip_phases:
            return
        out = dump_frame(self.grid, time, self.iteration, self.outdir, self.prefix)
        self.written.append(out)
        if self.png:
            from viz.plot import save_frame
            save_frame(self.grid, time, res.get("path"),
                       os.path.splitext(out)[0] + ".png",
                       title=f"{phase} t={time} cost={res['cost']}", show_costs=True)
        self.iteration += 1


def main(argv: Optional[List[str]] = None):
    ap = build_parser("Dump per-probe frames for the linear and narrowing finders.")
    ap.add_argument("--outdir", type=str, default="vis", help="Output directory")
    ap.add_argument("--png", action="store_true", help="Also render PNG frames (matplotlib)")
    ap.add_argument("--skip-slow", action="store_true", help="Only dump the narrowing run")
    args = resolve_args(ap.parse_args(argv))

    width, height = _parse_size(args.size)
    arrivals = load_validated(args.input, width, height)
    grid = Grid(arrivals, width, height)
    planner = get_planner(args.planner, with_path=True)
    max_time = len(arrivals)

    if not args.skip_slow:
        with tqdm(desc="slow", unit="probe") as pbar:
            # the slow sweep only records its forward probes
            slow = FrameWriter(grid, args.outdir, "slow", png=args.png, pbar=pbar,
                               skip_phases=("backward",))
            report = linear_search(grid, max_time, planner=planner, on_probe=slow)
        print(f"[OK] slow: t={report['time']} frames={len(slow.written)}")

    with tqdm(desc="fast", unit="probe") as pbar:
        fast = FrameWriter(grid, args.outdir, "fast", png=args.png, pbar=pbar)
        report = narrowing_search(grid, max_time, planner=planner, on_probe=fast)
        # closing frame: the first threshold at which the corners are cut apart
        t_cut = report["time"] + 1
        fast(t_cut, probe(grid, planner, t_cut), "final")
    print(f"[OK] fast: t={report['time']} frames={len(fast.written)}")
    print(f"Saved: {os.path.abspath(args.outdir)}")
    return report


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
benchmark.py
------------
Random-instance sweep over (sizes × seeds × planners):
- Generates disconnecting arrival orders
- Runs the narrowing and linear finders and the SciPy oracle
- Records probe counts, runtimes and whether all three agree
- Writes rows to CSV

Example:
  python -m cli.benchmark --sizes 7x7,21x21,41x41 --num-envs 10 \
      --planners bucket,bfs --seed 0 --outdir results/csv
"""

from __future__ import annotations
import argparse
import csv
import os
import time
from typing import Dict, List, Optional, Tuple

import numpy as np
from tqdm import tqdm

from envs.grid import Grid
from envs.generator import generate_arrivals
from planners import get_planner, shortest_path
from eval.metrics import finder_agreement
from .solve import _parse_size

FIELDS = [
    "env_id", "W", "H", "arrivals", "planner", "seed",
    "p1_time", "p1_cost", "p1_time_sec",
    "critical", "oracle", "agree",
    "narrowing_probes", "narrowing_time_sec",
    "linear_probes", "linear_time_sec",
]


def _parse_sizes(s: str) -> List[Tuple[int, int]]:
    return [_parse_size(token) for token in s.split(",") if token.strip()]


def run_case(env_id: int, width: int, height: int, planner_name: str, seed: int) -> Dict:
    rng = np.random.default_rng(seed)
    arrivals = generate_arrivals(width, height, rng=rng, ensure_status="disconnect")
    grid = Grid(arrivals, width, height)
    planner = get_planner(planner_name, with_path=False)

    p1_time = len(arrivals) // 4
    t0 = time.perf_counter()
    p1_cost = shortest_path(grid, p1_time, planner=planner)
    t1 = time.perf_counter()
    agreement = finder_agreement(grid, len(arrivals), planner=planner)

    return {
        "env_id": env_id, "W": width, "H": height, "arrivals": len(arrivals),
        "planner": planner_name, "seed": seed,
        "p1_time": p1_time, "p1_cost": p1_cost, "p1_time_sec": t1 - t0,
        "critical": agreement["narrowing"]["time"],
        "oracle": agreement["oracle"],
        "agree": int(agreement["agree"]),
        "narrowing_probes": agreement["narrowing"]["probes"],
        "narrowing_time_sec": agreement["narrowing"]["time_sec"],
        "linear_probes": agreement["linear"]["probes"],
        "linear_time_sec": agreement["linear"]["time_sec"],
    }


def main(argv: Optional[List[str]] = None):
    ap = argparse.ArgumentParser(description="Finder/planner benchmark on random arrival orders.")
    ap.add_argument("--sizes", type=str, default="7x7,21x21", help="Comma list of WxH sizes")
    ap.add_argument("--num-envs", type=int, default=5, help="Instances per size")
    ap.add_argument("--planners", type=str, default="bucket,bfs", help="Comma list of planners")
    ap.add_argument("--seed", type=int, default=0, help="Base RNG seed")
    ap.add_argument("--outdir", type=str, default="results/csv", help="Output directory")
    args = ap.parse_args(argv)

    sizes = _parse_sizes(args.sizes)
    planners = [p.strip() for p in args.planners.split(",") if p.strip()]
    for name in planners:
        get_planner(name)  # fail fast on unknown names

    os.makedirs(args.outdir, exist_ok=True)
    stamp = time.strftime("%Y%m%d_%H%M%S")
    out_csv = os.path.join(args.outdir, f"benchmark_s{args.seed}_{stamp}.csv")
    tmp_csv = out_csv + f".tmp_{os.getpid()}"

    rows: List[Dict] = []
    total = len(sizes) * args.num_envs * len(planners)
    with open(tmp_csv, "w", newline="") as f, tqdm(total=total, desc="Benchmark") as pbar:
        w = csv.DictWriter(f, fieldnames=FIELDS)
        w.writeheader()
        env_id = 0
        for width, height in sizes:
            for k in range(args.num_envs):
                env_id += 1
                # same instance for every planner
                seed = (int(args.seed) * 1_000_003 + k * 97 + width * 11 + height * 13) % 2**32
                for name in planners:
                    row = run_case(env_id, width, height, name, seed)
                    w.writerow(row)
                    rows.append(row)
                    pbar.update(1)

    os.replace(tmp_csv, out_csv)
    print(f"[OK] Wrote: {out_csv}")

    print(f"{'planner':8} {'size':>7} {'agree':>5} {'fast':>5} {'slow':>5} {'fast[s]':>8} {'slow[s]':>8}")
    for r in rows:
        print(f"{r['planner']:8} {str(r['W']) + 'x' + str(r['H']):>7} {r['agree']:5d} "
              f"{r['narrowing_probes']:5d} {r['linear_probes']:5d} "
              f"{r['narrowing_time_sec']:8.4f} {r['linear_time_sec']:8.4f}")
    return rows


if __name__ == "__main__":
    main()

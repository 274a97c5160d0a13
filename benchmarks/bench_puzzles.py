#!/usr/bin/env python3
"""Micro-benchmark for the day 1 dial and day 2 ID classifier.

Parameters come from benchmark_config.toml next to this script. Run with
something like:

    uv run benchmarks/bench_puzzles.py

This is intentionally minimal and not a rigorous benchmark suite.
"""

from __future__ import annotations

import sys
import time
from datetime import datetime
from pathlib import Path

import pandas as pd
import tomllib
from loguru import logger

from advent_of_code.day1 import process_dial
from advent_of_code.day1_np import process_dial_np
from advent_of_code.day2 import RepeatMode, sum_invalid
from advent_of_code.verify_correctness import generate_rotations, process_dial_stepwise

# === Load config ===
SCRIPT_DIR = Path(__file__).parent.resolve()
CONFIG_FILE = SCRIPT_DIR / "benchmark_config.toml"

with open(CONFIG_FILE, "rb") as f:
    cfg = tomllib.load(f)

b = cfg["benchmark"]
o = cfg.get("output", {})
p = cfg.get("paths", {})

SEED = int(b.get("seed", 42))
ROTATIONS = int(b["rotations"])
MAX_MAGNITUDE = int(b["max_magnitude"])
REPEATS = int(b.get("repeats", 5))
ID_RANGE = (int(b["id_range_start"]), int(b["id_range_end"]))

SAVE_CSV = bool(o.get("save_results_to_csv", True))
LOG_LEVEL = o.get("log_level", "INFO")

RESULTS_DIR = SCRIPT_DIR / p.get("results_dir", "benchmark_results")
LOG_FILE = SCRIPT_DIR / p.get("log_file", "benchmark_results/benchmark.log")


def bench(func, *args, repeats: int = REPEATS):
    """Time the function over repeats, return (min time, last result)."""
    result = func(*args)  # warmup
    times = []
    for _ in range(repeats):
        t0 = time.perf_counter()
        result = func(*args)
        times.append(time.perf_counter() - t0)
    return min(times), result


def main() -> None:
    RESULTS_DIR.mkdir(exist_ok=True)
    logger.remove()
    logger.add(sys.stderr, level=LOG_LEVEL)
    logger.add(LOG_FILE, rotation="10 MB", retention="30 days", level="DEBUG")

    rotations = generate_rotations(ROTATIONS, MAX_MAGNITUDE, SEED)
    logger.info(f"Generated {ROTATIONS} rotations, max magnitude {MAX_MAGNITUDE}, seed={SEED}")

    impls = [
        ("Day 1", "Closed form", process_dial, (rotations,)),
        ("Day 1", "Stepwise", process_dial_stepwise, (rotations,)),
        ("Day 1", "NumPy", process_dial_np, (rotations,)),
        ("Day 2", "Exactly twice", sum_invalid, (*ID_RANGE, RepeatMode.EXACTLY_TWICE)),
        ("Day 2", "At least twice", sum_invalid, (*ID_RANGE, RepeatMode.AT_LEAST_TWICE)),
    ]

    rows = []
    baselines = {}
    for puzzle, name, func, args in impls:
        logger.info(f"Running {puzzle} / {name}...")
        t, result = bench(func, *args)
        baseline = baselines.setdefault(puzzle, t)
        rows.append(
            {
                "puzzle": puzzle,
                "implementation": name,
                "time_s": f"{t:.6f}",
                "speedup": f"{baseline / t:.2f}x" if t > 0 else "N/A",
                "result": str(result),
            }
        )
        logger.debug(f"{name}: {t:.6f}s -> {result}")

    df = pd.DataFrame(rows)
    print("\nAdvent of Code 2025 Benchmarks")
    print(df.to_string(index=False))

    if SAVE_CSV:
        stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        csv_path = RESULTS_DIR / f"benchmark_results_{stamp}.csv"
        df.to_csv(csv_path, index=False)
        logger.info(f"Saved results to {csv_path}")
        print(f"\nResults saved to: {csv_path.name}")


if __name__ == "__main__":  # pragma: no cover
    main()

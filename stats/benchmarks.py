#!/usr/bin/env python3
"""
Benchmarks for the splay tree data structure.

This script measures:
 1. Full tree build times for several sizes
 2. Shape statistics of randomly built trees
 3. Per-insert and per-delete cost in trees of various sizes
 4. The dequeue/enqueue simulation, with a per-phase and per-operation breakdown

Usage (from the repository root):
    python -m stats.benchmarks [--sizes 100 1000 10000] [--trials T] [--seed S]
"""
import argparse
import time
import gc
from pprint import pprint
from dataclasses import asdict
from statistics import mean, variance

import numpy as np
from tqdm import tqdm

from splay_trees.profiling import PerformanceTracker
from splay_trees.simulation import SimulationConfig, run_simulation
from splay_trees.splay_tree import delete, insert
from splay_trees.stats import tree_stats_
from tests.stats_splay_tree import random_keys, random_splay_tree_of_size, validate


def bench_build(sizes: list[int], rng: np.random.Generator) -> None:
    """Measure building trees of various sizes from random distinct keys."""
    for n in sizes:
        keys = random_keys(n, rng)
        t0 = time.perf_counter()
        root = None
        for key in keys:
            root = insert(root, key)
        elapsed = time.perf_counter() - t0
        print(f"[bench] build({n}): {elapsed:.4f}s")


def bench_tree_stats(n: int, rng: np.random.Generator) -> None:
    """Build a single random tree and print its stats."""
    root, _ = random_splay_tree_of_size(n, rng)
    stats = tree_stats_(root)
    print(f"[bench] random_splay_tree_of_size({n}) stats (valid={validate(root)}):")
    pprint(asdict(stats))


def _mean_var(times: list[float]) -> tuple[float, float]:
    """Mean and sample variance; the variance of fewer than two samples is 0.0."""
    if not times:
        return 0.0, 0.0
    if len(times) < 2:
        return times[0], 0.0
    return mean(times), variance(times)


def measure_single_ops(n: int, rng: np.random.Generator, trials: int = 200) -> tuple[float, float, float, float]:
    """
    Measure per-insert and per-delete cost in a tree of exactly `n` keys,
    averaged over `trials` operations on the same tree.
    Returns (insert_avg, insert_var, delete_avg, delete_var).
    """
    root, keys = random_splay_tree_of_size(n, rng)
    # Fresh keys come from above the key space used by random_keys
    fresh = [(1 << 24) + i for i in range(trials)]
    victims = [int(k) for k in rng.choice(keys, size=min(trials, n), replace=False)]

    gc.collect()
    gc.disable()
    try:
        insert_times = []
        delete_times = []
        for new_key, old_key in zip(fresh, victims):
            t0 = time.perf_counter()
            root = insert(root, new_key)
            insert_times.append(time.perf_counter() - t0)

            t0 = time.perf_counter()
            root = delete(root, old_key)
            delete_times.append(time.perf_counter() - t0)
    finally:
        gc.enable()

    return (*_mean_var(insert_times), *_mean_var(delete_times))


def bench_single_ops(sizes: list[int], rng: np.random.Generator, trials: int) -> None:
    """Run measure_single_ops for each size and print results."""
    for n in tqdm(sizes, desc="single ops", leave=False):
        ins_avg, ins_var, del_avg, del_var = measure_single_ops(n, rng, trials)
        tqdm.write(
            f"[bench] Insert into size {n:<7} → avg {ins_avg*1e6:8.2f} µs   σ²={ins_var*1e12:8.2f} µs²"
        )
        tqdm.write(
            f"[bench] Delete from size {n:<7} → avg {del_avg*1e6:8.2f} µs   σ²={del_var*1e12:8.2f} µs²"
        )


def bench_simulation(sizes: list[int], seed: int) -> None:
    """Time the dequeue/enqueue simulation for each size."""
    for n in sizes:
        result = run_simulation(SimulationConfig(size=n, seed=seed))
        print(f"[bench] simulate(size={n}): {result.time_per_iteration*1e6:8.2f} µs per iteration")


def bench_simulation_breakdown(n: int, seed: int) -> str:
    """
    Run one simulation with the tracker enabled and return its report: the
    dequeue and enqueue phases next to the engine operations they call.
    """
    tracker = PerformanceTracker.get_instance()
    tracker.reset()
    tracker.enable()
    try:
        run_simulation(SimulationConfig(size=n, seed=seed))
        return tracker.report()
    finally:
        tracker.disable()
        tracker.reset()


def main():
    parser = argparse.ArgumentParser(description="Splay tree benchmarks")
    parser.add_argument("--sizes", nargs='+', type=int, default=[100, 1000, 10_000],
                        help="Tree sizes for build and single-op benchmarks")
    parser.add_argument("--trials", type=int, default=100,
                        help="Number of operations per size for single-op benchmarks (>= 1)")
    parser.add_argument("--seed", type=int, default=831970590,
                        help="Seed for all random keys")
    args = parser.parse_args()
    if args.trials < 1:
        parser.error(f"--trials must be >= 1, got {args.trials}")
    rng = np.random.default_rng(args.seed)

    print("\n=== Full Tree Build ===")
    bench_build([10, 100, 1000, 10_000, 100_000], rng)

    print("\n=== Random Tree Stats ===")
    bench_tree_stats(100_000, rng)

    print("\n=== Single-Operation Benchmarks ===")
    bench_single_ops(args.sizes, rng, args.trials)

    print("\n=== Simulation ===")
    bench_simulation(args.sizes, args.seed)

    print("\n=== Simulation Breakdown ===")
    print(bench_simulation_breakdown(max(args.sizes), args.seed))


if __name__ == "__main__":
    main()

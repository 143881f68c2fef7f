"""Benchmark runner comparing exact-hv and Pymoo on synthetic Pareto fronts.

For every front shape, number of objectives and front size, this script
computes the hypervolume with both libraries, records the runtime of each and
the relative difference between them.

Usage:
    python benchmarks/fronts/run_benchmark.py
"""

import json
import logging
import sys
import time
from collections import defaultdict
from datetime import UTC, datetime
from pathlib import Path

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import numpy as np

from benchmarks.fronts.problems import FRONTS, REF_OFFSET
from benchmarks.metrics import reference_hypervolume
from exact_hv import compute

# Configure logging
logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)

# Experiment parameters
N_OBJECTIVES = [2, 3, 4, 5]
N_POINTS = [10, 25, 50]
N_RUNS = 5
SEEDS = list(range(N_RUNS))


def run_exact_hv(points: np.ndarray, ref_point: np.ndarray) -> tuple[float, float]:
    """Compute the hypervolume using exact-hv.

    Returns:
        Tuple of (hypervolume, elapsed_time_seconds).
    """
    start_time = time.perf_counter()
    hv = compute(points, ref_point)
    return hv, time.perf_counter() - start_time


def run_pymoo(points: np.ndarray, ref_point: np.ndarray) -> tuple[float, float]:
    """Compute the hypervolume using Pymoo.

    Returns:
        Tuple of (hypervolume, elapsed_time_seconds).
    """
    start_time = time.perf_counter()
    hv = reference_hypervolume(points, ref_point)
    return hv, time.perf_counter() - start_time


def run_benchmark() -> dict:
    """Run the full benchmark suite.

    Returns:
        Dictionary containing metadata and results.
    """
    metadata = {
        "timestamp": datetime.now(UTC).isoformat(),
        "parameters": {
            "n_objectives": N_OBJECTIVES,
            "n_points": N_POINTS,
            "ref_offset": REF_OFFSET,
            "n_runs": N_RUNS,
            "seeds": SEEDS,
        },
    }

    results = []

    total_runs = len(FRONTS) * len(N_OBJECTIVES) * len(N_POINTS) * N_RUNS
    current_run = 0

    for front_name, front_fn in FRONTS.items():
        for n_obj in N_OBJECTIVES:
            ref_point = np.full(n_obj, REF_OFFSET)
            for n_points in N_POINTS:
                for seed in SEEDS:
                    current_run += 1
                    logger.info(
                        f"Running [{current_run}/{total_runs}]: {front_name} front, "
                        f"{n_points} points, {n_obj} objectives (seed={seed})"
                    )

                    points = front_fn(n_points, n_obj, np.random.default_rng(seed))
                    hv, elapsed = run_exact_hv(points, ref_point)
                    hv_ref, elapsed_ref = run_pymoo(points, ref_point)
                    rel_diff = abs(hv - hv_ref) / max(abs(hv_ref), 1e-300)

                    results.append(
                        {
                            "front": front_name,
                            "n_obj": n_obj,
                            "n_points": n_points,
                            "seed": seed,
                            "hypervolume": hv,
                            "reference_hypervolume": hv_ref,
                            "relative_difference": rel_diff,
                            "time_seconds": elapsed,
                            "reference_time_seconds": elapsed_ref,
                        }
                    )

                    logger.info(f"  HV: {hv:.6f}, diff: {rel_diff:.2e}, Time: {elapsed:.4f}s vs {elapsed_ref:.4f}s")

                    if rel_diff > 1e-9:
                        logger.warning(f"  Hypervolume disagrees with pymoo: {hv} vs {hv_ref}")

    return {"metadata": metadata, "results": results}


def print_summary(results: dict) -> None:
    """Print a summary table of the benchmark results.

    Args:
        results: The benchmark results dictionary.
    """
    timings = defaultdict(lambda: defaultdict(list))
    worst_diff = defaultdict(float)

    for r in results["results"]:
        key = (r["front"], r["n_obj"], r["n_points"])
        timings[key]["exact-hv"].append(r["time_seconds"])
        timings[key]["pymoo"].append(r["reference_time_seconds"])
        worst_diff[key] = max(worst_diff[key], r["relative_difference"])

    print("\n" + "=" * 72)
    print("BENCHMARK SUMMARY")
    print("=" * 72)
    print(f"\nParameters: objectives={N_OBJECTIVES}, points={N_POINTS}, runs={N_RUNS}")
    print()

    header = f"{'Front':<12}{'n_obj':>6}{'n_pts':>7}{'exact-hv [s]':>15}{'pymoo [s]':>13}{'max rel diff':>16}"
    print(header)
    print("-" * 72)

    for key in sorted(timings.keys()):
        front, n_obj, n_points = key
        row = f"{front:<12}{n_obj:>6}{n_points:>7}"
        row += f"{np.mean(timings[key]['exact-hv']):>15.4f}"
        row += f"{np.mean(timings[key]['pymoo']):>13.4f}"
        row += f"{worst_diff[key]:>16.2e}"
        print(row)

    print("-" * 72)
    print()


def main() -> None:
    """Main entry point for the benchmark."""
    logger.info("Starting hypervolume benchmark suite")
    logger.info(f"Parameters: objectives={N_OBJECTIVES}, points={N_POINTS}, runs={N_RUNS}")

    results = run_benchmark()

    # Save results to JSON
    output_path = Path(__file__).parent / "results" / "benchmark_results.json"
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w") as f:
        json.dump(results, f, indent=2)

    logger.info(f"Results saved to {output_path}")

    print_summary(results)


if __name__ == "__main__":
    main()

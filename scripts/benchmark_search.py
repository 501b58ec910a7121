#!/usr/bin/env python3
"""
Benchmark search strategies on random obstacle grids.
Writes one CSV row per (trial, strategy) and prints a per-strategy summary.
"""

import os
import sys
import argparse
import logging
from pathlib import Path

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from pixel_astar.evaluation import run_benchmark, summarize
from pixel_astar.utils import load_config, setup_logging


def main():
    parser = argparse.ArgumentParser(description="Benchmark A* against uniform-cost search")
    parser.add_argument(
        "--config", type=str, default=None, help="Configuration file path"
    )
    parser.add_argument(
        "--output", type=str, default=None, help="Output CSV file"
    )
    parser.add_argument(
        "--trials", type=int, default=None, help="Number of random grids"
    )
    parser.add_argument(
        "--size", type=int, default=None, help="Grid side length in cells"
    )

    args = parser.parse_args()

    config = load_config(args.config)
    setup_logging(config.logging)
    logger = logging.getLogger(__name__)

    evaluation_config = dict(config.evaluation)
    evaluation_config['planning'] = config.planning
    if args.trials is not None:
        evaluation_config['num_trials'] = args.trials
    if args.size is not None:
        evaluation_config['grid_size'] = args.size

    results = run_benchmark(evaluation_config)

    output = Path(args.output or config.output_paths.get('benchmark_csv', 'results/benchmark.csv'))
    output.parent.mkdir(parents=True, exist_ok=True)
    results.to_csv(output, index=False)
    logger.info(f"Benchmark results saved to {output}")

    print("\nSEARCH BENCHMARK SUMMARY")
    print("=" * 50)
    print(summarize(results).to_string(float_format=lambda v: f"{v:.3f}"))


if __name__ == "__main__":
    main()

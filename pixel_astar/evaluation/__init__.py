"""
Search strategy benchmarking.
"""

from pixel_astar.evaluation.benchmark import STRATEGIES, random_grid, run_benchmark, summarize

__all__ = ["STRATEGIES", "random_grid", "run_benchmark", "summarize"]

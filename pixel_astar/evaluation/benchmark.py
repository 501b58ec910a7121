"""
Strategy benchmark on random obstacle grids.
Runs every configured search strategy on the same seeded grids and tabulates
success, cost, expansions and time with pandas.
"""

import logging
from typing import Any, Dict, List, Optional, Type

import numpy as np
import pandas as pd

from pixel_astar.planning.astar_search import AStarSearch, SearchStrategy
from pixel_astar.planning.graph_builder import GridGraphBuilder
from pixel_astar.planning.path_finder import PathFinder
from pixel_astar.planning.uniform_cost import UniformCostSearch

STRATEGIES: Dict[str, Type[SearchStrategy]] = {
    AStarSearch.name: AStarSearch,
    UniformCostSearch.name: UniformCostSearch,
}

logger = logging.getLogger(__name__)


def random_grid(rng: np.random.Generator, size: int, obstacle_density: float) -> np.ndarray:
    """Walkable mask with opposite corners kept free."""
    walkable = rng.random((size, size)) >= obstacle_density
    walkable[0, 0] = True
    walkable[-1, -1] = True
    return walkable


def run_benchmark(config: Optional[Dict[str, Any]] = None) -> pd.DataFrame:
    """
    Benchmark search strategies.

    Config keys:
        grid_size (64), obstacle_density (0.2), num_trials (10), seed (0),
        strategies (all registered), planning (builder/heuristic config)

    Returns:
        One row per (trial, strategy)
    """
    config = config or {}

    grid_size = config.get('grid_size', 64)
    density = config.get('obstacle_density', 0.2)
    num_trials = config.get('num_trials', 10)
    strategy_names = config.get('strategies', list(STRATEGIES))
    planning_config = config.get('planning', {})

    unknown = [name for name in strategy_names if name not in STRATEGIES]
    if unknown:
        raise ValueError(f"Unknown strategies {unknown}, expected some of {list(STRATEGIES)}")

    rng = np.random.default_rng(config.get('seed', 0))
    builder = GridGraphBuilder(planning_config)

    rows: List[Dict[str, Any]] = []

    for trial in range(num_trials):
        graph = builder.build_from_array(random_grid(rng, grid_size, density))
        finder = PathFinder(graph, planning_config)
        finder.set_start((0, 0)).set_goal((grid_size - 1, grid_size - 1))

        for name in strategy_names:
            result = finder.find_path(STRATEGIES[name])
            rows.append({
                'trial': trial,
                'strategy': name,
                'success': result.success,
                'total_cost': result.total_cost,
                'path_length': len(result.path),
                'nodes_expanded': result.nodes_expanded,
                'nodes_generated': result.metrics.nodes_generated,
                'planning_time_ms': result.planning_time * 1000.0,
            })

        if trial % 10 == 0:
            logger.info(f"Benchmark trial {trial + 1}/{num_trials}")

    return pd.DataFrame(rows)


def summarize(results: pd.DataFrame) -> pd.DataFrame:
    """Per-strategy success rate and means over successful runs."""
    summary = (results.groupby('strategy', sort=False)['success']
               .mean().rename('success_rate').to_frame())

    solved = results[results['success']]
    means = solved.groupby('strategy').agg(
        mean_cost=('total_cost', 'mean'),
        mean_nodes_expanded=('nodes_expanded', 'mean'),
        mean_planning_time_ms=('planning_time_ms', 'mean'),
    )

    return summary.join(means)

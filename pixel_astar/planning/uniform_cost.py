"""
Uniform-cost search: A* without a heuristic, i.e. Dijkstra's algorithm.
Reference strategy for checking A* optimality and for benchmarks.
"""

from typing import Any, Dict, Optional

from pixel_astar.planning.astar_search import AStarSearch
from pixel_astar.planning.heuristics import zero_heuristic


class UniformCostSearch(AStarSearch):
    """Expands nodes strictly in order of accumulated cost."""

    name = 'uniform_cost'

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        super().__init__(config, heuristic=zero_heuristic)

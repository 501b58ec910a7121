"""
A* heuristics.
Named distance estimates between two nodes, selected by configuration.
"""

import logging
import math
from typing import Any, Callable, Dict, List, Tuple

import numpy as np

from pixel_astar.planning.node import GridNode, SearchNode

HeuristicFunction = Callable[[SearchNode, SearchNode], float]

SQRT2 = math.sqrt(2.0)


def node_metric(current: SearchNode, goal: SearchNode) -> float:
    """Whatever the node type itself reports."""
    return current.heuristic_to(goal)


def euclidean_distance(current: SearchNode, goal: SearchNode) -> float:
    return math.hypot(goal.x - current.x, goal.y - current.y)


def manhattan_distance(current: SearchNode, goal: SearchNode) -> float:
    # Overestimates on 8-connected grids; admissible only without diagonals
    return abs(goal.x - current.x) + abs(goal.y - current.y)


def octile_distance(current: SearchNode, goal: SearchNode) -> float:
    """Exact cost on an obstacle-free 8-connected grid."""
    dx = abs(goal.x - current.x)
    dy = abs(goal.y - current.y)
    return (SQRT2 - 1.0) * min(dx, dy) + max(dx, dy)


def chebyshev_distance(current: SearchNode, goal: SearchNode) -> float:
    return max(abs(goal.x - current.x), abs(goal.y - current.y))


def zero_heuristic(current: SearchNode, goal: SearchNode) -> float:
    return 0.0


HEURISTIC_FUNCTIONS: Dict[str, HeuristicFunction] = {
    'node': node_metric,
    'euclidean': euclidean_distance,
    'manhattan': manhattan_distance,
    'octile': octile_distance,
    'chebyshev': chebyshev_distance,
    'zero': zero_heuristic,
}


class AStarHeuristics:
    """
    Heuristic selector for A* search.

    Config keys:
        heuristic_type: one of HEURISTIC_FUNCTIONS (default 'node')
        weight: multiplier on the estimate (default 1.0); values above 1
            trade optimality for fewer expansions
    """

    def __init__(self, config: Dict[str, Any] = None):
        config = config or {}
        self.config = config
        self.logger = logging.getLogger(__name__)

        self.heuristic_type = config.get('heuristic_type', 'node')
        self.weight = float(config.get('weight', 1.0))

        if self.heuristic_type not in HEURISTIC_FUNCTIONS:
            self.logger.warning(
                f"Unknown heuristic type: {self.heuristic_type}, using node metric"
            )
            self.heuristic_type = 'node'

        if self.weight < 0.0:
            raise ValueError(f"Heuristic weight must be non-negative, got {self.weight}")
        if self.weight > 1.0:
            self.logger.warning(
                f"Heuristic weight {self.weight} > 1: paths may not be optimal"
            )

        self.heuristic_func = HEURISTIC_FUNCTIONS[self.heuristic_type]

        self.logger.debug(f"A* heuristic: {self.heuristic_type} (weight {self.weight})")

    def compute_heuristic(self, current: SearchNode, goal: SearchNode) -> float:
        return self.weight * self.heuristic_func(current, goal)

    __call__ = compute_heuristic

    def validate_admissibility(self, grid_size: Tuple[int, int]) -> Dict[str, bool]:
        """
        Check each registered heuristic against the true minimum cost of an
        obstacle-free 8-connected grid.

        Args:
            grid_size: (width, height) of the grid to sample

        Returns:
            Heuristic name -> admissible on the sampled pairs
        """
        width, height = grid_size
        corners = [(0, 0), (width - 1, 0), (0, height - 1), (width - 1, height - 1),
                   (width // 2, height // 2)]
        test_points: List[Tuple[GridNode, GridNode]] = [
            (GridNode(*a), GridNode(*b)) for a in corners for b in corners if a != b
        ]

        results = {}

        for name, func in HEURISTIC_FUNCTIONS.items():
            estimates = np.array([self.weight * func(a, b) for a, b in test_points])
            true_costs = np.array([octile_distance(a, b) for a, b in test_points])

            is_admissible = bool(np.all(estimates <= true_costs + 1e-9))
            if not is_admissible:
                worst = int(np.argmax(estimates - true_costs))
                self.logger.warning(
                    f"Heuristic {name} overestimates: "
                    f"{estimates[worst]:.3f} > {true_costs[worst]:.3f}"
                )

            results[name] = is_admissible

        return results

    def get_heuristic_info(self) -> Dict[str, Any]:
        return {
            'heuristic_type': self.heuristic_type,
            'weight': self.weight,
            'available_heuristics': list(HEURISTIC_FUNCTIONS.keys()),
        }

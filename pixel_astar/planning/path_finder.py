"""
PathFinder facade.
Binds one start/goal pair to a graph, runs a search strategy and turns its
parent links into an ordered path.
"""

import logging
import numbers
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, Type, Union

from pixel_astar.planning.astar_search import (
    AStarSearch, SearchMetrics, SearchOutcome, SearchStrategy,
)
from pixel_astar.planning.exceptions import PathPlanningError
from pixel_astar.planning.graph_builder import GridGraph, NodeGraph
from pixel_astar.planning.node import SearchNode
from pixel_astar.planning.path_reconstructor import reconstruct_path

NodeRef = Union[SearchNode, int, Tuple[int, int]]


@dataclass
class SearchResult:
    """Result of one path search."""
    success: bool
    path: List[SearchNode]
    total_cost: float
    metrics: SearchMetrics = field(default_factory=SearchMetrics)
    strategy: str = AStarSearch.name

    @property
    def positions(self) -> List[Tuple[Any, Any]]:
        return [node.position for node in self.path]

    @property
    def nodes_expanded(self) -> int:
        return self.metrics.nodes_expanded

    @property
    def planning_time(self) -> float:
        return self.metrics.planning_time

    def as_dict(self) -> Dict[str, Any]:
        return {
            'success': self.success,
            'strategy': self.strategy,
            'path': self.positions,
            'path_length': len(self.path),
            'total_cost': self.total_cost,
            **self.metrics.as_dict(),
        }


class PathFinder:
    """
    Facade over a search strategy.

    Usage:
        finder = PathFinder(graph).set_start((0, 0)).set_goal((2, 2))
        result = finder.find_path(AStarSearch)
    """

    def __init__(self, graph: NodeGraph, config: Optional[Dict[str, Any]] = None):
        self.graph = graph
        self.config = config or {}
        self.logger = logging.getLogger(__name__)

        self.start: Optional[SearchNode] = None
        self.goal: Optional[SearchNode] = None

        self.planning_statistics = {
            'total_plans': 0,
            'successful_plans': 0,
            'average_planning_time': 0.0,
            'average_nodes_expanded': 0.0,
            'average_path_length': 0.0,
        }

    def set_start(self, node: NodeRef) -> 'PathFinder':
        self.start = self._resolve(node)
        return self

    def set_goal(self, node: NodeRef) -> 'PathFinder':
        self.goal = self._resolve(node)
        return self

    def _resolve(self, node: NodeRef) -> SearchNode:
        """
        Turn a node, arena index or (x, y) grid address into a graph node.

        Raises:
            InvalidCoordinateError: (x, y) outside a GridGraph
            PathPlanningError: node not in this graph, unknown index
        """
        if isinstance(node, SearchNode):
            if node not in self.graph:
                raise PathPlanningError(f"{node!r} does not belong to this graph")
            return node

        if isinstance(node, tuple):
            if not isinstance(self.graph, GridGraph):
                raise PathPlanningError("Coordinate addressing requires a GridGraph")
            return self.graph.node_at(*node)

        if (isinstance(node, numbers.Integral) and not isinstance(node, bool)
                and 0 <= node < len(self.graph)):
            return self.graph.node(int(node))

        raise PathPlanningError(f"Unknown node reference: {node!r}")

    def find_path(self, strategy: Union[SearchStrategy, Type[SearchStrategy]] = AStarSearch) -> SearchResult:
        """
        Find the cheapest path between the bound start and goal.

        Args:
            strategy: SearchStrategy instance or class (instantiated with the
                finder's config)

        Returns:
            SearchResult; success is False when the goal is unreachable
        """
        if self.start is None or self.goal is None:
            raise PathPlanningError("Start and goal must be set before searching")

        if isinstance(strategy, type):
            strategy = strategy(self.config)

        self.logger.debug(
            f"Searching {self.start.position} -> {self.goal.position} with {strategy.name}"
        )

        # start == goal is found on the first pop, traversable or not
        endpoint_blocked = not self.start.traversable or not self.goal.traversable
        if endpoint_blocked and self.start is not self.goal:
            blocked = self.start if not self.start.traversable else self.goal
            self.logger.info(f"{blocked.position} is not traversable, no path possible")
            result = SearchResult(
                success=False, path=[], total_cost=float('inf'),
                metrics=SearchMetrics(), strategy=strategy.name,
            )
            self._update_statistics(result)
            return result

        outcome: SearchOutcome = strategy.search(self.graph, self.start, self.goal)

        result = SearchResult(
            success=outcome.success,
            path=reconstruct_path(self.graph, outcome),
            total_cost=outcome.total_cost,
            metrics=outcome.metrics,
            strategy=strategy.name,
        )

        self._update_statistics(result)

        self.logger.info(
            f"{strategy.name} {'success' if result.success else 'failure'}: "
            f"{len(result.path)} nodes, cost {result.total_cost:.3f}, "
            f"{result.nodes_expanded} expanded in {result.planning_time * 1000.0:.2f}ms"
        )

        return result

    def _update_statistics(self, result: SearchResult):
        self.planning_statistics['total_plans'] += 1

        if result.success:
            self.planning_statistics['successful_plans'] += 1

            # Running averages
            n = self.planning_statistics['successful_plans']

            self.planning_statistics['average_planning_time'] = (
                (n - 1) * self.planning_statistics['average_planning_time'] + result.planning_time
            ) / n

            self.planning_statistics['average_nodes_expanded'] = (
                (n - 1) * self.planning_statistics['average_nodes_expanded'] + result.nodes_expanded
            ) / n

            self.planning_statistics['average_path_length'] = (
                (n - 1) * self.planning_statistics['average_path_length'] + len(result.path)
            ) / n

    def get_statistics(self) -> Dict[str, Any]:
        """Get planning statistics."""
        stats = self.planning_statistics.copy()

        if stats['total_plans'] > 0:
            stats['success_rate'] = stats['successful_plans'] / stats['total_plans']
        else:
            stats['success_rate'] = 0.0

        return stats

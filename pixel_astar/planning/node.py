"""
Search graph nodes.
Nodes expose position, an edge metric and a heuristic metric. Adjacency is
stored as arena indices so nodes never own one another.
"""

import math
from abc import ABC, abstractmethod
from typing import List, NamedTuple, Optional, Tuple, Union

from pixel_astar.planning.exceptions import MalformedGraphError

Number = Union[int, float]


class Edge(NamedTuple):
    """Directed edge to the node stored at ``target`` in the arena."""
    target: int
    cost: float


class SearchNode(ABC):
    """
    Addressable point in the search space.

    Concrete node types supply ``local_cost_to`` and ``heuristic_to``; the
    search only relies on these two metrics, the position and the adjacency
    list. ``index`` is assigned when the node is added to a ``NodeGraph``.
    """

    def __init__(self, x: Number, y: Number, traversable: bool = True):
        self._x = x
        self._y = y
        self.traversable = traversable
        self.index: Optional[int] = None
        self.neighbors: List[Edge] = []
        self._neighbor_set = set()

    @property
    def x(self) -> Number:
        return self._x

    @property
    def y(self) -> Number:
        return self._y

    @property
    def position(self) -> Tuple[Number, Number]:
        return (self._x, self._y)

    @abstractmethod
    def local_cost_to(self, node: 'SearchNode') -> float:
        """Cost of the edge between this node and an adjacent ``node``."""

    @abstractmethod
    def heuristic_to(self, node: 'SearchNode') -> float:
        """Admissible, consistent estimate of the cost to reach ``node``."""

    def add_neighbor(self, node: 'SearchNode', cost: float):
        """
        Append a directed edge towards ``node``.

        Args:
            node: Neighbour, already registered in the same arena
            cost: Non-negative finite edge cost

        Raises:
            MalformedGraphError: on self-loop, duplicate neighbour,
                unregistered neighbour or invalid cost
        """
        if self.index is None or node.index is None:
            raise MalformedGraphError(
                f"Nodes {self.position} and {node.position} must be added to a graph before linking"
            )
        if node.index == self.index:
            raise MalformedGraphError(f"Self-loop on node {self.position}")
        if node.index in self._neighbor_set:
            raise MalformedGraphError(
                f"Duplicate edge {self.position} -> {node.position}"
            )
        cost = float(cost)
        if not math.isfinite(cost) or cost < 0.0:
            raise MalformedGraphError(
                f"Invalid edge cost {cost} for {self.position} -> {node.position}"
            )

        self.neighbors.append(Edge(node.index, cost))
        self._neighbor_set.add(node.index)

    def has_neighbor(self, index: int) -> bool:
        return index in self._neighbor_set

    def __repr__(self):
        return f"{type(self).__name__}(x={self._x}, y={self._y}, index={self.index})"


class GridNode(SearchNode):
    """
    One pixel of a traversability grid.
    A diagonal move costs sqrt(2), an orthogonal one costs 1.
    """

    DIAGONAL_COST = math.sqrt(2.0)

    def __init__(self, x: int, y: int, walkable: bool = True):
        super().__init__(x, y, traversable=walkable)

    @property
    def walkable(self) -> bool:
        return self.traversable

    def local_cost_to(self, node: SearchNode) -> float:
        if node.x != self.x and node.y != self.y:
            return self.DIAGONAL_COST
        return 1.0

    def heuristic_to(self, node: SearchNode) -> float:
        return math.hypot(self.x - node.x, self.y - node.y)


class PointNode(SearchNode):
    """Free-standing waypoint; both metrics are straight-line distance."""

    def local_cost_to(self, node: SearchNode) -> float:
        return math.hypot(self.x - node.x, self.y - node.y)

    def heuristic_to(self, node: SearchNode) -> float:
        return math.hypot(self.x - node.x, self.y - node.y)

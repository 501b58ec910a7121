"""
Graph construction.
NodeGraph is the arena that owns every node of a search session; GridGraph
addresses nodes by pixel coordinate and GridGraphBuilder wires 8-neighbour
(or 4-neighbour) adjacency over the walkable cells of a grid.
"""

import logging
from typing import Any, Dict, Iterator, List, Optional, Protocol, Tuple

import numpy as np

from pixel_astar.planning.exceptions import InvalidCoordinateError, MalformedGraphError
from pixel_astar.planning.node import GridNode, SearchNode


class GridSource(Protocol):
    """Anything that can answer traversability for a width x height grid."""
    width: int
    height: int

    def is_walkable(self, x: int, y: int) -> bool:
        ...


class NodeGraph:
    """Index-addressed arena of search nodes."""

    def __init__(self):
        self._nodes: List[SearchNode] = []

    def add_node(self, node: SearchNode) -> int:
        if node.index is not None:
            raise MalformedGraphError(f"{node!r} already belongs to a graph")
        node.index = len(self._nodes)
        self._nodes.append(node)
        return node.index

    def node(self, index: int) -> SearchNode:
        return self._nodes[index]

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[SearchNode]:
        return iter(self._nodes)

    def __contains__(self, node: SearchNode) -> bool:
        return (node.index is not None and node.index < len(self._nodes)
                and self._nodes[node.index] is node)

    def edge_count(self) -> int:
        return sum(len(node.neighbors) for node in self._nodes)

    def edge_cost(self, source: int, target: int) -> Optional[float]:
        """Cost of the edge source -> target, or None if there is none."""
        for edge in self._nodes[source].neighbors:
            if edge.target == target:
                return edge.cost
        return None

    def validate(self):
        """
        Check every edge of the arena.

        Raises:
            MalformedGraphError: on dangling targets, self-loops, duplicate
                edges or negative costs
        """
        size = len(self._nodes)
        for node in self._nodes:
            seen = set()
            for edge in node.neighbors:
                if not 0 <= edge.target < size:
                    raise MalformedGraphError(
                        f"Dangling edge {node.position} -> index {edge.target}"
                    )
                if edge.target == node.index:
                    raise MalformedGraphError(f"Self-loop on node {node.position}")
                if edge.target in seen:
                    raise MalformedGraphError(
                        f"Duplicate edge {node.position} -> {self._nodes[edge.target].position}"
                    )
                if edge.cost < 0.0:
                    raise MalformedGraphError(
                        f"Negative cost {edge.cost} on {node.position} -> "
                        f"{self._nodes[edge.target].position}"
                    )
                seen.add(edge.target)


class GridGraph(NodeGraph):
    """Arena of GridNodes laid out row-major, index = y * width + x."""

    def __init__(self, width: int, height: int):
        super().__init__()
        if width <= 0 or height <= 0:
            raise MalformedGraphError(f"Grid size must be positive, got {width}x{height}")
        self.width = width
        self.height = height

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def index_of(self, x: int, y: int) -> int:
        if not self.contains(x, y):
            raise InvalidCoordinateError(x, y, self.width, self.height)
        return y * self.width + x

    def node_at(self, x: int, y: int) -> GridNode:
        return self.node(self.index_of(x, y))

    @property
    def walkable_count(self) -> int:
        return sum(1 for node in self if node.traversable)


class GridGraphBuilder:
    """
    Builds a GridGraph from a traversability grid.
    Every cell gets a node; only walkable cells get edges, and only towards
    walkable cells.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        config = config or {}
        self.config = config
        self.logger = logging.getLogger(__name__)

        self.allow_diagonal = config.get('allow_diagonal', True)
        self.validate_graph = config.get('validate', True)

        self.neighborhood = self._create_neighborhood()

    def _create_neighborhood(self) -> List[Tuple[int, int]]:
        """Offsets of the 3x3 square around a cell, centre excluded."""
        neighborhood = []

        for dx in [-1, 0, 1]:
            for dy in [-1, 0, 1]:
                if dx == 0 and dy == 0:
                    continue
                if not self.allow_diagonal and dx != 0 and dy != 0:
                    continue
                neighborhood.append((dx, dy))

        return neighborhood

    def build(self, grid: GridSource) -> GridGraph:
        """
        Build the graph for a grid source.

        Args:
            grid: Object with width, height and is_walkable(x, y)

        Returns:
            Fully linked GridGraph
        """
        mask = np.zeros((grid.height, grid.width), dtype=bool)
        for y in range(grid.height):
            for x in range(grid.width):
                mask[y, x] = bool(grid.is_walkable(x, y))

        return self.build_from_array(mask)

    def build_from_array(self, walkable: np.ndarray) -> GridGraph:
        """
        Build the graph from a boolean array indexed [y, x].

        Args:
            walkable: 2-D array, truthy where the cell can be walked on

        Returns:
            Fully linked GridGraph
        """
        walkable = np.asarray(walkable, dtype=bool)
        if walkable.ndim != 2:
            raise MalformedGraphError(
                f"Traversability grid must be 2-D, got shape {walkable.shape}"
            )

        height, width = walkable.shape
        graph = GridGraph(width, height)

        for y in range(height):
            for x in range(width):
                graph.add_node(GridNode(x, y, walkable=bool(walkable[y, x])))

        for node in graph:
            if not node.traversable:
                continue

            for dx, dy in self.neighborhood:
                nx, ny = node.x + dx, node.y + dy
                if not graph.contains(nx, ny) or not walkable[ny, nx]:
                    continue

                neighbor = graph.node_at(nx, ny)
                node.add_neighbor(neighbor, node.local_cost_to(neighbor))

        if self.validate_graph:
            graph.validate()

        self.logger.info(
            f"Built {width}x{height} grid graph: "
            f"{int(walkable.sum())} walkable cells, {graph.edge_count()} edges"
        )

        return graph

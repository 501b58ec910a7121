"""
Path reconstruction from the parent links left by a search.
"""

import math
from typing import List, Sequence

from pixel_astar.planning.astar_search import SearchOutcome
from pixel_astar.planning.exceptions import MalformedGraphError
from pixel_astar.planning.graph_builder import NodeGraph
from pixel_astar.planning.node import SearchNode


def reconstruct_path(graph: NodeGraph, outcome: SearchOutcome) -> List[SearchNode]:
    """
    Walk predecessor links from the goal back to the start.

    Args:
        graph: Arena the search ran on
        outcome: Search output

    Returns:
        Nodes ordered start -> goal; empty when the search failed
    """
    if not outcome.success:
        return []

    path = []
    current = outcome.goal

    while current is not None:
        path.append(graph.node(current))
        if len(path) > len(graph):
            raise MalformedGraphError("Cycle in predecessor links")
        current = outcome.parents[current]

    path.reverse()
    return path


def path_cost(graph: NodeGraph, path: Sequence[SearchNode]) -> float:
    """
    Sum of edge costs along a path.

    Raises:
        MalformedGraphError: if two consecutive nodes are not linked
    """
    if not path:
        return math.inf

    total = 0.0
    for current, following in zip(path, path[1:]):
        cost = graph.edge_cost(current.index, following.index)
        if cost is None:
            raise MalformedGraphError(
                f"No edge {current.position} -> {following.position} in path"
            )
        total += cost

    return total

"""
Pathfinding core: nodes, graph construction, A* search and the PathFinder facade.
"""

from pixel_astar.planning.astar_search import (
    AStarSearch, SearchMetrics, SearchOutcome, SearchState, SearchStrategy,
)
from pixel_astar.planning.exceptions import (
    ImageLoadError, InvalidCoordinateError, MalformedGraphError, PathPlanningError,
)
from pixel_astar.planning.graph_builder import GridGraph, GridGraphBuilder, NodeGraph
from pixel_astar.planning.heuristics import AStarHeuristics, HEURISTIC_FUNCTIONS
from pixel_astar.planning.node import Edge, GridNode, PointNode, SearchNode
from pixel_astar.planning.path_finder import PathFinder, SearchResult
from pixel_astar.planning.path_reconstructor import path_cost, reconstruct_path
from pixel_astar.planning.uniform_cost import UniformCostSearch

__all__ = [
    # Nodes and graphs
    'SearchNode',
    'GridNode',
    'PointNode',
    'Edge',
    'NodeGraph',
    'GridGraph',
    'GridGraphBuilder',
    # Search
    'SearchStrategy',
    'AStarSearch',
    'UniformCostSearch',
    'AStarHeuristics',
    'HEURISTIC_FUNCTIONS',
    'SearchState',
    'SearchOutcome',
    'SearchMetrics',
    # Facade
    'PathFinder',
    'SearchResult',
    'reconstruct_path',
    'path_cost',
    # Errors
    'PathPlanningError',
    'InvalidCoordinateError',
    'MalformedGraphError',
    'ImageLoadError',
]

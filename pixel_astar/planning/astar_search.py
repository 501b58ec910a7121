"""
A* search over a NodeGraph.
All per-search scratch state (g, h, predecessor, open and closed sets) lives
in a SearchState owned by one search call, so the graph itself is only read
and several searches may share it.
"""

import heapq
import itertools
import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Set, Tuple

from pixel_astar.planning.graph_builder import NodeGraph
from pixel_astar.planning.heuristics import AStarHeuristics, HeuristicFunction
from pixel_astar.planning.node import SearchNode


@dataclass
class SearchMetrics:
    """Observability counters of one search."""
    nodes_expanded: int = 0      # Nodes moved to the closed set
    nodes_generated: int = 0     # Open-set insertions, re-insertions included
    max_open_size: int = 0
    planning_time: float = 0.0   # Seconds

    def as_dict(self) -> Dict[str, Any]:
        return {
            'nodes_expanded': self.nodes_expanded,
            'nodes_generated': self.nodes_generated,
            'max_open_size': self.max_open_size,
            'planning_time': self.planning_time,
        }


@dataclass
class SearchOutcome:
    """Raw output of a strategy: parent links and accumulated costs."""
    success: bool
    start: int
    goal: int
    parents: Dict[int, Optional[int]] = field(default_factory=dict)
    g_costs: Dict[int, float] = field(default_factory=dict)
    metrics: SearchMetrics = field(default_factory=SearchMetrics)

    @property
    def total_cost(self) -> float:
        if not self.success:
            return float('inf')
        return self.g_costs[self.goal]


class SearchState:
    """
    Transient open/closed bookkeeping for one search.

    The open set is a binary heap of (f, h, insertion, index) entries, so equal
    f values fall back to the smaller h and then to the earlier insertion. An
    improved node is pushed again; its outdated entry is dropped when popped
    because the node is closed by then.
    """

    def __init__(self):
        self.g: Dict[int, float] = {}
        self.h: Dict[int, float] = {}
        self.parent: Dict[int, Optional[int]] = {}
        self.closed: Set[int] = set()
        self.open_heap: List[Tuple[float, float, int, int]] = []
        self._insertions = itertools.count()

    def push(self, index: int, g: float, h: float, parent: Optional[int]):
        self.g[index] = g
        self.h[index] = h
        self.parent[index] = parent
        heapq.heappush(self.open_heap, (g + h, h, next(self._insertions), index))

    def pop(self) -> Optional[int]:
        """Index of the best open node, or None when the open set is empty."""
        while self.open_heap:
            _, _, _, index = heapq.heappop(self.open_heap)
            if index not in self.closed:
                return index
        return None

    def is_open(self, index: int) -> bool:
        return index in self.g and index not in self.closed

    @property
    def open_size(self) -> int:
        return len(self.g) - len(self.closed)


class SearchStrategy(ABC):
    """Admissible shortest-path search usable by PathFinder."""

    name = 'strategy'

    @abstractmethod
    def search(self, graph: NodeGraph, start: SearchNode, goal: SearchNode) -> SearchOutcome:
        """
        Search for the cheapest path from start to goal.

        Returns:
            SearchOutcome with success flag, parent links and metrics;
            an unreachable goal is reported with success=False
        """


class AStarSearch(SearchStrategy):
    """
    A* shortest-path search.

    Config keys are those of AStarHeuristics (heuristic_type, weight). An
    explicit ``heuristic`` callable takes precedence over the config.
    """

    name = 'astar'

    def __init__(self, config: Optional[Dict[str, Any]] = None,
                 heuristic: Optional[HeuristicFunction] = None):
        self.config = config or {}
        self.logger = logging.getLogger(__name__)

        if heuristic is not None:
            self.heuristic: Callable[[SearchNode, SearchNode], float] = heuristic
        else:
            self.heuristic = AStarHeuristics(self.config).compute_heuristic

    def search(self, graph: NodeGraph, start: SearchNode, goal: SearchNode) -> SearchOutcome:
        search_start = time.perf_counter()

        state = SearchState()
        metrics = SearchMetrics()

        state.push(start.index, 0.0, self.heuristic(start, goal), None)
        metrics.nodes_generated = 1
        metrics.max_open_size = 1

        success = False

        while True:
            current_index = state.pop()
            if current_index is None:
                break

            if current_index == goal.index:
                success = True
                break

            state.closed.add(current_index)
            metrics.nodes_expanded += 1

            current_g = state.g[current_index]

            for edge in graph.node(current_index).neighbors:
                if edge.target in state.closed:
                    continue

                tentative_g = current_g + edge.cost

                if edge.target not in state.g or tentative_g < state.g[edge.target]:
                    h = state.h.get(edge.target)
                    if h is None:
                        h = self.heuristic(graph.node(edge.target), goal)
                    state.push(edge.target, tentative_g, h, current_index)
                    metrics.nodes_generated += 1

            metrics.max_open_size = max(metrics.max_open_size, state.open_size)

        metrics.planning_time = time.perf_counter() - search_start

        if success:
            self.logger.debug(
                f"{self.name}: reached {goal.position} at cost {state.g[goal.index]:.3f}, "
                f"{metrics.nodes_expanded} nodes expanded"
            )
        else:
            self.logger.debug(
                f"{self.name}: open set exhausted after {metrics.nodes_expanded} expansions, "
                f"{goal.position} unreachable from {start.position}"
            )

        return SearchOutcome(
            success=success,
            start=start.index,
            goal=goal.index,
            parents=state.parent,
            g_costs=state.g,
            metrics=metrics,
        )

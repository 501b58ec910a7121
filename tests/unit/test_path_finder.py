"""Unit tests for the PathFinder facade and path reconstruction"""

import math

import numpy as np
import pytest

from pixel_astar.planning.astar_search import AStarSearch, SearchMetrics, SearchOutcome
from pixel_astar.planning.exceptions import InvalidCoordinateError, MalformedGraphError, PathPlanningError
from pixel_astar.planning.graph_builder import NodeGraph
from pixel_astar.planning.node import PointNode
from pixel_astar.planning.path_finder import PathFinder, SearchResult
from pixel_astar.planning.path_reconstructor import path_cost, reconstruct_path
from pixel_astar.planning.uniform_cost import UniformCostSearch


class TestPathReconstructor:
    """Parent-link walking"""

    def test_failure_gives_empty_path(self, build_grid):
        graph = build_grid(["..."])
        outcome = SearchOutcome(success=False, start=0, goal=2)

        assert reconstruct_path(graph, outcome) == []

    def test_follows_parents_from_goal(self, build_grid):
        graph = build_grid(["..."])
        outcome = SearchOutcome(
            success=True, start=0, goal=2,
            parents={0: None, 1: 0, 2: 1},
            g_costs={0: 0.0, 1: 1.0, 2: 2.0},
        )

        path = reconstruct_path(graph, outcome)

        assert [node.position for node in path] == [(0, 0), (1, 0), (2, 0)]
        assert outcome.total_cost == 2.0

    def test_parent_cycle_detected(self, build_grid):
        graph = build_grid(["..."])
        outcome = SearchOutcome(success=True, start=0, goal=2, parents={2: 1, 1: 2})

        with pytest.raises(MalformedGraphError):
            reconstruct_path(graph, outcome)

    def test_path_cost_sums_edges(self, build_grid):
        graph = build_grid(["...", "..."])
        path = [graph.node_at(0, 0), graph.node_at(1, 1), graph.node_at(2, 1)]

        assert path_cost(graph, path) == pytest.approx(math.sqrt(2) + 1.0)
        assert path_cost(graph, path[:1]) == 0.0
        assert math.isinf(path_cost(graph, []))

    def test_path_cost_rejects_non_edges(self, build_grid):
        graph = build_grid(["...", "..."])
        with pytest.raises(MalformedGraphError):
            path_cost(graph, [graph.node_at(0, 0), graph.node_at(2, 0)])


class TestPathFinder:
    """Start/goal binding and strategy selection"""

    def test_coordinates_indices_and_nodes(self, build_grid):
        graph = build_grid(["...", "...", "..."])
        goal = graph.node_at(2, 2)

        by_coordinate = PathFinder(graph).set_start((0, 0)).set_goal((2, 2)).find_path()
        by_index = PathFinder(graph).set_start(0).set_goal(8).find_path()
        by_node = PathFinder(graph).set_start(graph.node_at(0, 0)).set_goal(goal).find_path()

        assert by_coordinate.positions == by_index.positions == by_node.positions

    def test_invalid_coordinate_raised_before_search(self, build_grid):
        graph = build_grid(["...", "...", "..."])
        finder = PathFinder(graph)

        with pytest.raises(InvalidCoordinateError):
            finder.set_start((3, 0))
        with pytest.raises(InvalidCoordinateError):
            finder.set_goal((0, -1))

        assert finder.get_statistics()['total_plans'] == 0

    def test_missing_endpoint(self, build_grid):
        finder = PathFinder(build_grid(["..."])).set_start((0, 0))
        with pytest.raises(PathPlanningError):
            finder.find_path()

    def test_foreign_node_rejected(self, build_grid):
        graph = build_grid(["..."])
        other = build_grid(["..."])
        with pytest.raises(PathPlanningError):
            PathFinder(graph).set_start(other.node_at(0, 0))

    def test_unknown_index_rejected(self, build_grid):
        with pytest.raises(PathPlanningError):
            PathFinder(build_grid(["..."])).set_goal(42)
        with pytest.raises(PathPlanningError):
            PathFinder(build_grid(["..."])).set_goal(True)

    def test_numpy_integer_indices(self, build_grid):
        graph = build_grid(["..."])
        finder = PathFinder(graph).set_start(np.int64(0)).set_goal(np.int32(2))

        assert finder.start is graph.node_at(0, 0)
        assert finder.find_path().positions == [(0, 0), (1, 0), (2, 0)]

    def test_coordinates_need_grid_graph(self):
        graph = NodeGraph()
        graph.add_node(PointNode(0.0, 0.0))
        with pytest.raises(PathPlanningError):
            PathFinder(graph).set_start((0, 0))

    def test_strategy_class_or_instance(self, build_grid):
        graph = build_grid(["....", "....", "...."])
        finder = PathFinder(graph).set_start((0, 0)).set_goal((3, 2))

        from_class = finder.find_path(UniformCostSearch)
        from_instance = finder.find_path(UniformCostSearch())

        assert from_class.strategy == from_instance.strategy == 'uniform_cost'
        assert from_class.total_cost == pytest.approx(from_instance.total_cost)

    def test_config_reaches_strategy(self, build_grid):
        graph = build_grid(["." * 6] * 6)
        finder = PathFinder(graph, {'heuristic_type': 'zero'}).set_start((0, 0)).set_goal((5, 5))

        zero = finder.find_path(AStarSearch)
        reference = finder.find_path(UniformCostSearch)

        assert zero.nodes_expanded == reference.nodes_expanded

    def test_statistics(self, build_grid):
        graph = build_grid(["..#", "###", "#.."])
        finder = PathFinder(graph)

        finder.set_start((0, 0)).set_goal((1, 1))
        finder.find_path()
        finder.set_goal((2, 2))
        finder.find_path()
        finder.set_goal((1, 0))
        finder.find_path()

        stats = finder.get_statistics()
        assert stats['total_plans'] == 3
        assert stats['successful_plans'] == 1
        assert stats['success_rate'] == pytest.approx(1 / 3)
        assert stats['average_path_length'] == 2.0


class TestSearchResult:
    """Result value object"""

    def test_as_dict(self, build_grid):
        graph = build_grid([".."])
        result = PathFinder(graph).set_start((0, 0)).set_goal((1, 0)).find_path()

        data = result.as_dict()
        assert data['success'] is True
        assert data['path'] == [(0, 0), (1, 0)]
        assert data['path_length'] == 2
        assert data['total_cost'] == pytest.approx(1.0)
        assert data['strategy'] == 'astar'
        assert 'nodes_expanded' in data and 'planning_time' in data

    def test_defaults(self):
        result = SearchResult(success=False, path=[], total_cost=float('inf'))
        assert result.positions == []
        assert result.metrics == SearchMetrics()

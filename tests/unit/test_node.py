"""Unit tests for search nodes"""

import math

import pytest

from pixel_astar.planning.exceptions import MalformedGraphError
from pixel_astar.planning.graph_builder import NodeGraph
from pixel_astar.planning.node import Edge, GridNode, PointNode


class TestGridNode:
    """Edge and heuristic metrics of grid pixels"""

    def test_orthogonal_cost_is_exactly_one(self):
        node = GridNode(3, 3)
        for other in [GridNode(2, 3), GridNode(4, 3), GridNode(3, 2), GridNode(3, 4)]:
            assert node.local_cost_to(other) == 1.0

    def test_diagonal_cost_is_exactly_sqrt2(self):
        node = GridNode(3, 3)
        for other in [GridNode(2, 2), GridNode(4, 4), GridNode(2, 4), GridNode(4, 2)]:
            assert node.local_cost_to(other) == math.sqrt(2)

    def test_heuristic_is_euclidean(self):
        assert GridNode(0, 0).heuristic_to(GridNode(3, 4)) == pytest.approx(5.0)
        assert GridNode(2, 2).heuristic_to(GridNode(2, 2)) == 0.0

    def test_walkable_flag(self):
        assert GridNode(0, 0).walkable
        assert not GridNode(0, 0, walkable=False).traversable

    def test_position(self):
        node = GridNode(4, 7)
        assert node.position == (4, 7)
        assert (node.x, node.y) == (4, 7)


class TestAddNeighbor:
    """Adjacency list invariants"""

    @pytest.fixture
    def linked(self):
        graph = NodeGraph()
        a, b = PointNode(0.0, 0.0), PointNode(1.0, 0.0)
        graph.add_node(a)
        graph.add_node(b)
        return graph, a, b

    def test_add_neighbor_stores_index_and_cost(self, linked):
        _, a, b = linked
        a.add_neighbor(b, 2.5)

        assert a.neighbors == [Edge(b.index, 2.5)]
        assert a.has_neighbor(b.index)
        assert b.neighbors == []

    def test_self_loop_rejected(self, linked):
        _, a, _ = linked
        with pytest.raises(MalformedGraphError):
            a.add_neighbor(a, 1.0)

    def test_duplicate_rejected(self, linked):
        _, a, b = linked
        a.add_neighbor(b, 1.0)
        with pytest.raises(MalformedGraphError):
            a.add_neighbor(b, 1.0)

    @pytest.mark.parametrize("cost", [-0.5, float('inf'), float('nan')])
    def test_invalid_cost_rejected(self, linked, cost):
        _, a, b = linked
        with pytest.raises(MalformedGraphError):
            a.add_neighbor(b, cost)

    def test_unregistered_node_rejected(self):
        with pytest.raises(MalformedGraphError):
            GridNode(0, 0).add_neighbor(GridNode(0, 1), 1.0)

    def test_point_node_metrics(self):
        a, b = PointNode(0.0, 0.0), PointNode(3.0, 4.0)
        assert a.local_cost_to(b) == pytest.approx(5.0)
        assert a.heuristic_to(b) == pytest.approx(5.0)

"""Tests for adjacency, degree and component queries."""

import pytest

from quiltgraph.core.adjacency import build_adjacency, compute_degrees, find_connected_components
from quiltgraph.domain import QuiltGraph


@pytest.fixture
def two_triangles_and_point() -> QuiltGraph:
    """Two separate triangles and an isolated vertex."""
    return QuiltGraph.from_dict(
        {
            "vertices": {
                "a": [0, 0], "b": [10, 0], "c": [5, 10],
                "d": [30, 0], "e": [40, 0], "f": [35, 10],
                "g": [100, 100],
            },
            "edges": [["a", "b"], ["b", "c"], ["c", "a"], ["d", "e"], ["e", "f"], ["f", "d"]],
        }
    )


class TestBuildAdjacency:
    """Tests for build_adjacency."""

    def test_neighbors(self, two_triangles_and_point):
        """Test neighbour sets are symmetric."""
        adj = build_adjacency(two_triangles_and_point)
        assert adj["a"] == {"b", "c"}
        assert "a" in adj["b"]

    def test_isolated_vertex_present(self, two_triangles_and_point):
        """Test isolated vertices get an empty entry."""
        adj = build_adjacency(two_triangles_and_point)
        assert adj["g"] == set()

    def test_degrees(self, two_triangles_and_point):
        """Test degree computation."""
        degrees = compute_degrees(build_adjacency(two_triangles_and_point))
        assert degrees["a"] == 2
        assert degrees["g"] == 0


class TestConnectedComponents:
    """Tests for find_connected_components."""

    def test_components(self, two_triangles_and_point):
        """Test each triangle and the isolated vertex form a component."""
        graph = two_triangles_and_point
        components = find_connected_components(graph.vertices, build_adjacency(graph))
        assert components == [["a", "b", "c"], ["d", "e", "f"], ["g"]]

    def test_empty(self):
        """Test an empty graph has no components."""
        assert find_connected_components([], {}) == []

    def test_single_component(self):
        """Test a connected path is one component."""
        graph = QuiltGraph.from_dict(
            {
                "vertices": {"a": [0, 0], "b": [1, 0], "c": [2, 0]},
                "edges": [["a", "b"], ["b", "c"]],
            }
        )
        components = find_connected_components(graph.vertices, build_adjacency(graph))
        assert len(components) == 1
        assert sorted(components[0]) == ["a", "b", "c"]

"""End-to-end correction tests on small hand-built graphs.

Each test runs the full correction loop and checks the quilt properties of
the result rather than the exact sequence of repairs.
"""

import json
import logging
from pathlib import Path

import pytest

from quiltgraph.config import FaceConfig, QuiltGraphSettings
from quiltgraph.core import (
    Termination,
    build_adjacency,
    compute_degrees,
    correct_quilt,
    find_bridges,
    find_connected_components,
    is_quilt_legal,
)
from quiltgraph.domain import Edge, QuiltGraph
from quiltgraph.io import GraphReader, GraphWriter


def make_graph(vertices: dict, edges: list) -> QuiltGraph:
    """Build a graph from plain coordinates and edge pairs."""
    return QuiltGraph.from_dict({"vertices": vertices, "edges": edges})


def assert_quilt(graph: QuiltGraph) -> None:
    """Check every quilt property of a graph independently."""
    adj = build_adjacency(graph)
    assert all(degree >= 2 for degree in compute_degrees(adj).values())
    assert len(find_connected_components(graph.vertices, adj)) == 1
    assert find_bridges(graph.vertices, adj) == []
    assert is_quilt_legal(graph)


class TestLegalInputs:
    """Legal graphs pass through unchanged."""

    @pytest.mark.parametrize(
        "graph",
        [
            make_graph(
                {"a": [0, 0], "b": [10, 0], "c": [5, 10]},
                [["a", "b"], ["b", "c"], ["c", "a"]],
            ),
            make_graph(
                {"a": [0, 0], "b": [10, 0], "c": [10, 10], "d": [0, 10]},
                [["a", "b"], ["b", "c"], ["c", "d"], ["d", "a"], ["a", "c"]],
            ),
        ],
        ids=["triangle", "split-square"],
    )
    def test_idempotent(self, graph):
        """Test a legal graph keeps its vertices and edges."""
        assert is_quilt_legal(graph)
        result = correct_quilt(graph)

        assert result.termination == Termination.STABLE
        assert result.graph.vertices == graph.vertices
        assert set(result.graph.edges) == set(graph.edges)
        assert is_quilt_legal(result.graph)


class TestRepairs:
    """Illegal graphs become quilts."""

    def test_crossing_resolution(self):
        """Test crossing edges are split at a junction near (5, 5)."""
        graph = make_graph(
            {"a": [0, 10], "b": [0, 0], "c": [10, 10], "d": [10, 0]},
            [["a", "d"], ["b", "c"]],
        )
        corrected = correct_quilt(graph).graph

        new_vertices = set(corrected.vertices) - set(graph.vertices)
        assert len(new_vertices) == 1
        junction = new_vertices.pop()
        assert corrected.vertices[junction].x == pytest.approx(5.0, abs=1e-6)
        assert corrected.vertices[junction].y == pytest.approx(5.0, abs=1e-6)

        assert not corrected.has_edge("a", "d")
        assert not corrected.has_edge("b", "c")
        for vid in ("a", "b", "c", "d"):
            assert corrected.has_edge(vid, junction)

        # Degree repair adds a-b, a-c and b-d before the split
        assert corrected.edge_count == 7
        assert_quilt(corrected)

    def test_path_graph(self):
        """Test a path with degree-one ends becomes legal."""
        graph = make_graph(
            {"a": [0, 0], "b": [10, 0], "c": [20, 0], "d": [30, 0]},
            [["a", "b"], ["b", "c"], ["c", "d"]],
        )
        assert_quilt(correct_quilt(graph).graph)

    def test_disconnected_triangles(self):
        """Test two separate triangles are merged into one quilt."""
        graph = make_graph(
            {
                "a": [0, 0], "b": [10, 0], "c": [5, 10],
                "d": [30, 0], "e": [40, 0], "f": [35, 10],
            },
            [["a", "b"], ["b", "c"], ["c", "a"], ["d", "e"], ["e", "f"], ["f", "d"]],
        )
        assert not is_quilt_legal(graph)

        result = correct_quilt(graph)
        assert result.stats.fixes["components"] == 1
        assert_quilt(result.graph)

    def test_low_degree_vertices(self):
        """Test an isolated vertex and a dangling pair are wired in."""
        graph = make_graph(
            {"a": [0, 0], "b": [10, 0], "c": [5, 10], "d": [20, 20], "e": [0, 20], "f": [0, 30]},
            [["a", "b"], ["b", "c"], ["c", "a"], ["e", "f"]],
        )
        assert_quilt(correct_quilt(graph).graph)

    def test_bridge_between_clusters(self):
        """Test a bridge between two diamond clusters is closed."""
        graph = make_graph(
            {
                "a": [0, 0], "b": [10, 0], "x": [5, 5], "y": [5, -5],
                "c": [20, 0], "z": [25, 5], "w": [25, -5],
            },
            [
                ["a", "b"], ["a", "x"], ["b", "x"], ["a", "y"], ["b", "y"],
                ["b", "c"], ["c", "z"], ["c", "w"],
            ],
        )
        assert find_bridges(graph.vertices, build_adjacency(graph))

        corrected = correct_quilt(graph).graph
        assert not any(
            Edge.of(*bridge) == Edge.of("b", "c")
            for bridge in find_bridges(corrected.vertices, build_adjacency(corrected))
        )
        assert_quilt(corrected)

    def test_multiple_fix_types(self):
        """Test a graph needing degree, bridge and crossing repairs."""
        graph = make_graph(
            {
                "a": [0, 10], "b": [0, 0], "c": [20, 5], "d": [30, 5],
                "e": [40, 40], "f": [10, 0], "g": [10, 10],
            },
            [["a", "f"], ["b", "g"], ["a", "c"], ["c", "d"], ["d", "g"]],
        )
        result = correct_quilt(graph)

        assert result.termination == Termination.STABLE
        assert result.graph.vertex_count > graph.vertex_count
        assert all(vid.startswith("JCT") for vid in set(result.graph.vertices) - set(graph.vertices))
        assert_quilt(result.graph)

    def test_result_is_fixed_point(self):
        """Test correcting twice gives the same graph."""
        graph = make_graph(
            {
                "a": [0, 10], "b": [0, 0], "c": [20, 5], "d": [30, 5],
                "e": [40, 40], "f": [10, 0], "g": [10, 10],
            },
            [["a", "f"], ["b", "g"], ["a", "c"], ["c", "d"], ["d", "g"]],
        )
        once = correct_quilt(graph).graph
        twice = correct_quilt(once).graph

        assert twice.vertices == once.vertices
        assert set(twice.edges) == set(once.edges)


class TestDegenerateInputs:
    """Graphs too small to repair are returned unchanged."""

    @pytest.mark.parametrize(
        "vertices",
        [{}, {"a": [3, 4]}],
        ids=["empty", "single-vertex"],
    )
    def test_unchanged(self, vertices):
        """Test the vertex and edge sets are identical after correction."""
        graph = make_graph(vertices, [])
        assert not is_quilt_legal(graph)

        corrected = correct_quilt(graph).graph
        assert corrected.vertices == graph.vertices
        assert corrected.edges == graph.edges
        assert not is_quilt_legal(corrected)

    def test_dangling_edges_dropped(self, caplog):
        """Test edges naming unknown vertices are dropped with a warning."""
        with caplog.at_level(logging.WARNING, logger="quiltgraph.domain.graph"):
            graph = make_graph(
                {"a": [0, 0], "b": [10, 0], "c": [5, 10]},
                [["a", "b"], ["b", "c"], ["c", "a"], ["c", "ghost"], ["a", "a"]],
            )

        assert graph.edge_count == 3
        assert "unknown endpoint" in caplog.text
        assert "self-loop" in caplog.text
        assert is_quilt_legal(correct_quilt(graph).graph)


class TestFaces:
    """Face decomposition of corrected graphs."""

    def test_square_faces(self):
        """Test a square yields the square and its exterior."""
        graph = make_graph(
            {"a": [0, 0], "b": [10, 0], "c": [10, 10], "d": [0, 10]},
            [["a", "b"], ["b", "c"], ["c", "d"], ["d", "a"]],
        )
        faces = correct_quilt(graph).graph.faces

        assert len(faces) == 2
        assert all(len(face) == 4 for face in faces.values())

    def test_euler_face_count(self):
        """Test a corrected graph has E - V + 2 faces."""
        corrected = correct_quilt(
            make_graph(
                {"a": [0, 10], "b": [0, 0], "c": [10, 10], "d": [10, 0]},
                [["a", "d"], ["b", "c"]],
            )
        ).graph
        expected = corrected.edge_count - corrected.vertex_count + 2
        assert len(corrected.faces) == expected

    def test_exclude_exterior(self):
        """Test the exterior face can be left out."""
        graph = make_graph(
            {"a": [0, 10], "b": [0, 0], "c": [10, 10], "d": [10, 0]},
            [["a", "d"], ["b", "c"]],
        )
        settings = QuiltGraphSettings(faces=FaceConfig(exclude_exterior=True))
        corrected = correct_quilt(graph, settings=settings).graph

        assert len(corrected.faces) == corrected.edge_count - corrected.vertex_count + 1


class TestDocumentRoundTrip:
    """Reading, correcting and writing documents."""

    def test_nested_document(self, tmp_path: Path):
        """Test a graph_topology document is corrected and written."""
        source = tmp_path / "blobs.json"
        source.write_text(
            json.dumps(
                {
                    "graph_topology": {
                        "vertices": {"V1": [0, 10], "V2": [0, 0], "V3": [10, 10], "V4": [10, 0]},
                        "edges": [["V1", "V4"], ["V2", "V3"]],
                    },
                    "source_segmentation": {
                        "labels": [[1] * 11 for _ in range(11)],
                        "avg_colors": {"1": [12, 34, 56]},
                        "width": 11,
                        "height": 11,
                    },
                }
            ),
            encoding="utf-8",
        )

        reader = GraphReader(source)
        reader.load()
        result = correct_quilt(reader.graph, reader.segmentation)

        output = GraphWriter.get_corrected_path(source)
        GraphWriter(output).write(result)
        data = json.loads(output.read_text(encoding="utf-8"))

        assert "JCT5" in data["vertices"]
        assert all(face["color"] == [12, 34, 56] for face in data["faces"].values())
        assert data["stats"]["fixes"]["crossings"] == 1

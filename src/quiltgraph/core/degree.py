"""Repair of vertices with fewer than two neighbours."""

import logging
import math
from typing import ClassVar

from quiltgraph.core.adjacency import Adjacency, compute_degrees
from quiltgraph.core.geometry import squared_distance
from quiltgraph.domain import QuiltGraph

logger = logging.getLogger(__name__)


def find_low_degree_vertices(adj: Adjacency) -> list[str]:
    """Vertices of degree 0 or 1, in adjacency order."""
    return [vid for vid, degree in compute_degrees(adj).items() if degree < 2]


def nearest_unconnected_vertex(graph: QuiltGraph, vertex_id: str, adj: Adjacency) -> str | None:
    """Find the closest vertex not already adjacent to ``vertex_id``.

    Ties keep the first candidate in vertex order.

    Returns:
        Vertex id, or None if every other vertex is already a neighbour
    """
    origin = graph.vertices[vertex_id]
    neighbors = adj.get(vertex_id, set())
    best: str | None = None
    best_dist = math.inf

    for other_id, other in graph.vertices.items():
        if other_id == vertex_id or other_id in neighbors:
            continue
        dist = squared_distance(origin, other)
        if dist < best_dist:
            best_dist = dist
            best = other_id

    return best


class DegreeRepairer:
    """Connects every low-degree vertex to its nearest non-neighbour.

    All low-degree vertices of one adjacency snapshot are repaired together;
    a repair does not see edges added by the others in the same pass.
    """

    category: ClassVar[str] = "degree"

    def detect(self, graph: QuiltGraph, adj: Adjacency) -> list[str]:  # noqa: ARG002
        """Low-degree vertices of the snapshot."""
        return find_low_degree_vertices(adj)

    def fix(self, graph: QuiltGraph, adj: Adjacency, defects: list[str]) -> bool:
        """Add one edge per low-degree vertex.

        Returns:
            True if at least one edge was added
        """
        changed = False
        for vertex_id in defects:
            target = nearest_unconnected_vertex(graph, vertex_id, adj)
            if target is None:
                logger.debug("No candidate to connect low-degree vertex %s", vertex_id)
                continue
            if graph.add_edge(vertex_id, target):
                logger.debug("Connected low-degree vertex %s to %s", vertex_id, target)
                changed = True
        return changed

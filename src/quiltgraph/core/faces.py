"""Face decomposition by angular rotation.

Every undirected edge yields two directed edges. Starting from an unvisited
directed edge, the trace arrives at a vertex, finds the vertex it came from
in that vertex's angularly sorted neighbour ring, and leaves along the next
neighbour in the ring. Each directed edge is walked at most once, so a
connected, planar, bridge-free graph produces ``E - V + 2`` faces, one of
which is the unbounded exterior.

With neighbours sorted by ascending ``atan2`` the bounded faces come out with
negative signed area and the exterior with positive signed area.
"""

import logging
import math

from quiltgraph.config import FaceConfig
from quiltgraph.core.adjacency import Adjacency, build_adjacency
from quiltgraph.core.geometry import centroid, signed_area
from quiltgraph.domain import Color, QuiltGraph, QuiltPiece, SourceSegmentation

logger = logging.getLogger(__name__)


def sort_neighbors_by_angle(graph: QuiltGraph, vertex_id: str, adj: Adjacency) -> list[str]:
    """Neighbours of a vertex ordered by polar angle around it.

    Equal angles keep sorted-id order.

    Returns:
        Neighbour ids sorted ascending by ``atan2(dy, dx)``
    """
    center = graph.vertices[vertex_id]
    neighbors = sorted(n for n in adj.get(vertex_id, ()) if n != vertex_id)
    return sorted(
        neighbors,
        key=lambda n: math.atan2(graph.vertices[n].y - center.y, graph.vertices[n].x - center.x),
    )


def face_color(
    graph: QuiltGraph,
    vertex_ids: list[str],
    segmentation: SourceSegmentation | None,
) -> Color | None:
    """Sample the segmentation colour under the centroid of a face."""
    if segmentation is None:
        return None
    center = centroid([graph.vertices[v] for v in vertex_ids])
    if center is None:
        return None
    return segmentation.color_at(center.x, center.y)


class FaceDecomposer:
    """Traces the faces of a graph and colours them.

    Example:
        decomposer = FaceDecomposer()
        faces = decomposer.identify_faces(graph, segmentation)
    """

    def __init__(self, config: FaceConfig | None = None) -> None:
        """Initialize face decomposer with configuration.

        Args:
            config: Face configuration (exterior face handling)
        """
        self.config = config or FaceConfig()

    def trace_faces(self, graph: QuiltGraph) -> list[list[str]]:
        """Trace every face boundary of the graph.

        Returns:
            Vertex sequences in trace order
        """
        adj = build_adjacency(graph)
        rotation = {vid: sort_neighbors_by_angle(graph, vid, adj) for vid in graph.vertices}
        limit = graph.vertex_count
        visited: set[tuple[str, str]] = set()
        traces: list[list[str]] = []

        for start in graph.vertices:
            for first in rotation[start]:
                if (start, first) in visited:
                    continue

                boundary: list[str] = []
                current, target = start, first
                while True:
                    boundary.append(current)
                    visited.add((current, target))

                    previous, current = current, target
                    ring = rotation[current]
                    if previous not in ring:
                        break
                    target = ring[(ring.index(previous) + 1) % len(ring)]

                    if current == start and target == first:
                        break
                    if len(boundary) > limit:
                        logger.warning(
                            "Face trace from %s-%s exceeded %d vertices; graph may be malformed",
                            start, first, limit,
                        )
                        break

                if boundary:
                    traces.append(boundary)

        return traces

    def identify_faces(
        self,
        graph: QuiltGraph,
        segmentation: SourceSegmentation | None = None,
    ) -> dict[str, QuiltPiece]:
        """Decompose the graph into faces and store them on it.

        Any faces already on the graph are replaced. Face ids come from the
        graph's allocator.

        Args:
            graph: Graph to decompose (faces are written back to it)
            segmentation: Optional label raster used to colour faces

        Returns:
            Mapping of face id to quilt piece
        """
        graph.faces = {}

        for boundary in self.trace_faces(graph):
            if self.config.exclude_exterior:
                area = signed_area([graph.vertices[v] for v in boundary])
                if area > 0:
                    logger.debug("Excluding exterior face with area %.3f", area)
                    continue

            face_id = graph.allocator.new_face_id()
            graph.faces[face_id] = QuiltPiece(
                face_id=face_id,
                vertices=tuple(boundary),
                color=face_color(graph, boundary, segmentation),
            )

        logger.debug("Identified %d faces", len(graph.faces))
        return graph.faces

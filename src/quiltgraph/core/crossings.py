"""Detection and splitting of crossing edges."""

import logging
from dataclasses import dataclass
from typing import ClassVar

from quiltgraph.config import RepairConfig
from quiltgraph.core.adjacency import Adjacency
from quiltgraph.core.geometry import segment_crossing
from quiltgraph.domain import Edge, Point, QuiltGraph

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Crossing:
    """Two edges crossing at an interior point.

    Attributes:
        first: Earlier edge in edge-list order
        second: Later edge in edge-list order
        point: Intersection point
    """

    first: Edge
    second: Edge
    point: Point


def find_first_crossing(
    graph: QuiltGraph,
    epsilon: float = 1e-9,
    parallel_tolerance: float = 0.0,
) -> Crossing | None:
    """Find the first pair of crossing edges in edge-list scan order.

    Pairs sharing an endpoint are skipped. Read-only.

    Args:
        graph: Graph to scan
        epsilon: Endpoint margin passed to segment_crossing
        parallel_tolerance: Parallel threshold passed to segment_crossing

    Returns:
        The first crossing found, or None
    """
    segments = list(graph.iter_segments())
    for i, (e1, p1, p2) in enumerate(segments):
        for e2, p3, p4 in segments[i + 1:]:
            if e1.shares_endpoint(e2):
                continue
            point = segment_crossing(p1, p2, p3, p4, epsilon, parallel_tolerance)
            if point is not None:
                return Crossing(first=e1, second=e2, point=point)
    return None


def split_edges_at_intersection(graph: QuiltGraph, crossing: Crossing) -> str:
    """Replace two crossing edges by four edges meeting at a new vertex.

    Returns:
        Identifier of the new junction vertex
    """
    junction = graph.new_vertex(crossing.point)

    graph.remove_edge(crossing.first)
    graph.remove_edge(crossing.second)

    graph.add_edge(crossing.first.u, junction)
    graph.add_edge(junction, crossing.first.v)
    graph.add_edge(crossing.second.u, junction)
    graph.add_edge(junction, crossing.second.v)

    logger.debug(
        "Split %s-%s and %s-%s at %s (%.3f, %.3f)",
        crossing.first.u, crossing.first.v,
        crossing.second.u, crossing.second.v,
        junction, crossing.point.x, crossing.point.y,
    )
    return junction


class CrossingResolver:
    """Resolves one crossing per invocation by inserting a junction vertex."""

    category: ClassVar[str] = "crossings"

    def __init__(self, config: RepairConfig | None = None) -> None:
        """Initialize crossing resolver with configuration.

        Args:
            config: Repair configuration with crossing tolerances
        """
        self.config = config or RepairConfig()

    def detect(self, graph: QuiltGraph, adj: Adjacency) -> list[Crossing]:  # noqa: ARG002
        """The first crossing, if any, as a one-element list."""
        crossing = find_first_crossing(
            graph,
            epsilon=self.config.crossing_epsilon,
            parallel_tolerance=self.config.parallel_tolerance,
        )
        return [crossing] if crossing else []

    def fix(self, graph: QuiltGraph, adj: Adjacency, defects: list[Crossing]) -> bool:  # noqa: ARG002
        """Split the first crossing.

        Returns:
            Always True; a split adds a vertex
        """
        split_edges_at_intersection(graph, defects[0])
        return True

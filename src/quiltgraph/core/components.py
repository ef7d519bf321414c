"""Merging of disconnected graph components."""

import logging
import math
from typing import ClassVar

from quiltgraph.core.adjacency import Adjacency, find_connected_components
from quiltgraph.core.geometry import squared_distance
from quiltgraph.domain import QuiltGraph

logger = logging.getLogger(__name__)


def closest_pair(
    graph: QuiltGraph,
    first: list[str],
    second: list[str],
    exclude: set[tuple[str, str]] | None = None,
) -> tuple[str, str] | None:
    """Closest vertex pair across two vertex groups (brute force).

    Args:
        graph: Graph holding the coordinates
        first: Vertices of the first group
        second: Vertices of the second group
        exclude: Pairs (in either order) that may not be chosen

    Returns:
        (a, b) with ``a`` from ``first`` and ``b`` from ``second``, or None
    """
    best: tuple[str, str] | None = None
    best_dist = math.inf

    for a in first:
        pa = graph.vertices[a]
        for b in second:
            if exclude and ((a, b) in exclude or (b, a) in exclude):
                continue
            dist = squared_distance(pa, graph.vertices[b])
            if dist < best_dist:
                best_dist = dist
                best = (a, b)

    return best


class ComponentConnector:
    """Joins the first two components by their closest vertex pair.

    Only one edge is added per invocation; further components are merged
    on later passes.
    """

    category: ClassVar[str] = "components"

    def detect(self, graph: QuiltGraph, adj: Adjacency) -> list[list[str]]:
        """Components of the graph when there is more than one."""
        components = find_connected_components(graph.vertices, adj)
        return components if len(components) > 1 else []

    def fix(self, graph: QuiltGraph, adj: Adjacency, defects: list[list[str]]) -> bool:  # noqa: ARG002
        """Connect the first two components.

        Returns:
            True if an edge was added
        """
        pair = closest_pair(graph, defects[0], defects[1])
        if pair is None:
            return False
        logger.debug(
            "Connecting components of size %d and %d via %s-%s",
            len(defects[0]), len(defects[1]), pair[0], pair[1],
        )
        return graph.add_edge(*pair)

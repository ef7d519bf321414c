"""Adjacency, degree and connectivity queries.

The adjacency mapping is rebuilt from the edge list every time it is needed;
nothing is maintained incrementally. Traversals visit neighbours in sorted
order so results do not depend on set iteration order.
"""

from collections import deque
from collections.abc import Iterable

from quiltgraph.domain import QuiltGraph

Adjacency = dict[str, set[str]]


def build_adjacency(graph: QuiltGraph) -> Adjacency:
    """Build the neighbour-set mapping of a graph.

    Every vertex gets an entry, isolated vertices an empty set.

    Args:
        graph: Graph to index

    Returns:
        Mapping of vertex id to the set of adjacent vertex ids
    """
    adj: Adjacency = {vid: set() for vid in graph.vertices}
    for edge in graph.edges:
        adj.setdefault(edge.u, set()).add(edge.v)
        adj.setdefault(edge.v, set()).add(edge.u)
    return adj


def compute_degrees(adj: Adjacency) -> dict[str, int]:
    """Degree of every vertex in an adjacency mapping."""
    return {vid: len(neighbors) for vid, neighbors in adj.items()}


def find_connected_components(vertex_ids: Iterable[str], adj: Adjacency) -> list[list[str]]:
    """Split vertices into connected components using breadth-first search.

    Args:
        vertex_ids: Vertices to cover, in the order components are started
        adj: Adjacency mapping

    Returns:
        Components in discovery order, each listing vertices in BFS order
    """
    visited: set[str] = set()
    components: list[list[str]] = []

    for start in vertex_ids:
        if start in visited:
            continue
        visited.add(start)
        component = [start]
        queue = deque([start])
        while queue:
            u = queue.popleft()
            for v in sorted(adj.get(u, ())):
                if v in visited:
                    continue
                visited.add(v)
                component.append(v)
                queue.append(v)
        components.append(component)

    return components

"""Quilt legality checks.

A graph is quilt-legal when it has at least two vertices, every vertex has
degree two or more, it is connected, it has no bridges and no two edges
cross. All checks are read-only and safe to call at any point, including
mid-correction.
"""

from dataclasses import dataclass, field

from quiltgraph.config import RepairConfig
from quiltgraph.core.adjacency import build_adjacency, find_connected_components
from quiltgraph.core.bridges import Bridge, find_bridges
from quiltgraph.core.crossings import Crossing, find_first_crossing
from quiltgraph.core.degree import find_low_degree_vertices
from quiltgraph.domain import QuiltGraph


@dataclass
class LegalityReport:
    """Per-check diagnostics for a graph.

    Attributes:
        vertex_count: Number of vertices
        low_degree_vertices: Vertices with fewer than two neighbours
        component_count: Number of connected components
        bridges: Bridges found
        crossing: First crossing found, if any
    """

    vertex_count: int
    low_degree_vertices: list[str] = field(default_factory=list)
    component_count: int = 0
    bridges: list[Bridge] = field(default_factory=list)
    crossing: Crossing | None = None

    @property
    def is_legal(self) -> bool:
        """True only if every check passed."""
        return (
            self.vertex_count >= 2
            and not self.low_degree_vertices
            and self.component_count == 1
            and not self.bridges
            and self.crossing is None
        )

    def problems(self) -> list[str]:
        """Human-readable list of failed checks."""
        issues: list[str] = []
        if self.vertex_count < 2:
            issues.append(f"too few vertices ({self.vertex_count})")
        if self.low_degree_vertices:
            issues.append(f"{len(self.low_degree_vertices)} vertices with degree < 2")
        if self.component_count > 1:
            issues.append(f"{self.component_count} connected components")
        if self.bridges:
            issues.append(f"{len(self.bridges)} bridges")
        if self.crossing is not None:
            issues.append(
                f"edges {self.crossing.first.u}-{self.crossing.first.v} and "
                f"{self.crossing.second.u}-{self.crossing.second.v} cross"
            )
        return issues


def check_legality(graph: QuiltGraph, config: RepairConfig | None = None) -> LegalityReport:
    """Run every legality check and collect the findings.

    Args:
        graph: Graph to inspect
        config: Repair configuration supplying crossing tolerances

    Returns:
        LegalityReport with the outcome of each check
    """
    config = config or RepairConfig()
    report = LegalityReport(vertex_count=graph.vertex_count)
    if graph.vertex_count < 2:
        return report

    adj = build_adjacency(graph)
    report.low_degree_vertices = find_low_degree_vertices(adj)
    report.component_count = len(find_connected_components(graph.vertices, adj))
    report.bridges = find_bridges(graph.vertices, adj)
    report.crossing = find_first_crossing(
        graph,
        epsilon=config.crossing_epsilon,
        parallel_tolerance=config.parallel_tolerance,
    )
    return report


def is_quilt_legal(graph: QuiltGraph, config: RepairConfig | None = None) -> bool:
    """Check whether a graph is a legal quilt.

    Checks run in order (degree, connectivity, bridges, crossings) and stop
    at the first failure.

    Args:
        graph: Graph to inspect
        config: Repair configuration supplying crossing tolerances

    Returns:
        True if all checks pass, False otherwise
    """
    if graph.vertex_count < 2:
        return False

    config = config or RepairConfig()
    adj = build_adjacency(graph)

    if find_low_degree_vertices(adj):
        return False
    if len(find_connected_components(graph.vertices, adj)) > 1:
        return False
    if find_bridges(graph.vertices, adj):
        return False

    crossing = find_first_crossing(
        graph,
        epsilon=config.crossing_epsilon,
        parallel_tolerance=config.parallel_tolerance,
    )
    return crossing is None

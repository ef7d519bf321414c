"""Core processing algorithms for quiltgraph.

This module contains the core algorithms for:

- Adjacency, degree and connected-component queries
- Low-degree vertex repair
- Component merging
- Bridge detection (Tarjan low-link, explicit stack) and repair
- Crossing detection and splitting
- The correction loop driving the repairers to a fixed point
- Legality checking
- Face decomposition by angular rotation

Key functions:
- correct_quilt: Repair a graph and decompose it into faces
- is_quilt_legal: Read-only legality predicate
- check_legality: Legality diagnostics per check
- find_bridges: Bridges of a graph
- find_first_crossing: First crossing edge pair in scan order

Key classes:
- QuiltCorrector: Correction loop orchestrator
- DegreeRepairer, ComponentConnector, BridgeRepairer, CrossingResolver:
  The four repairers in priority order
- FaceDecomposer: Traces and colours faces
"""

from quiltgraph.core.adjacency import (
    Adjacency,
    build_adjacency,
    compute_degrees,
    find_connected_components,
)
from quiltgraph.core.bridges import BridgeRepairer, find_bridges
from quiltgraph.core.components import ComponentConnector
from quiltgraph.core.corrector import (
    CorrectionResult,
    QuiltCorrector,
    Termination,
    correct_quilt,
)
from quiltgraph.core.crossings import (
    Crossing,
    CrossingResolver,
    find_first_crossing,
    split_edges_at_intersection,
)
from quiltgraph.core.degree import DegreeRepairer, find_low_degree_vertices
from quiltgraph.core.faces import FaceDecomposer, sort_neighbors_by_angle
from quiltgraph.core.geometry import centroid, segment_crossing, signed_area, squared_distance
from quiltgraph.core.legality import LegalityReport, check_legality, is_quilt_legal

__all__ = [
    "Adjacency",
    # Repairers
    "BridgeRepairer",
    "ComponentConnector",
    # Orchestration
    "CorrectionResult",
    "Crossing",
    "CrossingResolver",
    "DegreeRepairer",
    # Faces
    "FaceDecomposer",
    # Legality
    "LegalityReport",
    "QuiltCorrector",
    "Termination",
    # Graph queries
    "build_adjacency",
    # Geometry functions
    "centroid",
    "check_legality",
    "compute_degrees",
    "correct_quilt",
    "find_bridges",
    "find_connected_components",
    "find_first_crossing",
    "find_low_degree_vertices",
    "is_quilt_legal",
    "segment_crossing",
    "signed_area",
    "sort_neighbors_by_angle",
    "split_edges_at_intersection",
    "squared_distance",
]

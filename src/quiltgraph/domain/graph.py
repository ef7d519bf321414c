"""Core graph types for planar quilt graphs.

This module defines the fundamental types used throughout quiltgraph:
- Point: An immutable 2D coordinate
- Edge: An undirected edge stored with normalised endpoint order
- IdAllocator: Counters minting new vertex and face identifiers
- QuiltGraph: Vertex map, de-duplicated edge list, faces and allocator
"""

import logging
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any, ClassVar

from quiltgraph.domain.face import QuiltPiece

logger = logging.getLogger(__name__)

_NUMERIC_SUFFIX = re.compile(r"(\d+)$")


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: X coordinate (image columns)
        y: Y coordinate (image rows)
    """

    x: float
    y: float

    def to_list(self) -> list[float]:
        """Serialize to a two-element list."""
        return [self.x, self.y]

    @classmethod
    def from_sequence(cls, coords: Iterable[float]) -> "Point":
        """Build a point from an (x, y) pair.

        Args:
            coords: Any two-element sequence of numbers

        Returns:
            Point instance
        """
        x, y = coords
        return cls(float(x), float(y))


@dataclass(frozen=True, slots=True, order=True)
class Edge:
    """An undirected edge between two distinct vertices.

    Endpoints are normalised so that ``u <= v``; ``Edge.of("b", "a")`` and
    ``Edge.of("a", "b")`` compare and hash equal.

    Attributes:
        u: Lower vertex identifier
        v: Higher vertex identifier
    """

    u: str
    v: str

    @classmethod
    def of(cls, a: str, b: str) -> "Edge":
        """Create an edge with normalised endpoint order."""
        return cls(a, b) if a <= b else cls(b, a)

    def other(self, vertex_id: str) -> str:
        """Return the endpoint opposite to ``vertex_id``."""
        return self.v if vertex_id == self.u else self.u

    def shares_endpoint(self, other: "Edge") -> bool:
        """Check whether two edges meet at a common vertex."""
        return self.u in (other.u, other.v) or self.v in (other.u, other.v)

    def to_tuple(self) -> tuple[str, str]:
        """Convert to an (u, v) tuple."""
        return (self.u, self.v)


def numeric_suffix(identifier: str) -> int:
    """Extract the trailing integer of an identifier.

    Examples:
        >>> numeric_suffix("V12")
        12
        >>> numeric_suffix("corner")
        0
    """
    match = _NUMERIC_SUFFIX.search(identifier)
    return int(match.group(1)) if match else 0


@dataclass
class IdAllocator:
    """Monotonic counters for new vertex and face identifiers.

    The vertex counter starts at the highest numeric suffix found among the
    input vertex ids, so minted ``JCT<n>`` ids never collide with them.

    Attributes:
        vertex_counter: Last vertex number handed out
        face_counter: Last face number handed out
    """

    VERTEX_PREFIX: ClassVar[str] = "JCT"
    FACE_PREFIX: ClassVar[str] = "F"

    vertex_counter: int = 0
    face_counter: int = 0

    def reserve(self, vertex_ids: Iterable[str]) -> None:
        """Advance the vertex counter past the numeric suffixes of existing ids."""
        highest = max((numeric_suffix(v) for v in vertex_ids), default=0)
        self.vertex_counter = max(self.vertex_counter, highest)

    def new_vertex_id(self) -> str:
        """Mint the next vertex identifier."""
        self.vertex_counter += 1
        return f"{self.VERTEX_PREFIX}{self.vertex_counter}"

    def new_face_id(self) -> str:
        """Mint the next face identifier."""
        self.face_counter += 1
        return f"{self.FACE_PREFIX}{self.face_counter}"


@dataclass
class QuiltGraph:
    """A planar straight-line graph with derived faces.

    Vertices and edges are the source of truth; faces are filled in once by
    face decomposition and never mutated afterwards.

    Edges are kept in insertion order (crossing detection scans them in that
    order) and de-duplicated: adding an edge that already exists is a no-op.

    Attributes:
        vertices: Mapping of vertex id to coordinates
        edges: Ordered list of unique edges
        faces: Mapping of face id to quilt piece
        allocator: Identifier counters, advanced past the existing vertex ids
    """

    vertices: dict[str, Point] = field(default_factory=dict)
    edges: list[Edge] = field(default_factory=list)
    faces: dict[str, QuiltPiece] = field(default_factory=dict)
    allocator: IdAllocator = field(default_factory=IdAllocator)
    _edge_index: set[Edge] = field(default_factory=set, init=False, repr=False)

    def __post_init__(self) -> None:
        supplied = self.edges
        self.edges = []
        for edge in supplied:
            self.add_edge(edge.u, edge.v)

        self.allocator.reserve(self.vertices)

    @property
    def vertex_count(self) -> int:
        """Number of vertices."""
        return len(self.vertices)

    @property
    def edge_count(self) -> int:
        """Number of edges."""
        return len(self.edges)

    def has_edge(self, a: str, b: str) -> bool:
        """Check if an undirected edge exists between ``a`` and ``b``."""
        return Edge.of(a, b) in self._edge_index

    def new_vertex(self, point: Point) -> str:
        """Create a vertex with a freshly minted identifier.

        Returns:
            The new vertex identifier
        """
        vertex_id = self.allocator.new_vertex_id()
        while vertex_id in self.vertices:
            vertex_id = self.allocator.new_vertex_id()
        self.vertices[vertex_id] = point
        return vertex_id

    def add_edge(self, a: str, b: str) -> bool:
        """Add an undirected edge.

        Self-loops and edges with an unknown endpoint are dropped with a
        warning; duplicates are ignored.

        Returns:
            True if the edge list changed, False otherwise
        """
        if a == b:
            logger.warning("Dropping self-loop on vertex %s", a)
            return False
        if a not in self.vertices or b not in self.vertices:
            logger.warning("Dropping edge %s-%s with unknown endpoint", a, b)
            return False

        edge = Edge.of(a, b)
        if edge in self._edge_index:
            return False

        self.edges.append(edge)
        self._edge_index.add(edge)
        return True

    def remove_edge(self, edge: Edge) -> bool:
        """Remove an edge if present.

        Returns:
            True if the edge was removed
        """
        edge = Edge.of(edge.u, edge.v)
        if edge not in self._edge_index:
            return False
        self._edge_index.discard(edge)
        self.edges.remove(edge)
        return True

    def iter_segments(self) -> Iterator[tuple[Edge, Point, Point]]:
        """Yield each edge with its endpoint coordinates."""
        for edge in self.edges:
            yield edge, self.vertices[edge.u], self.vertices[edge.v]

    def copy(self) -> "QuiltGraph":
        """Return an independent copy.

        Points and faces are immutable once built, so the containers are the
        only thing that needs copying.
        """
        return QuiltGraph(
            vertices=dict(self.vertices),
            edges=list(self.edges),
            faces=dict(self.faces),
            allocator=IdAllocator(
                vertex_counter=self.allocator.vertex_counter,
                face_counter=self.allocator.face_counter,
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the output document shape.

        Returns:
            Dictionary with vertices, edges and faces
        """
        return {
            "vertices": {vid: point.to_list() for vid, point in self.vertices.items()},
            "edges": [list(edge.to_tuple()) for edge in self.edges],
            "faces": {fid: face.to_dict() for fid, face in self.faces.items()},
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "QuiltGraph":
        """Deserialize from a graph document.

        Vertex identifiers are normalised with ``str()``.

        Args:
            data: Dictionary with ``vertices``, ``edges`` and optional ``faces``

        Returns:
            QuiltGraph instance
        """
        vertices = {
            str(vid): Point.from_sequence(coords)
            for vid, coords in (data.get("vertices") or {}).items()
        }
        graph = cls(vertices=vertices)
        for a, b in data.get("edges") or []:
            graph.add_edge(str(a), str(b))
        for fid, face in (data.get("faces") or {}).items():
            graph.faces[str(fid)] = QuiltPiece.from_dict(str(fid), face)
        return graph

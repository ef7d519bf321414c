"""Domain models for quiltgraph.

This module contains the core domain models representing quilt graphs, their
faces and the raster segmentation used for colouring. Models are:

- Plain dataclasses with explicit to_dict/from_dict serialization
- Independent of the JSON schema used at the I/O boundary

Key classes:
- Point: An immutable 2D coordinate
- Edge: A normalised undirected edge
- IdAllocator: Vertex and face id counters owned by a graph
- QuiltGraph: Vertices, edges, faces and allocator
- QuiltPiece: One traced face with an optional colour
- SourceSegmentation: Label matrix and blob colours
"""

from quiltgraph.domain.face import Color, QuiltPiece
from quiltgraph.domain.graph import Edge, IdAllocator, Point, QuiltGraph, numeric_suffix
from quiltgraph.domain.segmentation import SourceSegmentation

__all__: list[str] = [
    "Color",
    "Edge",
    "IdAllocator",
    "Point",
    "QuiltGraph",
    "QuiltPiece",
    "SourceSegmentation",
    "numeric_suffix",
]

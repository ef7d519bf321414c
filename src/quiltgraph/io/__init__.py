"""Graph document I/O layer for quiltgraph.

This module handles reading and writing JSON graph documents. It provides
a clean abstraction layer between the wire format and the domain models.

Key responsibilities:
- Validate documents with Pydantic (flat or ``graph_topology``-nested layout)
- Convert documents to QuiltGraph and SourceSegmentation
- Write corrected graphs with faces and correction statistics

Key classes:
- GraphReader: Load documents and extract graphs
- GraphWriter: Save corrected graphs
- GraphDocument: Pydantic schema of a document
"""

from quiltgraph.io.reader import GraphReader
from quiltgraph.io.schema import GraphDocument
from quiltgraph.io.writer import GraphWriter

__all__ = [
    "GraphDocument",
    "GraphReader",
    "GraphWriter",
]

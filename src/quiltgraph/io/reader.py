"""Graph reader for loading JSON graph documents.

This module provides the GraphReader class for loading graph files and
extracting the graph and segmentation into domain models.
"""

import json
from pathlib import Path

from pydantic import ValidationError

from quiltgraph.domain import QuiltGraph, SourceSegmentation
from quiltgraph.exceptions import GraphFormatError
from quiltgraph.io.schema import GraphDocument


class GraphReader:
    """Loads graph documents and converts them to domain models.

    Example:
        reader = GraphReader(Path("blobs.json"))
        reader.load()
        graph = reader.graph
    """

    def __init__(self, graph_path: Path) -> None:
        """Initialize the graph reader.

        Args:
            graph_path: Path to the JSON graph document
        """
        self._graph_path = graph_path
        self._document: GraphDocument | None = None

    def load(self) -> None:
        """Load and validate the graph document.

        Raises:
            FileNotFoundError: If the file does not exist
            GraphFormatError: If the file is not valid JSON or fails validation
        """
        if not self._graph_path.exists():
            raise FileNotFoundError(f"Graph file not found: {self._graph_path}")

        text = self._graph_path.read_text(encoding="utf-8")
        try:
            self._document = GraphDocument.model_validate(json.loads(text))
        except json.JSONDecodeError as e:
            raise GraphFormatError(str(self._graph_path), f"not valid JSON ({e})") from e
        except ValidationError as e:
            raise GraphFormatError(str(self._graph_path), str(e)) from e

    def _require_document(self) -> GraphDocument:
        if self._document is None:
            raise RuntimeError("Graph not loaded. Call load() first.")
        return self._document

    @property
    def graph(self) -> QuiltGraph:
        """Return the loaded graph.

        Raises:
            RuntimeError: If the document has not been loaded yet
        """
        return self._require_document().to_graph()

    @property
    def segmentation(self) -> SourceSegmentation | None:
        """Return the loaded source segmentation, if any.

        Raises:
            RuntimeError: If the document has not been loaded yet
        """
        return self._require_document().to_segmentation()

    @property
    def vertex_count(self) -> int:
        """Number of vertices in the document."""
        return len(self._require_document().vertices)

    @property
    def edge_count(self) -> int:
        """Number of edges in the document (before de-duplication)."""
        return len(self._require_document().edges)

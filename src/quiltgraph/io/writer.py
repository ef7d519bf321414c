"""Graph writer for saving corrected graph documents."""

import json
from pathlib import Path
from typing import Any

from quiltgraph.core.corrector import CorrectionResult
from quiltgraph.domain import QuiltGraph
from quiltgraph.exceptions import GraphSaveError


class GraphWriter:
    """Writes graphs and correction results as JSON documents.

    Example:
        writer = GraphWriter(Path("blobs-corrected.json"))
        writer.write(result)
    """

    SUFFIX = "-corrected"

    def __init__(self, output_path: Path, indent: int | None = 2) -> None:
        """Initialize the graph writer.

        Args:
            output_path: Destination path
            indent: JSON indentation (None for compact output)
        """
        self.output_path = output_path
        self.indent = indent

    def write(self, data: CorrectionResult | QuiltGraph) -> None:
        """Serialize and save a correction result or bare graph.

        Raises:
            GraphSaveError: If the file cannot be written
        """
        document: dict[str, Any] = data.to_dict()
        if isinstance(data, CorrectionResult):
            document["stats"] = data.stats.to_dict()

        try:
            self.output_path.parent.mkdir(parents=True, exist_ok=True)
            self.output_path.write_text(
                json.dumps(document, indent=self.indent) + "\n",
                encoding="utf-8",
            )
        except OSError as e:
            raise GraphSaveError(str(self.output_path), str(e)) from e

    @staticmethod
    def get_corrected_path(input_path: Path) -> Path:
        """Generate output path with corrected suffix.

        Args:
            input_path: Original graph document path

        Returns:
            Path with "-corrected" suffix (e.g., blobs.json -> blobs-corrected.json)
        """
        return input_path.with_name(f"{input_path.stem}{GraphWriter.SUFFIX}{input_path.suffix or '.json'}")

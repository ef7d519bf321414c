"""Pydantic schema for graph documents.

Validates the JSON shape exchanged with the upstream blob-graph extractor
and the downstream renderer, then converts it into domain models.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from quiltgraph.domain import QuiltGraph, SourceSegmentation
from quiltgraph.domain.face import QuiltPiece


class SegmentationModel(BaseModel):
    """Source segmentation block."""

    labels: list[list[int]] = Field(default_factory=list)
    avg_colors: dict[int, tuple[int, int, int]] = Field(default_factory=dict)
    width: int = 0
    height: int = 0

    model_config = ConfigDict(extra="ignore")

    def to_domain(self) -> SourceSegmentation:
        """Convert to a SourceSegmentation."""
        return SourceSegmentation(
            labels=self.labels,
            avg_colors=dict(self.avg_colors),
            width=self.width,
            height=self.height,
        )


class FaceModel(BaseModel):
    """A face entry of an output document."""

    vertices: list[str]
    color: tuple[int, int, int] | None = None

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)


class GraphDocument(BaseModel):
    """A graph document.

    Topology may sit at the top level or nested under ``graph_topology``
    (the blob-graph extractor's layout).
    """

    vertices: dict[str, tuple[float, float]] = Field(default_factory=dict)
    edges: list[tuple[str, str]] = Field(default_factory=list)
    faces: dict[str, FaceModel] = Field(default_factory=dict)
    source_segmentation: SegmentationModel | None = None

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    @model_validator(mode="before")
    @classmethod
    def unwrap_topology(cls, data: Any) -> Any:
        if isinstance(data, dict) and isinstance(data.get("graph_topology"), dict):
            merged = dict(data["graph_topology"])
            merged.setdefault("source_segmentation", data.get("source_segmentation"))
            return merged
        return data

    def to_graph(self) -> QuiltGraph:
        """Build the domain graph; invalid edges are dropped by the graph."""
        graph = QuiltGraph.from_dict({"vertices": self.vertices, "edges": self.edges})
        for face_id, face in self.faces.items():
            graph.faces[face_id] = QuiltPiece(
                face_id=face_id,
                vertices=tuple(face.vertices),
                color=face.color,
            )
        return graph

    def to_segmentation(self) -> SourceSegmentation | None:
        """Build the domain segmentation, if present."""
        if self.source_segmentation is None:
            return None
        return self.source_segmentation.to_domain()

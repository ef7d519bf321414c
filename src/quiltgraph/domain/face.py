"""Quilt piece (face) representation.

A quilt piece is one boundary traced by face decomposition: an ordered,
cyclic sequence of vertex ids plus an optional fill colour sampled from the
source segmentation.
"""

from dataclasses import dataclass
from typing import Any

Color = tuple[int, int, int]


@dataclass(frozen=True)
class QuiltPiece:
    """A face of the corrected quilt graph.

    Attributes:
        face_id: Face identifier (e.g., "F1")
        vertices: Vertex ids in traversal order; the last connects to the first
        color: RGB fill colour, None when no segmentation was sampled
    """

    face_id: str
    vertices: tuple[str, ...]
    color: Color | None = None

    def __len__(self) -> int:
        return len(self.vertices)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with vertices and color fields
        """
        return {
            "vertices": list(self.vertices),
            "color": list(self.color) if self.color is not None else None,
        }

    @classmethod
    def from_dict(cls, face_id: str, data: dict[str, Any]) -> "QuiltPiece":
        """Deserialize from dictionary.

        Args:
            face_id: Identifier of the face
            data: Dictionary with vertices and optional color

        Returns:
            QuiltPiece instance
        """
        color = data.get("color")
        return cls(
            face_id=face_id,
            vertices=tuple(str(v) for v in data["vertices"]),
            color=(int(color[0]), int(color[1]), int(color[2])) if color else None,
        )

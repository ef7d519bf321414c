"""Source raster segmentation used to colour quilt pieces."""

import math
from dataclasses import dataclass, field
from typing import Any

from quiltgraph.domain.face import Color


@dataclass
class SourceSegmentation:
    """Read-only blob labelling of the source image.

    Attributes:
        labels: Label matrix indexed ``labels[y][x]``; 0 is background
        avg_colors: Average RGB colour per blob id
        width: Raster width in pixels
        height: Raster height in pixels
    """

    labels: list[list[int]]
    avg_colors: dict[int, Color] = field(default_factory=dict)
    width: int = 0
    height: int = 0

    def __post_init__(self) -> None:
        if not self.height:
            self.height = len(self.labels)
        if not self.width and self.labels:
            self.width = len(self.labels[0])

    def is_empty(self) -> bool:
        """Check if the label matrix has no pixels."""
        return not self.labels or not self.labels[0]

    def label_at(self, x: float, y: float) -> int | None:
        """Look up the blob label under a point.

        Coordinates are rounded half-up to the nearest pixel and clamped to
        the matrix bounds.

        Returns:
            Blob id, or None for an empty matrix
        """
        if self.is_empty():
            return None
        rows = len(self.labels)
        cols = len(self.labels[0])
        row = min(max(math.floor(y + 0.5), 0), rows - 1)
        col = min(max(math.floor(x + 0.5), 0), cols - 1)
        return self.labels[row][col]

    def color_at(self, x: float, y: float) -> Color | None:
        """Average colour of the blob under a point, if any."""
        label = self.label_at(x, y)
        if label is None:
            return None
        return self.avg_colors.get(label)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary representation of the segmentation
        """
        return {
            "labels": self.labels,
            "avg_colors": {str(k): list(v) for k, v in self.avg_colors.items()},
            "width": self.width,
            "height": self.height,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SourceSegmentation":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a segmentation

        Returns:
            SourceSegmentation instance
        """
        avg_colors = {
            int(k): (int(c[0]), int(c[1]), int(c[2]))
            for k, c in (data.get("avg_colors") or {}).items()
        }
        return cls(
            labels=[list(row) for row in data.get("labels") or []],
            avg_colors=avg_colors,
            width=int(data.get("width") or 0),
            height=int(data.get("height") or 0),
        )

"""Configuration settings for Quiltgraph."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class BridgeStrategy(str, Enum):
    """How a detected bridge is repaired."""

    CONNECT_SIDES = "connect_sides"
    PARALLEL_EDGE = "parallel_edge"


class RepairConfig(BaseModel):
    """Configuration for the correction loop and its repairers."""

    iteration_factor: int = Field(
        default=2,
        ge=1,
        le=100,
        description="Pass cap as a multiple of the input vertex count",
    )
    bridge_strategy: BridgeStrategy = Field(
        default=BridgeStrategy.CONNECT_SIDES,
        description=(
            "connect_sides joins the two halves split by the bridge; "
            "parallel_edge re-inserts the bridge itself, which changes nothing"
        ),
    )
    crossing_epsilon: float = Field(
        default=1e-9,
        ge=0.0,
        lt=0.5,
        description="Crossing parameters must lie strictly inside (eps, 1 - eps)",
    )
    parallel_tolerance: float = Field(
        default=0.0,
        ge=0.0,
        description="Segments whose determinant magnitude is at most this are parallel",
    )

    def max_iterations(self, vertex_count: int) -> int:
        """Pass cap for a graph with the given number of vertices."""
        return self.iteration_factor * vertex_count


class FaceConfig(BaseModel):
    """Configuration for face decomposition."""

    exclude_exterior: bool = Field(
        default=False,
        description="Drop traced faces with positive signed area (the unbounded exterior)",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class QuiltGraphSettings(BaseModel):
    """Main application settings."""

    repair: RepairConfig = Field(default_factory=RepairConfig)
    faces: FaceConfig = Field(default_factory=FaceConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> QuiltGraphSettings:
    """Get default application settings."""
    return QuiltGraphSettings()

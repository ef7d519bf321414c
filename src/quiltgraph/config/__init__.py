"""Configuration management for quiltgraph.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- RepairConfig: Correction loop and repairer settings
- FaceConfig: Face decomposition settings
- LoggingConfig: Logging settings
- QuiltGraphSettings: Main application settings
"""

from quiltgraph.config.settings import (
    BridgeStrategy,
    FaceConfig,
    LoggingConfig,
    QuiltGraphSettings,
    RepairConfig,
    get_default_settings,
)

__all__ = [
    "BridgeStrategy",
    "FaceConfig",
    "LoggingConfig",
    "QuiltGraphSettings",
    "RepairConfig",
    "get_default_settings",
]

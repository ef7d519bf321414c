"""Utility functions for quiltgraph.

This module provides utility functions including:

- Logging setup and configuration
- Correction statistics and progress logging
"""

from quiltgraph.utils.logging import (
    CorrectionLogger,
    CorrectionStats,
    configure_logging,
)

__all__ = [
    "CorrectionLogger",
    "CorrectionStats",
    "configure_logging",
]

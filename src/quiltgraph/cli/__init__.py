"""Command-line interface for quiltgraph.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- correct: repair a graph document and write it with its faces
- check: legality report with a meaningful exit code
- faces: face decomposition of an uncorrected graph
"""

from quiltgraph.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]

"""Quiltgraph - Repair planar graphs into quilts and cut them into pieces.

Quiltgraph takes a possibly defective planar straight-line graph (vertices with
2D coordinates and undirected edges), repairs it until it is "quilt-legal"
(every vertex of degree two or more, connected, bridge-free and free of
crossing edges) and decomposes the result into polygonal faces, optionally
colouring each face from a raster segmentation.

Example:
    $ quiltgraph correct blobs.json

This will create blobs-corrected.json holding the repaired graph and its faces.
"""

__version__ = "0.1.0"
__author__ = "Quiltgraph Developers"

__all__ = ["__author__", "__version__"]

"""Correction loop driving the repairers to a fixed point.

This module coordinates the full correction workflow:
- Rebuild adjacency at the start of every pass
- Check defect categories in priority order (degree, components, bridges,
  crossings) and repair only the first category with defects
- Stop when a pass finds nothing, when a repair cannot change the graph, or
  when the pass cap is exceeded
- Decompose the final graph into faces

Key components:
- QuiltCorrector: Orchestrator class holding configuration and repairers
- correct_quilt: Convenience function using default settings
"""

import time
from dataclasses import dataclass
from enum import Enum
from typing import Any

import structlog

from quiltgraph.config import QuiltGraphSettings
from quiltgraph.core.adjacency import build_adjacency
from quiltgraph.core.bridges import BridgeRepairer
from quiltgraph.core.components import ComponentConnector
from quiltgraph.core.crossings import CrossingResolver
from quiltgraph.core.degree import DegreeRepairer
from quiltgraph.core.faces import FaceDecomposer
from quiltgraph.domain import QuiltGraph, SourceSegmentation
from quiltgraph.utils import CorrectionLogger, CorrectionStats


class Termination(str, Enum):
    """Why the correction loop stopped."""

    STABLE = "stable"
    STALLED = "stalled"
    ITERATION_CAP = "iteration_cap"


@dataclass
class CorrectionResult:
    """Outcome of a correction run.

    Attributes:
        graph: Corrected graph with faces filled in
        segmentation: Source segmentation passed in, if any
        stats: Pass counts, fixes and termination reason
    """

    graph: QuiltGraph
    segmentation: SourceSegmentation | None
    stats: CorrectionStats

    @property
    def termination(self) -> Termination | None:
        """Termination reason as an enum."""
        return Termination(self.stats.termination) if self.stats.termination else None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the output document shape.

        Returns:
            Dictionary with vertices, edges, faces and the segmentation
        """
        data = self.graph.to_dict()
        data["source_segmentation"] = (
            self.segmentation.to_dict() if self.segmentation is not None else None
        )
        return data


class QuiltCorrector:
    """Repairs graphs until they stop changing.

    The input graph is never mutated; correction works on a copy.

    Example:
        corrector = QuiltCorrector(QuiltGraphSettings())
        result = corrector.correct(graph, segmentation)
        if not is_quilt_legal(result.graph):
            ...
    """

    def __init__(
        self,
        settings: QuiltGraphSettings | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the corrector.

        Args:
            settings: Quiltgraph settings (defaults if None)
            logger: Structured logger (the "quiltgraph" logger if None)
        """
        self.settings = settings or QuiltGraphSettings()
        self.logger = logger or structlog.get_logger("quiltgraph")
        repair = self.settings.repair
        self.repairers = [
            DegreeRepairer(),
            ComponentConnector(),
            BridgeRepairer(repair),
            CrossingResolver(repair),
        ]
        self.decomposer = FaceDecomposer(self.settings.faces)

    def correct(
        self,
        graph: QuiltGraph,
        segmentation: SourceSegmentation | None = None,
    ) -> CorrectionResult:
        """Repair a graph and decompose it into faces.

        Args:
            graph: Graph to repair (left untouched)
            segmentation: Optional label raster used to colour faces

        Returns:
            CorrectionResult; callers must check legality themselves
        """
        working = graph.copy()
        correction_logger = CorrectionLogger(self.logger)
        stats = correction_logger.stats
        stats.start_time = time.time()

        max_iterations = self.settings.repair.max_iterations(working.vertex_count)
        correction_logger.log_start(working.vertex_count, working.edge_count, max_iterations)

        termination = self._run_passes(working, max_iterations, correction_logger)

        self.decomposer.identify_faces(working, segmentation)

        stats.end_time = time.time()
        correction_logger.log_complete(
            termination=termination.value,
            vertex_count=working.vertex_count,
            edge_count=working.edge_count,
            face_count=len(working.faces),
        )

        return CorrectionResult(graph=working, segmentation=segmentation, stats=stats)

    def _run_passes(
        self,
        graph: QuiltGraph,
        max_iterations: int,
        correction_logger: CorrectionLogger,
    ) -> Termination:
        """Run correction passes on ``graph`` in place.

        Returns:
            Reason the loop stopped
        """
        pass_number = 0
        while True:
            pass_number += 1
            if pass_number > max_iterations:
                correction_logger.log_iteration_cap(max_iterations)
                return Termination.ITERATION_CAP

            correction_logger.log_pass(pass_number)
            adj = build_adjacency(graph)

            for repairer in self.repairers:
                defects = repairer.detect(graph, adj)
                if not defects:
                    continue
                if repairer.fix(graph, adj, defects):
                    correction_logger.log_fix(repairer.category, len(defects), pass_number)
                    break
                correction_logger.log_stalled(repairer.category, len(defects), pass_number)
                return Termination.STALLED
            else:
                return Termination.STABLE


def correct_quilt(
    graph: QuiltGraph,
    segmentation: SourceSegmentation | None = None,
    settings: QuiltGraphSettings | None = None,
) -> CorrectionResult:
    """Repair a graph into a quilt and decompose it into faces.

    Args:
        graph: Graph to repair (left untouched)
        segmentation: Optional label raster used to colour faces
        settings: Quiltgraph settings (defaults if None)

    Returns:
        CorrectionResult holding the corrected graph
    """
    return QuiltCorrector(settings).correct(graph, segmentation)

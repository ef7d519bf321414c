"""Logging utilities for Quiltgraph."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

_FILE_HANDLER = "quiltgraph.file"
_CONSOLE_HANDLER = "quiltgraph.console"
_HANDLER_NAMES = (_FILE_HANDLER, _CONSOLE_HANDLER)


@dataclass
class CorrectionStats:
    """Statistics from one correction run."""

    passes: int = 0
    fixes: dict[str, int] = field(default_factory=dict)
    vertices_before: int = 0
    vertices_after: int = 0
    edges_before: int = 0
    edges_after: int = 0
    face_count: int = 0
    termination: str | None = None
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate correction duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def total_fixes(self) -> int:
        """Number of passes that changed the graph."""
        return sum(self.fixes.values())

    @property
    def vertices_added(self) -> int:
        """Vertices minted while resolving crossings."""
        return self.vertices_after - self.vertices_before

    def to_dict(self) -> dict[str, object]:
        """Serialize for reporting."""
        return {
            "passes": self.passes,
            "fixes": dict(self.fixes),
            "vertices_added": self.vertices_added,
            "edges_before": self.edges_before,
            "edges_after": self.edges_after,
            "face_count": self.face_count,
            "termination": self.termination,
        }


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Repeated calls replace the handlers installed last time
    for handler in list(root_logger.handlers):
        if handler.get_name() in _HANDLER_NAMES:
            root_logger.removeHandler(handler)
            handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.set_name(_FILE_HANDLER)
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.set_name(_CONSOLE_HANDLER)
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("quiltgraph")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class CorrectionLogger:
    """Logger for tracking correction passes and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = CorrectionStats()

    def log_start(self, vertex_count: int, edge_count: int, max_iterations: int) -> None:
        """Log start of a correction run."""
        self._logger.info(
            "Correction started",
            vertices=vertex_count,
            edges=edge_count,
            max_iterations=max_iterations,
        )
        self._stats.vertices_before = vertex_count
        self._stats.edges_before = edge_count

    def log_pass(self, pass_number: int) -> None:
        """Log the start of a pass."""
        self._logger.debug("Correction pass", pass_number=pass_number)
        self._stats.passes = pass_number

    def log_fix(self, category: str, defect_count: int, pass_number: int) -> None:
        """Log a corrective action that changed the graph."""
        self._logger.debug(
            "Defect repaired",
            category=category,
            defects=defect_count,
            pass_number=pass_number,
        )
        self._stats.fixes[category] = self._stats.fixes.get(category, 0) + 1

    def log_stalled(self, category: str, defect_count: int, pass_number: int) -> None:
        """Log a defect category that could not be repaired."""
        self._logger.warning(
            "Correction stalled",
            category=category,
            defects=defect_count,
            pass_number=pass_number,
        )

    def log_iteration_cap(self, max_iterations: int) -> None:
        """Log that the pass cap stopped the loop."""
        self._logger.warning("Iteration cap reached", max_iterations=max_iterations)

    def log_complete(
        self,
        termination: str,
        vertex_count: int,
        edge_count: int,
        face_count: int,
    ) -> None:
        """Log end of a correction run."""
        self._stats.termination = termination
        self._stats.vertices_after = vertex_count
        self._stats.edges_after = edge_count
        self._stats.face_count = face_count
        self._logger.info(
            "Correction complete",
            termination=termination,
            passes=self._stats.passes,
            fixes=self._stats.total_fixes,
            vertices=vertex_count,
            edges=edge_count,
            faces=face_count,
        )

    @property
    def stats(self) -> CorrectionStats:
        """Get current correction statistics."""
        return self._stats

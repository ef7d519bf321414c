"""Exception hierarchy for Quiltgraph.

The correction engine itself never raises on degenerate graphs; these
exceptions cover reading and writing graph documents.
"""


class QuiltGraphError(Exception):
    """Base exception for all Quiltgraph errors."""

    pass


class GraphIOError(QuiltGraphError):
    """Errors related to graph document loading or saving."""

    pass


class GraphLoadError(GraphIOError):
    """Error loading a graph document."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load graph '{path}': {reason}")


class GraphSaveError(GraphIOError):
    """Error saving a graph document."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save graph '{path}': {reason}")


class GraphFormatError(GraphIOError):
    """Graph document does not match the expected schema."""

    def __init__(self, path: str, details: str) -> None:
        self.path = path
        self.details = details
        super().__init__(f"Invalid graph document '{path}': {details}")

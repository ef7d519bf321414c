"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from quiltgraph.core import LegalityReport
from quiltgraph.domain import QuiltGraph
from quiltgraph.utils import CorrectionStats

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Quiltgraph[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_graph_info(graph_path: str, vertex_count: int, edge_count: int) -> None:
    """Print graph document information.

    Args:
        graph_path: Path to the graph document
        vertex_count: Number of vertices
        edge_count: Number of edges
    """
    line = Text("  ")
    line.append(graph_path)
    console.print(line)
    console.print(f"  {vertex_count:,} vertices {SYM_DOT} {edge_count:,} edges")


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    return f"{seconds:.1f}s"


def print_correction_summary(stats: CorrectionStats, output_path: str) -> None:
    """Print correction summary.

    Args:
        stats: Statistics of the correction run
        output_path: Path the corrected document was written to
    """
    console.print(
        f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(stats.duration_seconds)}"
    )

    line = Text("  ")
    line.append(output_path, style="bold")
    console.print(line)

    fixes = ", ".join(f"{name} {count}" for name, count in stats.fixes.items()) or "none"
    console.print(
        f"  {stats.passes} passes {SYM_DOT} fixes: {fixes} {SYM_DOT} "
        f"{stats.vertices_added} vertices added {SYM_DOT} {stats.face_count} faces"
    )
    console.print(f"  stopped: {stats.termination}")


def print_legality(report: LegalityReport) -> None:
    """Print a legality report.

    Args:
        report: Report to display
    """
    if report.is_legal:
        console.print(f"\n[bold green]{SYM_OK} Quilt-legal[/bold green]")
        return

    console.print(f"\n[bold red]{SYM_ERR} Not quilt-legal[/bold red]")
    for problem in report.problems():
        console.print(f"  {SYM_DOT} {problem}")


def print_faces(graph: QuiltGraph, limit: int = 20) -> None:
    """Print a table of faces.

    Args:
        graph: Graph whose faces are listed
        limit: Maximum rows to show
    """
    table = Table(show_header=True, header_style="bold")
    table.add_column("Face")
    table.add_column("Vertices", justify="right")
    table.add_column("Boundary")
    table.add_column("Color")

    faces = list(graph.faces.values())
    for face in faces[:limit]:
        color = "rgb({},{},{})".format(*face.color) if face.color else "-"
        table.add_row(face.face_id, str(len(face)), " ".join(face.vertices), color)

    console.print(table)
    if len(faces) > limit:
        console.print(f"  ... +{len(faces) - limit} more")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")

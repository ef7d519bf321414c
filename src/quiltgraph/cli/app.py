"""CLI application entry point for quiltgraph.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import structlog
import typer

from quiltgraph import __version__
from quiltgraph.cli.output import (
    console,
    print_correction_summary,
    print_error,
    print_faces,
    print_graph_info,
    print_header,
    print_legality,
    print_step,
)
from quiltgraph.config import (
    BridgeStrategy,
    FaceConfig,
    LoggingConfig,
    QuiltGraphSettings,
    RepairConfig,
)
from quiltgraph.core import FaceDecomposer, QuiltCorrector, check_legality
from quiltgraph.domain import QuiltGraph, SourceSegmentation
from quiltgraph.exceptions import GraphFormatError, GraphLoadError, QuiltGraphError
from quiltgraph.io import GraphReader, GraphWriter
from quiltgraph.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="quiltgraph",
    help="Repair planar graphs into quilts and decompose them into faces.",
    add_completion=False,
    no_args_is_help=True,
)

EXIT_ILLEGAL = 2


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Quiltgraph[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Repair planar graphs into quilts and decompose them into faces."""


def _load_graph(input_graph: Path, quiet: bool) -> tuple[QuiltGraph, SourceSegmentation | None]:
    """Validate the input path and load the graph document.

    Raises:
        typer.Exit: If the input path is missing or not a file
        GraphLoadError: If the document cannot be read
        GraphFormatError: If the document fails validation
    """
    if not input_graph.exists():
        print_error(
            f"Input file not found: {input_graph}",
            details=f"The file '{input_graph}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not input_graph.is_file():
        print_error(
            f"Input path is not a file: {input_graph}",
            details="Please provide a path to a JSON graph document.",
        )
        raise typer.Exit(code=1)

    if not quiet:
        print_step("Loading graph")

    reader = GraphReader(input_graph)
    try:
        reader.load()
    except GraphFormatError:
        raise
    except OSError as e:
        raise GraphLoadError(str(input_graph), str(e)) from e

    if not quiet:
        print_graph_info(str(input_graph), reader.vertex_count, reader.edge_count)

    return reader.graph, reader.segmentation


def _setup_logging(config: LoggingConfig, quiet: bool) -> structlog.stdlib.BoundLogger:
    """Install console and file log handlers for a command."""
    return configure_logging(
        log_file=config.log_file,
        console_level=config.log_level,
        file_level=config.file_log_level,
        quiet=quiet,
    )


def _exit_on_error(error: Exception) -> typer.Exit:
    """Report an error and build the matching exit."""
    if isinstance(error, GraphLoadError):
        print_error(f"Could not load graph: {error.reason}")
    elif isinstance(error, GraphFormatError):
        print_error("Invalid graph document", details=error.details)
    elif isinstance(error, QuiltGraphError):
        print_error(str(error))
    else:
        print_error(f"Unexpected error: {error}")
    return typer.Exit(code=1)


@app.command()
def correct(
    input_graph: Annotated[
        Path,
        typer.Argument(
            help="Path to input JSON graph document",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path (default: {name}-corrected.json)",
        ),
    ] = None,
    bridge_strategy: Annotated[
        str,
        typer.Option(
            "--bridge-strategy",
            "-b",
            help="Bridge repair (connect_sides|parallel_edge)",
        ),
    ] = "connect_sides",
    iteration_factor: Annotated[
        int,
        typer.Option(
            "--iteration-factor",
            help="Pass cap as a multiple of the vertex count",
            min=1,
            max=100,
        ),
    ] = 2,
    exclude_exterior: Annotated[
        bool,
        typer.Option(
            "--exclude-exterior",
            help="Drop the unbounded exterior face",
        ),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
) -> None:
    """Repair a graph into a quilt and write it with its faces.

    Example:
        quiltgraph correct blobs.json

    This will create blobs-corrected.json holding the corrected vertices,
    edges and faces.
    """
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    try:
        strategy = BridgeStrategy(bridge_strategy.lower())
    except ValueError:
        print_error(
            f"Invalid bridge strategy: {bridge_strategy}",
            details="Valid values: connect_sides, parallel_edge",
        )
        raise typer.Exit(code=1) from None

    if not quiet:
        print_header(__version__)

    settings = QuiltGraphSettings(
        repair=RepairConfig(
            iteration_factor=iteration_factor,
            bridge_strategy=strategy,
        ),
        faces=FaceConfig(exclude_exterior=exclude_exterior),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level if not quiet else "WARNING",
        ),
    )

    try:
        logger = _setup_logging(settings.logging, quiet)

        graph, segmentation = _load_graph(input_graph, quiet)

        if not quiet:
            print_step("Correcting")

        result = QuiltCorrector(settings, logger=logger).correct(graph, segmentation)

        output_path = output or GraphWriter.get_corrected_path(input_graph)
        GraphWriter(output_path).write(result)

        if not quiet:
            print_correction_summary(result.stats, str(output_path))
            print_legality(check_legality(result.graph, settings.repair))
            if verbose:
                print_faces(result.graph)

    except typer.Exit:
        raise
    except Exception as e:
        raise _exit_on_error(e) from e


@app.command()
def check(
    input_graph: Annotated[
        Path,
        typer.Argument(
            help="Path to input JSON graph document",
            show_default=False,
        ),
    ],
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="No output; report through the exit code only",
        ),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
) -> None:
    """Check whether a graph is quilt-legal.

    Exits with code 0 when legal and 2 when not.
    """
    try:
        _setup_logging(
            LoggingConfig(log_file=log_file, log_level=log_level if not quiet else "WARNING"),
            quiet,
        )
        graph, _ = _load_graph(input_graph, quiet)
        report = check_legality(graph)
    except typer.Exit:
        raise
    except Exception as e:
        raise _exit_on_error(e) from e

    if not quiet:
        print_legality(report)

    if not report.is_legal:
        raise typer.Exit(code=EXIT_ILLEGAL)


@app.command()
def faces(
    input_graph: Annotated[
        Path,
        typer.Argument(
            help="Path to input JSON graph document",
            show_default=False,
        ),
    ],
    exclude_exterior: Annotated[
        bool,
        typer.Option(
            "--exclude-exterior",
            help="Drop the unbounded exterior face",
        ),
    ] = False,
    limit: Annotated[
        int,
        typer.Option(
            "--limit",
            "-n",
            help="Maximum faces to list",
            min=1,
        ),
    ] = 20,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
) -> None:
    """Decompose a graph into faces without correcting it."""
    try:
        _setup_logging(LoggingConfig(log_file=log_file, log_level=log_level), quiet=False)
        graph, segmentation = _load_graph(input_graph, quiet=False)
        print_step("Tracing faces")
        FaceDecomposer(FaceConfig(exclude_exterior=exclude_exterior)).identify_faces(
            graph, segmentation
        )
    except typer.Exit:
        raise
    except Exception as e:
        raise _exit_on_error(e) from e

    console.print(f"  [green]{len(graph.faces)}[/green] faces")
    print_faces(graph, limit=limit)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()

"""Tests for the command-line interface."""

import json
from pathlib import Path
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from quiltgraph import __version__
from quiltgraph.cli.app import app

runner = CliRunner()

PATH_DOCUMENT = {
    "vertices": {"a": [0, 0], "b": [10, 0], "c": [20, 0], "d": [30, 0]},
    "edges": [["a", "b"], ["b", "c"], ["c", "d"]],
}

TRIANGLE_DOCUMENT = {
    "vertices": {"a": [0, 0], "b": [10, 0], "c": [5, 10]},
    "edges": [["a", "b"], ["b", "c"], ["c", "a"]],
}


@pytest.fixture
def path_file(tmp_path) -> Path:
    path = tmp_path / "path.json"
    path.write_text(json.dumps(PATH_DOCUMENT), encoding="utf-8")
    return path


@pytest.fixture
def triangle_file(tmp_path) -> Path:
    path = tmp_path / "triangle.json"
    path.write_text(json.dumps(TRIANGLE_DOCUMENT), encoding="utf-8")
    return path


class TestVersion:
    """Tests for the version option."""

    def test_version(self):
        """Test --version prints the version and exits cleanly."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestCorrectCommand:
    """Tests for the correct command."""

    def test_writes_default_output(self, path_file):
        """Test the corrected document lands next to the input."""
        result = runner.invoke(app, ["correct", str(path_file)])

        assert result.exit_code == 0, result.output
        output = path_file.with_name("path-corrected.json")
        data = json.loads(output.read_text(encoding="utf-8"))
        assert len(data["edges"]) == 5
        assert data["faces"]
        assert data["stats"]["termination"] == "stable"

    def test_explicit_output_quiet(self, path_file, tmp_path):
        """Test --output and --quiet together."""
        output = tmp_path / "custom.json"
        result = runner.invoke(app, ["correct", str(path_file), "-o", str(output), "-q"])

        assert result.exit_code == 0
        assert output.exists()

    def test_exclude_exterior(self, triangle_file, tmp_path):
        """Test the exterior face is dropped on request."""
        output = tmp_path / "out.json"
        result = runner.invoke(
            app, ["correct", str(triangle_file), "-o", str(output), "--exclude-exterior", "-q"]
        )

        assert result.exit_code == 0
        data = json.loads(output.read_text(encoding="utf-8"))
        assert len(data["faces"]) == 1

    def test_invalid_bridge_strategy(self, path_file):
        """Test an unknown bridge strategy is rejected."""
        result = runner.invoke(app, ["correct", str(path_file), "--bridge-strategy", "magic"])
        assert result.exit_code == 1
        assert "Invalid bridge strategy" in result.output

    def test_verbose_and_quiet(self, path_file):
        """Test conflicting verbosity flags are rejected."""
        result = runner.invoke(app, ["correct", str(path_file), "-v", "-q"])
        assert result.exit_code == 1

    def test_missing_input(self, tmp_path):
        """Test a missing input file exits with an error."""
        result = runner.invoke(app, ["correct", str(tmp_path / "missing.json")])
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_invalid_document(self, tmp_path):
        """Test a malformed document exits with an error."""
        path = tmp_path / "broken.json"
        path.write_text("[1, 2", encoding="utf-8")

        result = runner.invoke(app, ["correct", str(path)])
        assert result.exit_code == 1
        assert "Invalid graph document" in result.output


class TestCheckCommand:
    """Tests for the check command."""

    def test_legal(self, triangle_file):
        """Test a legal graph exits with 0."""
        result = runner.invoke(app, ["check", str(triangle_file)])
        assert result.exit_code == 0
        assert "Quilt-legal" in result.output

    def test_illegal(self, path_file):
        """Test an illegal graph exits with 2 and lists problems."""
        result = runner.invoke(app, ["check", str(path_file)])
        assert result.exit_code == 2
        assert "bridges" in result.output

    def test_input_is_directory(self, tmp_path):
        """Test a directory input exits with an error."""
        result = runner.invoke(app, ["check", str(tmp_path)])
        assert result.exit_code == 1

    def test_configures_logging(self, triangle_file, tmp_path):
        """Test the check command installs log handlers like correct does."""
        log_file = tmp_path / "check.log"
        with patch("quiltgraph.cli.app.configure_logging") as mock_configure:
            result = runner.invoke(
                app,
                ["check", str(triangle_file), "--log-file", str(log_file), "--log-level", "DEBUG"],
            )

        assert result.exit_code == 0
        mock_configure.assert_called_once_with(
            log_file=log_file, console_level="DEBUG", file_level="DEBUG", quiet=False
        )

    def test_quiet_logging(self, triangle_file):
        """Test quiet mode is passed through to logging."""
        with patch("quiltgraph.cli.app.configure_logging") as mock_configure:
            result = runner.invoke(app, ["check", str(triangle_file), "-q"])

        assert result.exit_code == 0
        assert mock_configure.call_args.kwargs["quiet"] is True


class TestFacesCommand:
    """Tests for the faces command."""

    def test_lists_faces(self, triangle_file):
        """Test faces are traced and listed."""
        result = runner.invoke(app, ["faces", str(triangle_file)])
        assert result.exit_code == 0
        assert "F1" in result.output
        assert "F2" in result.output

    def test_configures_logging(self, triangle_file):
        """Test the faces command installs log handlers like correct does."""
        with patch("quiltgraph.cli.app.configure_logging") as mock_configure:
            result = runner.invoke(app, ["faces", str(triangle_file), "--log-level", "INFO"])

        assert result.exit_code == 0
        mock_configure.assert_called_once_with(
            log_file=None, console_level="INFO", file_level="DEBUG", quiet=False
        )

"""Tests for the dots command-line interface."""

import pytest
from pathlib import Path
from typer.testing import CliRunner

from dots.cli import app

runner = CliRunner()


@pytest.fixture
def yaml_file(tmp_path: Path) -> Path:
    path = tmp_path / "config.yml"
    path.write_text(
        "y: jack\n"
        "a:\n"
        "  host: localhost\n"
        "  port: 5000\n"
        "  debug: false\n"
        "x:\n"
        "  b:\n"
        "    c:\n"
        "      d: hello\n"
    )
    return path


# ---------------------------------------------------------------------------
# single-key command tests
# ---------------------------------------------------------------------------


class TestGetString:
    """Tests for the get-string command."""

    def test_prints_value(self, yaml_file: Path):
        result = runner.invoke(app, ["get-string", "a.host", "--file", str(yaml_file)])
        assert result.exit_code == 0
        assert result.output.strip() == "localhost"

    def test_missing_key(self, yaml_file: Path):
        result = runner.invoke(app, ["get-string", "a.missing", "--file", str(yaml_file)])
        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "could not be found" in result.output

    def test_default_file(self):
        """Without --file the bundled example.yml is read."""
        result = runner.invoke(app, ["get-string", "a.b.c"])
        assert result.exit_code == 0
        assert "hello from dots" in result.output

    def test_default_file_from_other_directory(self, tmp_path: Path, monkeypatch):
        """The default document ships inside the package, not the working directory."""
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(app, ["get-int", "a.b.d"])
        assert result.exit_code == 0
        assert result.output.strip() == "42"

    def test_missing_file(self):
        result = runner.invoke(app, ["get-string", "a.host", "--file", "/nonexistent/config.yml"])
        assert result.exit_code == 1
        assert "Unable to read YAML file" in result.output

    def test_invalid_file(self, tmp_path: Path):
        bad = tmp_path / "bad.yml"
        bad.write_text("a:\nhost: x\n  port: 1\n")
        result = runner.invoke(app, ["get-string", "a.host", "--file", str(bad)])
        assert result.exit_code == 1
        assert "Invalid YAML" in result.output


class TestGetInt:
    """Tests for the get-int command."""

    def test_prints_value(self, yaml_file: Path):
        result = runner.invoke(app, ["get-int", "a.port", "--file", str(yaml_file)])
        assert result.exit_code == 0
        assert result.output.strip() == "5000"

    def test_type_mismatch(self, yaml_file: Path):
        result = runner.invoke(app, ["get-int", "a.host", "--file", str(yaml_file)])
        assert result.exit_code == 1
        assert "expected int" in result.output


class TestGetBool:
    """Tests for the get-bool command."""

    def test_prints_lowercase(self, yaml_file: Path):
        result = runner.invoke(app, ["get-bool", "a.debug", "--file", str(yaml_file)])
        assert result.exit_code == 0
        assert result.output.strip() == "false"

    def test_missing_key(self, yaml_file: Path):
        result = runner.invoke(app, ["get-bool", "y.z", "--file", str(yaml_file)])
        assert result.exit_code == 1


# ---------------------------------------------------------------------------
# batch command tests
# ---------------------------------------------------------------------------


class TestBatchCommands:
    """Tests for get-strings and get-ints."""

    def test_get_strings(self, yaml_file: Path):
        result = runner.invoke(
            app, ["get-strings", "y", "a.missing", "x.b.c.d", "--file", str(yaml_file)]
        )
        assert result.exit_code == 0
        assert result.output.splitlines() == ["jack", "", "hello"]

    def test_get_ints(self, yaml_file: Path):
        result = runner.invoke(app, ["get-ints", "a.port", "a.host", "--file", str(yaml_file)])
        assert result.exit_code == 0
        assert result.output.splitlines() == ["5000", "0"]

    def test_load_failure_is_fatal(self):
        result = runner.invoke(app, ["get-ints", "a.port", "--file", "/nonexistent/config.yml"])
        assert result.exit_code == 1
        assert "Error:" in result.output

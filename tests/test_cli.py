"""Tests for the CLI interface."""

import json
from pathlib import Path
from unittest.mock import Mock, patch

from typer.testing import CliRunner

from medq_text.cli import app


runner = CliRunner()


class TestCLI:
    """Tests for CLI commands."""

    def test_version_flag(self):
        """Test --version flag."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert "medq-text" in result.stdout

    def test_help_flag(self):
        """Test --help flag."""
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        assert "Render" in result.stdout

    def test_missing_file_error(self, tmp_path: Path):
        """Test error when file doesn't exist."""
        result = runner.invoke(app, [str(tmp_path / "nonexistent.txt")])

        assert result.exit_code != 0

    def test_console_output(self, tmp_text_file: Path):
        """Test default rendering to the terminal."""
        result = runner.invoke(app, [str(tmp_text_file)])

        assert result.exit_code == 0
        assert "Cardiac Cycle" in result.stdout
        assert "four" in result.stdout
        assert "**four**" not in result.stdout

    def test_json_output(self, tmp_text_file: Path):
        """Test --format json prints a document."""
        result = runner.invoke(app, [str(tmp_text_file), "--format", "json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["blocks"][0]["_type"] == "Heading"

    def test_stdin_input(self):
        """Test reading from stdin when no path is given."""
        result = runner.invoke(app, ["--format", "text"], input="## Hi\n- *a*\n")

        assert result.exit_code == 0
        assert result.stdout.splitlines()[:2] == ["Hi", "• a"]

    def test_output_file(self, tmp_text_file: Path, tmp_path: Path):
        """Test writing to a file picked by extension."""
        output = tmp_path / "answer.md"
        result = runner.invoke(app, [str(tmp_text_file), "-o", str(output)])

        assert result.exit_code == 0
        assert "Success" in result.stdout
        assert output.read_text(encoding="utf-8").startswith("## Cardiac Cycle")

    def test_stdin_to_output_file(self, tmp_path: Path):
        """Test writing stdin input to a file."""
        output = tmp_path / "answer.txt"
        result = runner.invoke(app, ["-o", str(output)], input="1) one")

        assert result.exit_code == 0
        assert output.read_text(encoding="utf-8") == "1. one"

    def test_unsupported_format(self, tmp_text_file: Path):
        """Test error for an unknown format."""
        result = runner.invoke(app, [str(tmp_text_file), "--format", "pdf"])

        assert result.exit_code == 1
        assert "Error" in result.stdout

    def test_unsupported_output_suffix(self, tmp_text_file: Path, tmp_path: Path):
        """Test error for an unknown output extension."""
        result = runner.invoke(
            app, [str(tmp_text_file), "-o", str(tmp_path / "out.xyz")]
        )

        assert result.exit_code == 1

    def test_verbose_flag(self, tmp_text_file: Path, tmp_path: Path):
        """Test --verbose reports the block count."""
        output = tmp_path / "out.json"
        result = runner.invoke(app, [str(tmp_text_file), "-o", str(output), "-v"])

        assert result.exit_code == 0
        assert "Blocks" in result.stdout

    @patch("medq_text.cli.DocumentTransformer")
    def test_file_to_file_uses_transformer(
        self, mock_transformer_class: Mock, tmp_text_file: Path, tmp_path: Path
    ):
        """Test that file-to-file rendering goes through transform_file."""
        mock_transformer = Mock()
        mock_transformer_class.return_value = mock_transformer
        output = tmp_path / "out.md"

        runner.invoke(app, [str(tmp_text_file), "-o", str(output), "-f", "json"])

        mock_transformer.transform_file.assert_called_once_with(
            tmp_text_file, output, "json"
        )

    def test_byte_order_mark_input(self, tmp_path: Path):
        """Test that a file saved with a byte-order mark renders its heading."""
        source = tmp_path / "bom.txt"
        source.write_text("# Renal Physiology\n- GFR", encoding="utf-8-sig")

        result = runner.invoke(app, [str(source), "--format", "json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["blocks"][0] == {
            "_type": "Heading",
            "level": 1,
            "text": "Renal Physiology",
            "spans": [{"_type": "PlainText", "text": "Renal Physiology"}],
        }

    def test_invalid_log_level(self, tmp_text_file: Path, monkeypatch):
        """Test that a bad MEDQ_TEXT_LOG_LEVEL is reported, not raised."""
        monkeypatch.setenv("MEDQ_TEXT_LOG_LEVEL", "loud")

        result = runner.invoke(app, [str(tmp_text_file), "--format", "text"])

        assert result.exit_code == 1
        assert "Invalid configuration" in result.stdout
        assert "MEDQ_TEXT_LOG_LEVEL" in result.stdout

"""Tests for the CLI module."""

import json
from pathlib import Path
from unittest.mock import MagicMock, patch

from click.testing import CliRunner

from geojson_codec.cli import main

MLS_TEXT = (
    '{ "type": "MultiLineString", '
    '"coordinates": [ [[0.0, 0.0], [0.0, 1.0]], [[1.0, 0.0], [1.0, 1.0]] ] }'
)


def write(tmp_path: Path, name: str, text: str) -> str:
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return str(path)


class TestCLI:
    """Test CLI commands."""

    def test_help(self) -> None:
        """Test main help."""
        runner = CliRunner()
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "geojson-codec" in result.output
        assert "validate" in result.output
        assert "format" in result.output
        assert "Examples" in result.output

    def test_version(self) -> None:
        """Test version command."""
        runner = CliRunner()
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert "geojson-codec" in result.output

    def test_types_command(self) -> None:
        """Test types command."""
        runner = CliRunner()
        result = runner.invoke(main, ["types"])
        assert result.exit_code == 0
        assert "MultiLineString" in result.output
        assert "FeatureCollection" in result.output
        assert "geometries" in result.output

    def test_validate_valid_file(self, tmp_path: Path) -> None:
        """Test validating a valid document."""
        runner = CliRunner()
        result = runner.invoke(main, ["validate", write(tmp_path, "mls.geojson", MLS_TEXT)])
        assert result.exit_code == 0
        assert "Type: MultiLineString" in result.output
        assert "2 line strings" in result.output
        assert "Valid GeoJSON" in result.output

    def test_validate_invalid_file(self, tmp_path: Path) -> None:
        """Test validating an invalid document exits with status 1."""
        runner = CliRunner()
        path = write(tmp_path, "bad.geojson", '{ "type": "MultiLineString"}')
        result = runner.invoke(main, ["validate", path])
        assert result.exit_code == 1
        assert "Invalid GeoJSON" in result.output
        assert "INVALID_GEOJSON_OBJECT" in result.output

    def test_validate_missing_source(self) -> None:
        """Test validate without a source."""
        runner = CliRunner()
        result = runner.invoke(main, ["validate"])
        assert result.exit_code != 0
        assert "Either SOURCE or --url must be provided" in result.output

    def test_validate_both_sources(self, tmp_path: Path) -> None:
        runner = CliRunner()
        path = write(tmp_path, "mls.geojson", MLS_TEXT)
        result = runner.invoke(main, ["validate", path, "--url", "http://test"])
        assert result.exit_code != 0
        assert "Cannot specify both" in result.output

    @patch("geojson_codec.sources.requests.get")
    def test_validate_url(self, mock_get: MagicMock) -> None:
        """Test validating a fetched document."""
        mock_get.return_value = MagicMock(content=MLS_TEXT.encode("utf-8"))
        runner = CliRunner()
        result = runner.invoke(
            main, ["validate", "--url", "https://example.com/mls.geojson", "--timeout", "3"]
        )
        assert result.exit_code == 0
        assert "Valid GeoJSON" in result.output
        mock_get.assert_called_once_with("https://example.com/mls.geojson", timeout=3.0)

    def test_format_to_stdout(self, tmp_path: Path) -> None:
        """Test format writes the minimal form."""
        runner = CliRunner()
        result = runner.invoke(main, ["format", write(tmp_path, "mls.geojson", MLS_TEXT)])
        assert result.exit_code == 0
        assert '"coordinates":[[[0,0],[0,1]],[[1,0],[1,1]]]' in result.output
        assert '"type":"MultiLineString"' in result.output

    def test_format_to_file(self, tmp_path: Path) -> None:
        """Test format writes pretty output to a file."""
        runner = CliRunner()
        source = write(tmp_path, "mls.geojson", MLS_TEXT)
        output = tmp_path / "out.geojson"
        result = runner.invoke(main, ["format", source, str(output), "--pretty"])
        assert result.exit_code == 0
        text = output.read_text(encoding="utf-8")
        assert text.startswith("{\n  ")
        assert json.loads(text)["coordinates"] == [[[0, 0], [0, 1]], [[1, 0], [1, 1]]]

    def test_format_invalid(self, tmp_path: Path) -> None:
        runner = CliRunner()
        path = write(tmp_path, "bad.geojson", "{")
        result = runner.invoke(main, ["format", path])
        assert result.exit_code != 0
        assert "Invalid GeoJSON" in result.output

    def test_format_help(self) -> None:
        """Test format command help."""
        runner = CliRunner()
        result = runner.invoke(main, ["format", "--help"])
        assert result.exit_code == 0
        assert "INPUT_FILE" in result.output
        assert "OUTPUT_FILE" in result.output
        assert "--pretty" in result.output

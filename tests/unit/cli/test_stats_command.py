"""Tests for the 'legalchunk stats' command."""

import hashlib
import json
from pathlib import Path

from click.testing import CliRunner

from legalchunk.cli.commands.stats import format_stats
from legalchunk.cli.main import main
from legalchunk.models.stats import ChunkingStats


class TestStatsCommand:
    """Tests for the stats command."""

    def test_json_report(
        self,
        cli_runner: CliRunner,
        isolated_env: dict[str, str],
        fixture_dir: Path,
    ) -> None:
        """Test --json prints the summary with the content hash."""
        path = fixture_dir / "motor_vehicle_stops.md"
        result = cli_runner.invoke(
            main, ["stats", str(path), "--document-id", "mvs", "--json", "-q"]
        )
        assert result.exit_code == 0, result.output
        payload = json.loads(result.output)
        assert payload["document_id"] == "mvs"
        assert payload["total_chunks"] == 5
        assert payload["h1_sections"] == 2
        assert payload["h2_sections"] == 3
        assert payload["oversized_chunks"] == 0
        assert payload["content_hash"] == hashlib.sha256(path.read_bytes()).hexdigest()

    def test_text_report(
        self,
        cli_runner: CliRunner,
        isolated_env: dict[str, str],
        fixture_dir: Path,
    ) -> None:
        """Test the default report lists the statistics."""
        result = cli_runner.invoke(
            main, ["stats", str(fixture_dir / "oui_guide.md"), "--document-id", "oui"]
        )
        assert result.exit_code == 0, result.output
        assert "Document" in result.output
        assert "oui" in result.output
        assert "Oversized chunks" in result.output

    def test_oversized_reported_when_window_split_disabled(
        self, cli_runner: CliRunner, isolated_env: dict[str, str], temp_dir: Path
    ) -> None:
        """Test unbreakable text counted as oversized when kept whole."""
        path = temp_dir / "long.txt"
        path.write_text("A" * 2000, encoding="utf-8")
        config = temp_dir / "chunker.yaml"
        config.write_text("max_chars: 1000\nsplit_oversized_units: false\n")
        result = cli_runner.invoke(
            main, ["stats", str(path), "--config", str(config), "--json", "-q"]
        )
        assert result.exit_code == 0, result.output
        payload = json.loads(result.output)
        assert payload["total_chunks"] == 1
        assert payload["oversized_chunks"] == 1

    def test_empty_document_keeps_document_id(
        self, cli_runner: CliRunner, isolated_env: dict[str, str], temp_dir: Path
    ) -> None:
        """Test a document without chunks still reports its id."""
        path = temp_dir / "outline.md"
        path.write_text("# Part I\n", encoding="utf-8")
        result = cli_runner.invoke(
            main, ["stats", str(path), "--document-id", "outline", "--json", "-q"]
        )
        assert result.exit_code == 0, result.output
        payload = json.loads(result.output)
        assert payload["document_id"] == "outline"
        assert payload["total_chunks"] == 0

    def test_missing_document(
        self, cli_runner: CliRunner, isolated_env: dict[str, str], temp_dir: Path
    ) -> None:
        """Test a missing document exits with the document error code."""
        result = cli_runner.invoke(main, ["stats", str(temp_dir / "missing.md")])
        assert result.exit_code == 3

    def test_missing_config_file(
        self,
        cli_runner: CliRunner,
        isolated_env: dict[str, str],
        fixture_dir: Path,
        temp_dir: Path,
    ) -> None:
        """Test a missing config file is a usage error."""
        result = cli_runner.invoke(
            main,
            [
                "stats",
                str(fixture_dir / "oui_guide.md"),
                "--config",
                str(temp_dir / "missing.yaml"),
            ],
        )
        assert result.exit_code == 2


class TestFormatStats:
    """Tests for format_stats()."""

    def test_rows_aligned(self) -> None:
        """Test values start in the same column."""
        stats = ChunkingStats(
            document_id="doc", total_chunks=2, min_chars=5, max_chars=9, avg_chars=7.0
        )
        lines = format_stats(stats, "abc123").split("\n")
        width = len("Chunk size (min/avg/max)")
        assert len(lines) == 9
        assert lines[0].endswith("  doc")
        assert lines[4].endswith("5/7.0/9")
        assert all(line[width : width + 2] == "  " for line in lines)
        assert all(line[width + 2] != " " for line in lines)

    def test_missing_document_id(self) -> None:
        """Test an empty summary shows a dash for the document."""
        assert format_stats(ChunkingStats(), "abc").startswith("Document")
        assert format_stats(ChunkingStats(), "abc").split("\n")[0].endswith("-")

"""Tests for the command-line interface."""

import json
from pathlib import Path

from click.testing import CliRunner

from site_ranker.cli import main


class TestCli:
    """Tests for the site-ranker command."""

    def test_json_output_for_file(self, html_site: Path):
        runner = CliRunner()
        result = runner.invoke(main, [str(html_site / "index.html"), "--json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["profile"]["business_category"] == "Service"
        assert data["profile"]["existing_seo"]["has_title"] is True
        assert 0 <= data["report"]["optimization_score"] <= 100
        assert "files" not in data

    def test_summary_output(self, html_site: Path):
        runner = CliRunner()
        result = runner.invoke(main, [str(html_site / "index.html")])

        assert result.exit_code == 0, result.output
        assert "Optimization score:" in result.output
        assert "Top Keywords" in result.output
        assert "Recommendations" in result.output

    def test_directory_summary_names_main_file(self, html_site: Path):
        runner = CliRunner()
        result = runner.invoke(main, [str(html_site)])

        assert result.exit_code == 0, result.output
        assert "Analyzed 2 file(s)" in result.output
        assert "Main file:" in result.output

    def test_directory_with_output_file(self, html_site: Path, tmp_path: Path):
        """Test that every page of a directory is analyzed and merged."""
        (html_site / "empty.html").write_text("", encoding="utf-8")
        output = tmp_path / "report.json"

        runner = CliRunner()
        result = runner.invoke(main, [str(html_site), "-o", str(output), "--workers", "2"])

        assert result.exit_code == 0, result.output
        data = json.loads(output.read_text())
        assert len(data["files"]) == 2
        assert data["main_file"] == str(html_site / "index.html")
        assert list(data["failures"]) == [str(html_site / "empty.html")]
        assert data["profile"]["existing_seo"]["h1_count"] == 2

    def test_missing_file(self, tmp_path: Path):
        runner = CliRunner()
        result = runner.invoke(main, [str(tmp_path / "missing.html")])

        assert result.exit_code == 1
        assert "Content loading error" in result.output

    def test_empty_directory(self, tmp_path: Path):
        empty = tmp_path / "empty"
        empty.mkdir()

        runner = CliRunner()
        result = runner.invoke(main, [str(empty)])

        assert result.exit_code == 1
        assert "No HTML files found" in result.output

    def test_unparseable_file(self, tmp_path: Path):
        page = tmp_path / "blank.html"
        page.write_text("   ", encoding="utf-8")

        runner = CliRunner()
        result = runner.invoke(main, [str(page)])

        assert result.exit_code == 1
        assert "Analysis error" in result.output

"""Tests for CLI commands."""

from __future__ import annotations

import logging
from pathlib import Path
from unittest.mock import patch

from typer.testing import CliRunner

from filescout.cli import _setup_logging, app


runner = CliRunner()


class TestSetupLogging:
    """Tests for _setup_logging helper."""

    def test_setup_logging_verbose(self) -> None:
        """Verbose mode sets DEBUG level."""
        with patch("filescout.cli.logging.basicConfig") as mock_config:
            _setup_logging(verbose=True)
            mock_config.assert_called_once()
            assert mock_config.call_args[1]["level"] == logging.DEBUG

    def test_setup_logging_normal(self) -> None:
        """Normal mode sets INFO level."""
        with patch("filescout.cli.logging.basicConfig") as mock_config:
            _setup_logging(verbose=False)
            mock_config.assert_called_once()
            assert mock_config.call_args[1]["level"] == logging.INFO


class TestLoadCommand:
    """Tests for the load command."""

    def test_lists_files(self, corpus_dir: Path) -> None:
        result = runner.invoke(app, ["load", str(corpus_dir)])

        assert result.exit_code == 0
        assert "alpha.txt" in result.stdout
        assert "3 files" in result.stdout

    def test_empty_directory(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["load", str(tmp_path)])

        assert result.exit_code == 0
        assert "No files found" in result.stdout

    def test_missing_directory(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["load", str(tmp_path / "missing")])

        assert result.exit_code == 1
        assert "not_found" in result.stdout


class TestMutationCommands:
    """Tests for create, delete and append."""

    def test_create(self, corpus_dir: Path) -> None:
        result = runner.invoke(app, ["create", str(corpus_dir), "new.txt", "brand new"])

        assert result.exit_code == 0
        assert "created successfully" in result.stdout
        assert (corpus_dir / "new.txt").read_text(encoding="utf-8") == "brand new"

    def test_create_existing(self, corpus_dir: Path) -> None:
        result = runner.invoke(app, ["create", str(corpus_dir), "alpha.txt", "clash"])

        assert result.exit_code == 1
        assert "already_exists" in result.stdout

    def test_delete(self, corpus_dir: Path) -> None:
        result = runner.invoke(app, ["delete", str(corpus_dir), "alpha.txt"])

        assert result.exit_code == 0
        assert not (corpus_dir / "alpha.txt").exists()

    def test_delete_missing(self, corpus_dir: Path) -> None:
        result = runner.invoke(app, ["delete", str(corpus_dir), "nope.txt"])

        assert result.exit_code == 1
        assert "not_found" in result.stdout

    def test_append(self, corpus_dir: Path) -> None:
        result = runner.invoke(app, ["append", str(corpus_dir), "beta.txt", " more words"])

        assert result.exit_code == 0
        assert (corpus_dir / "beta.txt").read_text(encoding="utf-8").endswith(" more words")


class TestDuplicatesCommand:
    """Tests for the duplicates command."""

    def test_report_only(self, corpus_dir: Path) -> None:
        result = runner.invoke(app, ["duplicates", str(corpus_dir)])

        assert result.exit_code == 0
        assert "gamma.txt" in result.stdout
        assert (corpus_dir / "gamma.txt").exists()

    def test_delete(self, corpus_dir: Path) -> None:
        result = runner.invoke(app, ["duplicates", str(corpus_dir), "--delete"])

        assert result.exit_code == 0
        assert "Deleted 1 duplicate files" in result.stdout
        assert not (corpus_dir / "gamma.txt").exists()
        assert (corpus_dir / "beta.txt").exists()

    def test_none_found(self, tmp_path: Path) -> None:
        (tmp_path / "only.txt").write_text("single")
        result = runner.invoke(app, ["duplicates", str(tmp_path)])

        assert result.exit_code == 0
        assert "No duplicates found" in result.stdout


class TestSearchCommand:
    """Tests for the search command."""

    def test_matches(self, corpus_dir: Path) -> None:
        result = runner.invoke(app, ["search", str(corpus_dir), "fox"])

        assert result.exit_code == 0
        assert "alpha.txt" in result.stdout

    def test_no_matches(self, corpus_dir: Path) -> None:
        result = runner.invoke(app, ["search", str(corpus_dir), "zebra"])

        assert result.exit_code == 0
        assert "No files found" in result.stdout


class TestAnalyzeCommand:
    """Tests for the analyze command."""

    def test_analyze(self, corpus_dir: Path) -> None:
        result = runner.invoke(app, ["analyze", str(corpus_dir), "beta.txt", "--workers", "3"])

        assert result.exit_code == 0
        assert "hello" in result.stdout

    def test_invalid_workers(self, corpus_dir: Path) -> None:
        result = runner.invoke(app, ["analyze", str(corpus_dir), "beta.txt", "--workers", "11"])

        assert result.exit_code == 1
        assert "validation" in result.stdout

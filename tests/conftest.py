"""Shared fixtures for FileScout tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from filescout.engine import FileScoutEngine


@pytest.fixture
def corpus_dir(tmp_path: Path) -> Path:
    """Directory with a small corpus, including one duplicate pair."""
    corpus = tmp_path / "corpus"
    corpus.mkdir()
    (corpus / "alpha.txt").write_text("The quick brown fox jumps over the lazy dog.", encoding="utf-8")
    (corpus / "beta.txt").write_text("Hello, world! Hello again.", encoding="utf-8")
    (corpus / "gamma.txt").write_text("Hello, world! Hello again.", encoding="utf-8")
    (corpus / "notes").mkdir()
    return corpus


@pytest.fixture
def engine(corpus_dir: Path) -> FileScoutEngine:
    """Engine with ``corpus_dir`` already loaded."""
    engine = FileScoutEngine()
    engine.load_directory(corpus_dir)
    return engine

"""Keyword search over the files of the corpus."""

from __future__ import annotations

from typing import List

from filescout.index.corpus import CorpusIndex
from filescout.storage.local import FileStore


class KeywordSearcher:
    """Case-insensitive substring scan that re-reads each file's content."""

    def __init__(self, index: CorpusIndex, store: FileStore, *, encoding: str = "utf-8") -> None:
        self.index = index
        self.store = store
        self.encoding = encoding

    def search(self, keyword: str) -> List[str]:
        if not keyword or not keyword.strip():
            return []

        needle = keyword.lower()
        matches: List[str] = []
        # Hold off writers so every file read matches the records being scanned.
        with self.index.writer():
            directory = self.index.require_directory()
            for record in self.index.snapshot():
                data = self.store.read_bytes(directory / record.name)
                if needle in data.decode(self.encoding, errors="replace").lower():
                    matches.append(record.name)
        return matches

"""Session facade tying the index, detector, searcher and analyzer together."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List

from filescout.analysis.frequency import WordFrequencyAnalyzer, validate_worker_count
from filescout.config import AppConfig
from filescout.index.corpus import CorpusIndex, load_directory
from filescout.index.duplicates import delete_duplicates, find_duplicates
from filescout.index.mutations import MutationGateway
from filescout.index.search import KeywordSearcher
from filescout.models import DuplicateGroup, FileRecord, LoadResult, WordCount
from filescout.storage.local import FileStore, LocalFileStore
from filescout.utils.files import validate_name

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class CorpusStats:
    file_count: int = 0
    word_count: int = 0
    char_count: int = 0


class FileScoutEngine:
    """All corpus operations for one client session.

    The engine owns its index exclusively; mutations run one at a time.
    """

    def __init__(self, config: AppConfig | None = None, store: FileStore | None = None) -> None:
        self.config = config or AppConfig()
        self.store: FileStore = store or LocalFileStore()
        self.index = CorpusIndex()
        self.gateway = MutationGateway(self.index, self.store, encoding=self.config.encoding)
        self.searcher = KeywordSearcher(self.index, self.store, encoding=self.config.encoding)
        self.analyzer = WordFrequencyAnalyzer(
            max_workers=self.config.max_workers, top_k=self.config.top_k
        )

    @property
    def directory(self) -> Path | None:
        return self.index.directory

    def load_directory(self, directory: Path) -> LoadResult:
        return load_directory(self.index, self.store, Path(directory), encoding=self.config.encoding)

    def list_files(self) -> List[FileRecord]:
        return self.index.snapshot()

    def stats(self) -> CorpusStats:
        records = self.index.snapshot()
        return CorpusStats(
            file_count=len(records),
            word_count=sum(record.word_count for record in records),
            char_count=sum(record.char_count for record in records),
        )

    def create_file(self, name: str, content: str) -> FileRecord:
        return self.gateway.create(name, content)

    def delete_file(self, name: str) -> None:
        self.gateway.delete(name)

    def append_file(self, name: str, content: str) -> FileRecord:
        return self.gateway.append(name, content)

    def find_duplicates(self) -> List[DuplicateGroup]:
        self.index.require_directory()
        return find_duplicates(self.index.snapshot())

    def delete_duplicates(self) -> List[str]:
        self.index.require_directory()
        return delete_duplicates(self.index, self.gateway)

    def search(self, keyword: str) -> List[str]:
        return self.searcher.search(keyword)

    def analyze_file(self, name: str, worker_count: int) -> List[WordCount]:
        """Top words of one indexed file, counted with ``worker_count`` workers."""
        validate_worker_count(worker_count, max_workers=self.config.max_workers)
        validate_name(name)
        with self.index.writer():
            path = self.index.path_for(name)
            self.index.get(name)
            data = self.store.read_bytes(path)
        text = data.decode(self.config.encoding, errors="replace")
        return self.analyzer.analyze(text, worker_count)

"""In-memory catalog of the files in one loaded directory."""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Dict, Iterable, Iterator, List

from filescout.errors import FileScoutError, NotFound, PartialLoadFailure, ValidationError
from filescout.models import FileRecord, LoadResult
from filescout.storage.local import FileStore
from filescout.utils.files import compute_fingerprint
from filescout.utils.text import count_words

LOGGER = logging.getLogger(__name__)


def build_record(name: str, data: bytes, *, encoding: str = "utf-8") -> FileRecord:
    """Compute metrics and fingerprint for one file's bytes."""
    text = data.decode(encoding, errors="replace")
    return FileRecord(
        name=name,
        word_count=count_words(text),
        char_count=len(text),
        fingerprint=compute_fingerprint(data),
    )


class CorpusIndex:
    """Records of the currently loaded directory, keyed by name.

    Writers serialize on :meth:`writer`. Every update swaps in a new
    mapping, so readers holding a snapshot never see a torn state.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._directory: Path | None = None
        self._records: Dict[str, FileRecord] = {}

    @contextmanager
    def writer(self) -> Iterator[None]:
        with self._lock:
            yield

    @property
    def directory(self) -> Path | None:
        return self._directory

    def require_directory(self) -> Path:
        directory = self._directory
        if directory is None:
            raise ValidationError("No directory loaded")
        return directory

    def path_for(self, name: str) -> Path:
        return self.require_directory() / name

    def snapshot(self) -> List[FileRecord]:
        """Records in insertion order."""
        return list(self._records.values())

    def get(self, name: str) -> FileRecord:
        try:
            return self._records[name]
        except KeyError:
            raise NotFound(f"File not found: {name}") from None

    def __contains__(self, name: object) -> bool:
        return name in self._records

    def __len__(self) -> int:
        return len(self._records)

    def replace(self, directory: Path, records: Iterable[FileRecord]) -> None:
        with self._lock:
            self._records = {record.name: record for record in records}
            self._directory = directory

    def put(self, record: FileRecord) -> None:
        with self._lock:
            records = dict(self._records)
            records[record.name] = record
            self._records = records

    def remove(self, name: str) -> FileRecord:
        with self._lock:
            records = dict(self._records)
            try:
                record = records.pop(name)
            except KeyError:
                raise NotFound(f"File not found: {name}") from None
            self._records = records
            return record


def load_directory(
    index: CorpusIndex,
    store: FileStore,
    directory: Path,
    *,
    encoding: str = "utf-8",
) -> LoadResult:
    """Index every file directly inside ``directory``.

    Unreadable files are skipped and reported in ``LoadResult.errors``;
    a missing or unlistable directory raises and leaves the index as it was.
    Only one file's content is held in memory at a time.
    """
    directory = Path(directory)
    with index.writer():
        names = store.list_directory(directory)
        result = LoadResult()
        for name in names:
            try:
                data = store.read_bytes(directory / name)
            except FileScoutError as exc:
                LOGGER.warning("Skipping %s: %s", name, exc)
                result.errors.append(PartialLoadFailure(name, exc))
                continue
            result.records.append(build_record(name, data, encoding=encoding))

        index.replace(directory, result.records)

    LOGGER.info(
        "Loaded %d files from %s (%d skipped)", len(result.records), directory, len(result.errors)
    )
    return result

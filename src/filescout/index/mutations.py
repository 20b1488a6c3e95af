"""Create, delete and append operations that keep the index consistent."""

from __future__ import annotations

import logging

from filescout.errors import AlreadyExists, NotFound
from filescout.index.corpus import CorpusIndex, build_record
from filescout.models import FileRecord
from filescout.storage.local import FileStore
from filescout.utils.files import validate_name

LOGGER = logging.getLogger(__name__)


class MutationGateway:
    """Writes through to storage, then updates the index.

    The index is only touched after the storage call succeeds, so a
    storage failure leaves it exactly as it was.
    """

    def __init__(self, index: CorpusIndex, store: FileStore, *, encoding: str = "utf-8") -> None:
        self.index = index
        self.store = store
        self.encoding = encoding

    def create(self, name: str, content: str) -> FileRecord:
        validate_name(name)
        with self.index.writer():
            path = self.index.path_for(name)
            if name in self.index:
                raise AlreadyExists(f"File already exists: {name}")
            data = content.encode(self.encoding)
            record = build_record(name, data, encoding=self.encoding)
            self.store.create_bytes(path, data)
            self.index.put(record)
        LOGGER.info("Created %s (%d words)", name, record.word_count)
        return record

    def delete(self, name: str) -> None:
        validate_name(name)
        with self.index.writer():
            path = self.index.path_for(name)
            if name not in self.index:
                raise NotFound(f"File not found: {name}")
            self.store.delete(path)
            self.index.remove(name)
        LOGGER.info("Deleted %s", name)

    def append(self, name: str, content: str) -> FileRecord:
        """Append content and refresh only this file's record."""
        validate_name(name)
        with self.index.writer():
            path = self.index.path_for(name)
            if name not in self.index:
                raise NotFound(f"File not found: {name}")
            extra = content.encode(self.encoding)
            # Metrics come from the bytes the file will hold after the append.
            current = self.store.read_bytes(path)
            record = build_record(name, current + extra, encoding=self.encoding)
            self.store.append_bytes(path, extra)
            self.index.put(record)
        LOGGER.info("Appended %d bytes to %s", len(extra), name)
        return record

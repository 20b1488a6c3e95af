"""Core FileScout data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, NamedTuple, Tuple

from filescout.errors import PartialLoadFailure
from filescout.utils.files import fingerprint_hex


@dataclass(slots=True, frozen=True)
class FileRecord:
    """Size metrics and content digest of one file in the corpus."""

    name: str
    word_count: int
    char_count: int
    fingerprint: bytes

    def to_dict(self) -> Dict[str, Any]:
        return {
            "fileName": self.name,
            "wordCount": self.word_count,
            "charCount": self.char_count,
            "fingerprint": fingerprint_hex(self.fingerprint),
        }


@dataclass(slots=True)
class LoadResult:
    """Records loaded from a directory plus the files that were skipped."""

    records: List[FileRecord] = field(default_factory=list)
    errors: List[PartialLoadFailure] = field(default_factory=list)

    @property
    def partial(self) -> bool:
        return bool(self.errors)


@dataclass(slots=True, frozen=True)
class DuplicateGroup:
    """Names sharing one fingerprint, sorted so the survivor comes first."""

    fingerprint: bytes
    names: Tuple[str, ...]

    @property
    def survivor(self) -> str:
        return self.names[0]

    @property
    def redundant(self) -> Tuple[str, ...]:
        return self.names[1:]


class WordCount(NamedTuple):
    word: str
    count: int


@dataclass(slots=True, frozen=True)
class AnalysisTask:
    """Contiguous token slice handed to a single analysis worker."""

    index: int
    tokens: Tuple[str, ...]

"""Error kinds raised by the FileScout engine."""

from __future__ import annotations

from typing import Any, Dict


class FileScoutError(Exception):
    """Base class for every engine error.

    Each subclass carries a stable ``kind`` so request layers can map
    errors without matching on messages.
    """

    kind = "error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, "message": self.message}


class ValidationError(FileScoutError):
    kind = "validation"


class NotFound(FileScoutError):
    kind = "not_found"


class AlreadyExists(FileScoutError):
    kind = "already_exists"


class IOFailure(FileScoutError):
    """Storage failure; the original exception is kept on ``cause``."""

    kind = "io_failure"

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class PartialLoadFailure(FileScoutError):
    """A single file skipped during a directory load."""

    kind = "partial_load"

    def __init__(self, name: str, cause: FileScoutError) -> None:
        super().__init__(f"Skipped {name}: {cause.message}")
        self.name = name
        self.cause = cause

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["name"] = self.name
        data["cause"] = self.cause.kind
        return data


class AnalysisFailure(FileScoutError):
    kind = "analysis_failure"

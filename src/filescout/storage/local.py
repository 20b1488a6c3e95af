"""Local filesystem collaborator used by the engine."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, Protocol

from filescout.errors import AlreadyExists, FileScoutError, IOFailure, NotFound, ValidationError

LOGGER = logging.getLogger(__name__)


class FileStore(Protocol):
    """Minimal file access the engine relies on."""

    def list_directory(self, directory: Path) -> List[str]: ...

    def read_bytes(self, path: Path) -> bytes: ...

    def create_bytes(self, path: Path, data: bytes) -> None: ...

    def append_bytes(self, path: Path, data: bytes) -> None: ...

    def delete(self, path: Path) -> None: ...


def translate_os_error(exc: OSError, path: Path, action: str) -> FileScoutError:
    """Map an OSError onto an engine error, keeping the cause readable."""
    if isinstance(exc, FileNotFoundError):
        return NotFound(f"Not found: {path}")
    if isinstance(exc, FileExistsError):
        return AlreadyExists(f"File already exists: {path}")
    if isinstance(exc, PermissionError):
        return IOFailure(f"Permission denied while trying to {action} {path}", cause=exc)
    reason = exc.strerror or str(exc)
    return IOFailure(f"Failed to {action} {path}: {reason}", cause=exc)


class LocalFileStore:
    """FileStore backed by the local disk."""

    def list_directory(self, directory: Path) -> List[str]:
        """Names of regular files directly inside ``directory``, in scan order."""
        directory = Path(directory)
        try:
            with os.scandir(directory) as entries:
                return [entry.name for entry in entries if entry.is_file()]
        except FileNotFoundError as exc:
            raise NotFound(f"Directory not found: {directory}") from exc
        except NotADirectoryError as exc:
            raise ValidationError(f"Path must be a directory: {directory}") from exc
        except OSError as exc:
            raise translate_os_error(exc, directory, "list") from exc

    def read_bytes(self, path: Path) -> bytes:
        try:
            return Path(path).read_bytes()
        except OSError as exc:
            raise translate_os_error(exc, path, "read") from exc

    def create_bytes(self, path: Path, data: bytes) -> None:
        """Write a new file; an existing file on disk is never overwritten."""
        try:
            with Path(path).open("xb") as handle:
                handle.write(data)
        except OSError as exc:
            raise translate_os_error(exc, path, "create") from exc

    def append_bytes(self, path: Path, data: bytes) -> None:
        try:
            # Never creates the file; a missing target surfaces as NotFound.
            with Path(path).open("r+b") as handle:
                handle.seek(0, os.SEEK_END)
                handle.write(data)
        except OSError as exc:
            raise translate_os_error(exc, path, "append to") from exc

    def delete(self, path: Path) -> None:
        try:
            Path(path).unlink()
        except OSError as exc:
            raise translate_os_error(exc, path, "delete") from exc
        LOGGER.debug("Deleted %s", path)

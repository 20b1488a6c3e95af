"""Application configuration defaults."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from filescout.errors import ValidationError

# Upper bound on analysis workers, whatever the configuration says.
WORKER_LIMIT = 10
DEFAULT_MAX_WORKERS = WORKER_LIMIT
DEFAULT_TOP_K = 10


@dataclass(slots=True)
class AppConfig:
    directory: Path | None = None
    max_workers: int = DEFAULT_MAX_WORKERS
    top_k: int = DEFAULT_TOP_K
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        if self.max_workers < 1:
            raise ValidationError(f"max_workers must be at least 1, got {self.max_workers}")
        if self.max_workers > WORKER_LIMIT:
            raise ValidationError(
                f"max_workers must be at most {WORKER_LIMIT}, got {self.max_workers}"
            )
        if self.top_k < 1:
            raise ValidationError(f"top_k must be at least 1, got {self.top_k}")

    def resolve_directory(self, base_dir: Path | None = None) -> Path | None:
        if self.directory is None:
            return None
        if Path(self.directory).is_absolute() or base_dir is None:
            return Path(self.directory)
        return base_dir / self.directory

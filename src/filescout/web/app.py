"""FastAPI application exposing the FileScout engine over HTTP."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, List

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from filescout import __version__
from filescout.config import DEFAULT_MAX_WORKERS, AppConfig
from filescout.engine import FileScoutEngine
from filescout.errors import FileScoutError, ValidationError
from filescout.utils.files import fingerprint_hex

LOGGER = logging.getLogger(__name__)

STATUS_BY_KIND = {
    "validation": 400,
    "not_found": 404,
    "already_exists": 409,
    "io_failure": 500,
    "analysis_failure": 500,
}

app = FastAPI(title="FileScout API", version=__version__)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["*"],
)

# One process serves one session.
_engine = FileScoutEngine(AppConfig())


def get_engine() -> FileScoutEngine:
    return _engine


class LoadPayload(BaseModel):
    path: str


class CreatePayload(BaseModel):
    name: str
    content: str = ""


class AppendPayload(BaseModel):
    content: str


class AnalyzePayload(BaseModel):
    # Passed through untouched; the engine rejects anything but an int in range.
    workers: Any = Field(default=DEFAULT_MAX_WORKERS)


@app.on_event("startup")
async def startup_event() -> None:
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")


@app.exception_handler(FileScoutError)
async def filescout_error_handler(request: Request, exc: FileScoutError) -> JSONResponse:
    status = STATUS_BY_KIND.get(exc.kind, 500)
    if status >= 500:
        LOGGER.error("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=status, content={"detail": exc.to_dict()})


@app.post("/directory")
def load_directory(
    payload: LoadPayload, engine: FileScoutEngine = Depends(get_engine)
) -> dict[str, Any]:
    clean_path = payload.path.strip().replace("\r", "").replace("\n", "")
    if not clean_path:
        raise ValidationError("Please enter a directory path")
    result = engine.load_directory(Path(clean_path).expanduser())
    return {
        "directory": str(engine.directory),
        "files": [record.to_dict() for record in result.records],
        "errors": [error.to_dict() for error in result.errors],
    }


@app.get("/files")
def list_files(engine: FileScoutEngine = Depends(get_engine)) -> dict[str, Any]:
    stats = engine.stats()
    return {
        "files": [record.to_dict() for record in engine.list_files()],
        "stats": {
            "file_count": stats.file_count,
            "word_count": stats.word_count,
            "char_count": stats.char_count,
        },
    }


@app.post("/files", status_code=201)
def create_file(
    payload: CreatePayload, engine: FileScoutEngine = Depends(get_engine)
) -> dict[str, Any]:
    record = engine.create_file(payload.name, payload.content)
    return {"status": "ok", "file": record.to_dict()}


@app.delete("/files/{name}")
def delete_file(name: str, engine: FileScoutEngine = Depends(get_engine)) -> dict[str, str]:
    engine.delete_file(name)
    return {"status": "ok", "deleted": name}


@app.post("/files/{name}/append")
def append_file(
    name: str, payload: AppendPayload, engine: FileScoutEngine = Depends(get_engine)
) -> dict[str, Any]:
    record = engine.append_file(name, payload.content)
    return {"status": "ok", "file": record.to_dict()}


@app.get("/duplicates")
def list_duplicates(engine: FileScoutEngine = Depends(get_engine)) -> dict[str, Any]:
    groups = engine.find_duplicates()
    return {
        "groups": [
            {
                "fingerprint": fingerprint_hex(group.fingerprint),
                "kept": group.survivor,
                "duplicates": list(group.redundant),
            }
            for group in groups
        ]
    }


@app.delete("/duplicates")
def delete_duplicates(engine: FileScoutEngine = Depends(get_engine)) -> dict[str, List[str]]:
    return {"deleted": engine.delete_duplicates()}


@app.get("/search")
def keyword_search(
    keyword: str = "", engine: FileScoutEngine = Depends(get_engine)
) -> dict[str, List[str]]:
    return {"results": engine.search(keyword)}


@app.post("/files/{name}/word-frequency")
def word_frequency(
    name: str, payload: AnalyzePayload, engine: FileScoutEngine = Depends(get_engine)
) -> dict[str, Any]:
    words = engine.analyze_file(name, payload.workers)
    return {"words": [{"word": entry.word, "count": entry.count} for entry in words]}

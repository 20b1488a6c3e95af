"""Command line interface for FileScout."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console
from rich.table import Table

from filescout.config import AppConfig
from filescout.engine import FileScoutEngine
from filescout.errors import FileScoutError
from filescout.utils.files import fingerprint_hex


console = Console()
app = typer.Typer(help="FileScout - corpus analysis for directories of text files")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _open_engine(directory: Path, verbose: bool) -> FileScoutEngine:
    """Load ``directory`` into a fresh engine, reporting skipped files."""
    _setup_logging(verbose)
    engine = FileScoutEngine(AppConfig(directory=directory))
    result = engine.load_directory(engine.config.resolve_directory(Path.cwd()))
    for error in result.errors:
        console.print(f"[yellow]{error.message}[/yellow]")
    return engine


def _fail(exc: FileScoutError) -> NoReturn:
    console.print(f"[red]Error ({exc.kind}): {exc.message}[/red]")
    raise typer.Exit(code=1)


@app.command()
def load(
    directory: Path = typer.Argument(..., help="Directory with text files."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """List the files of a directory with word and character counts."""
    try:
        engine = _open_engine(directory, verbose)
    except FileScoutError as exc:
        _fail(exc)

    files = engine.list_files()
    if not files:
        console.print("[yellow]No files found.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("File")
    table.add_column("Words", justify="right")
    table.add_column("Characters", justify="right")
    for record in files:
        table.add_row(record.name, f"{record.word_count:,}", f"{record.char_count:,}")
    console.print(table)

    stats = engine.stats()
    console.print(
        f"{stats.file_count} files, {stats.word_count:,} words, {stats.char_count:,} characters"
    )


@app.command()
def create(
    directory: Path = typer.Argument(..., help="Directory with text files."),
    name: str = typer.Argument(..., help="Name of the new file"),
    content: str = typer.Argument("", help="File content"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Create a new file."""
    try:
        engine = _open_engine(directory, verbose)
        engine.create_file(name, content)
    except FileScoutError as exc:
        _fail(exc)
    console.print(f"File [bold]{name}[/bold] created successfully")


@app.command()
def delete(
    directory: Path = typer.Argument(..., help="Directory with text files."),
    name: str = typer.Argument(..., help="File to delete"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Delete a file."""
    try:
        engine = _open_engine(directory, verbose)
        engine.delete_file(name)
    except FileScoutError as exc:
        _fail(exc)
    console.print(f"File [bold]{name}[/bold] deleted successfully")


@app.command()
def append(
    directory: Path = typer.Argument(..., help="Directory with text files."),
    name: str = typer.Argument(..., help="File to append to"),
    content: str = typer.Argument(..., help="Content to append"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Append content to the end of an existing file."""
    try:
        engine = _open_engine(directory, verbose)
        record = engine.append_file(name, content)
    except FileScoutError as exc:
        _fail(exc)
    console.print(
        f"Content appended to [bold]{name}[/bold] "
        f"({record.word_count:,} words, {record.char_count:,} characters)"
    )


@app.command()
def duplicates(
    directory: Path = typer.Argument(..., help="Directory with text files."),
    remove: bool = typer.Option(False, "--delete", help="Delete all but one file per group"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Show duplicate files, optionally deleting them."""
    try:
        engine = _open_engine(directory, verbose)
        groups = engine.find_duplicates()
        deleted = engine.delete_duplicates() if remove else []
    except FileScoutError as exc:
        _fail(exc)

    if not groups:
        console.print("[yellow]No duplicates found.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Fingerprint")
    table.add_column("Kept")
    table.add_column("Duplicates")
    for group in groups:
        table.add_row(
            fingerprint_hex(group.fingerprint)[:12], group.survivor, ", ".join(group.redundant)
        )
    console.print(table)
    if remove:
        console.print(f"Deleted {len(deleted)} duplicate files.")


@app.command()
def search(
    directory: Path = typer.Argument(..., help="Directory with text files."),
    keyword: str = typer.Argument(..., help="Keyword to look for"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Find files containing a keyword."""
    try:
        engine = _open_engine(directory, verbose)
        matches = engine.search(keyword)
    except FileScoutError as exc:
        _fail(exc)

    if not matches:
        console.print("[yellow]No files found containing the keyword.[/yellow]")
        return
    for name in matches:
        console.print(name)


@app.command()
def analyze(
    directory: Path = typer.Argument(..., help="Directory with text files."),
    name: str = typer.Argument(..., help="File to analyze"),
    workers: int = typer.Option(4, "--workers", "-w", help="Number of worker threads (1-10)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Show the most frequent words of a file."""
    try:
        engine = _open_engine(directory, verbose)
        words = engine.analyze_file(name, workers)
    except FileScoutError as exc:
        _fail(exc)

    if not words:
        console.print("[yellow]No words found.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Rank", justify="right")
    table.add_column("Word")
    table.add_column("Count", justify="right")
    for rank, entry in enumerate(words, start=1):
        table.add_row(str(rank), entry.word, str(entry.count))
    console.print(table)


@app.command()
def web(
    host: str = typer.Option("127.0.0.1", help="Host interface"),
    port: int = typer.Option(8000, help="Server port"),
) -> None:
    """Start the HTTP API."""
    try:
        import uvicorn
    except ImportError as exc:  # pragma: no cover - optional extra
        raise typer.BadParameter(
            "uvicorn is not installed. Install the web extras with \"python -m pip install '.[web]'\""
        ) from exc

    from filescout.web.app import app as web_app

    console.print(f"Starting FileScout API on http://{host}:{port}")
    uvicorn.run(web_app, host=host, port=port, reload=False, log_level="info")

"""Main CLI application."""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from epubkit.commands.export import execute_export
from epubkit.commands.info import execute_info
from epubkit.commands.inventory import execute_manifest, execute_spine
from epubkit.commands.progress import load_document
from epubkit.commands.toc import execute_toc
from epubkit.config import ParserConfig
from epubkit.core.errors import EPUBParserError
from epubkit.models import Document

app = typer.Typer(
    name="epubkit",
    help="Inspect the metadata, manifest, spine and table of contents of EPUB files.",
    add_completion=False,
)

console = Console()
err_console = Console(stderr=True)

BookPath = Annotated[
    Path,
    typer.Argument(
        help="Path to an .epub file or an extracted EPUB directory",
        exists=True,
        file_okay=True,
        dir_okay=True,
        resolve_path=True,
    ),
]
ExtractDir = Annotated[
    Optional[Path],
    typer.Option(
        "--extract-dir",
        help="Directory to extract archives into (default: system temp)",
    ),
]
NoTocFallback = Annotated[
    bool,
    typer.Option(
        "--no-toc-fallback",
        help="Fail unless the spine names the table of contents",
    ),
]
Quiet = Annotated[
    bool,
    typer.Option("--quiet", "-q", help="Suppress progress output"),
]


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log each parsing step"),
    ] = False,
) -> None:
    """Inspect the metadata, manifest, spine and table of contents of EPUB files."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _load(
    book_path: Path,
    extract_dir: Path | None,
    no_toc_fallback: bool,
    quiet: bool,
) -> Document:
    """Parse the book, turning parser errors into a readable exit."""
    config = ParserConfig(extract_root=extract_dir, toc_fallback=not no_toc_fallback)
    try:
        return load_document(book_path, config, err_console, quiet=quiet)
    except EPUBParserError as e:
        console.print(f"[red]Error: {escape(str(e))}[/]")
        console.print(f"[dim]{escape(e.failure_reason)}[/]")
        console.print(f"[dim]Hint: {escape(e.recovery_suggestion)}[/]")
        raise typer.Exit(1)


@app.command()
def info(
    book_path: BookPath,
    extract_dir: ExtractDir = None,
    no_toc_fallback: NoTocFallback = False,
    quiet: Quiet = False,
) -> None:
    """Show book metadata, cover and structure counts."""
    document = _load(book_path, extract_dir, no_toc_fallback, quiet)
    execute_info(document, console)


@app.command()
def toc(
    book_path: BookPath,
    depth: Annotated[
        Optional[int],
        typer.Option("--depth", "-d", help="Maximum depth to display", min=1),
    ] = None,
    extract_dir: ExtractDir = None,
    no_toc_fallback: NoTocFallback = False,
    quiet: Quiet = False,
) -> None:
    """Show the table of contents as a tree."""
    document = _load(book_path, extract_dir, no_toc_fallback, quiet)
    execute_toc(document, depth, console)


@app.command()
def spine(
    book_path: BookPath,
    extract_dir: ExtractDir = None,
    no_toc_fallback: NoTocFallback = False,
    quiet: Quiet = False,
) -> None:
    """Show the reading order."""
    document = _load(book_path, extract_dir, no_toc_fallback, quiet)
    execute_spine(document, console)


@app.command()
def manifest(
    book_path: BookPath,
    extract_dir: ExtractDir = None,
    no_toc_fallback: NoTocFallback = False,
    quiet: Quiet = False,
) -> None:
    """Show every resource in the manifest."""
    document = _load(book_path, extract_dir, no_toc_fallback, quiet)
    execute_manifest(document, console)


@app.command()
def export(
    book_path: BookPath,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="JSON file to write (default: stdout)"),
    ] = None,
    extract_dir: ExtractDir = None,
    no_toc_fallback: NoTocFallback = False,
) -> None:
    """Export the parsed document as JSON."""
    document = _load(book_path, extract_dir, no_toc_fallback, quiet=True)
    execute_export(document, output, console)


if __name__ == "__main__":
    app()

"""Show parsing progress on the console."""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn

from epubkit.config import ParserConfig
from epubkit.core import EPUBParser, ParserDelegate
from epubkit.models import Document


class ProgressDelegate(ParserDelegate):
    """Update a rich progress task as each pipeline stage completes."""

    def __init__(self, progress: Progress, task_id):
        self.progress = progress
        self.task_id = task_id

    def _update(self, description: str) -> None:
        self.progress.update(self.task_id, description=description)

    def archive_extracted(self, parser, directory):
        self._update("Locating package document...")

    def content_located(self, parser, content_directory):
        self._update("Reading spine...")

    def spine_parsed(self, parser, spine):
        self._update("Reading metadata...")

    def metadata_parsed(self, parser, metadata):
        self._update("Reading manifest...")

    def manifest_parsed(self, parser, manifest):
        self._update("Reading table of contents...")

    def table_of_contents_parsed(self, parser, table_of_contents):
        self._update("Assembling document...")


def load_document(
    book_path: Path,
    config: ParserConfig,
    console: Console,
    quiet: bool = False,
) -> Document:
    """Parse ``book_path``, with a spinner unless ``quiet``."""
    if quiet:
        return EPUBParser(config=config).parse(book_path)

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        task = progress.add_task("Extracting EPUB...", total=None)
        parser = EPUBParser(delegate=ProgressDelegate(progress, task), config=config)
        return parser.parse(book_path)

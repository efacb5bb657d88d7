"""Decode EPUB publications into metadata, manifest, spine and table of contents."""

from pathlib import Path

from epubkit.config import ParserConfig
from epubkit.core import EPUBParser, EPUBParserError, ParserDelegate
from epubkit.models import Document

__version__ = "0.1.0"

__all__ = [
    "Document",
    "EPUBParser",
    "EPUBParserError",
    "ParserConfig",
    "ParserDelegate",
    "parse",
]


def parse(path: Path | str, delegate: ParserDelegate | None = None) -> Document:
    """Parse the publication at ``path`` with a default EPUBParser."""
    return EPUBParser(delegate=delegate).parse(path)

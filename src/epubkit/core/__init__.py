"""EPUB parsing pipeline."""

from epubkit.core.delegate import ParserDelegate
from epubkit.core.errors import (
    ContainerMissingError,
    ContentPathMissingError,
    EPUBParserError,
    NavigationPointInvalidError,
    PackageDocumentMissingError,
    TableOfContentsMissingError,
    UnzipFailedError,
)
from epubkit.core.parser import EPUBParser

__all__ = [
    "EPUBParser",
    "ParserDelegate",
    # Errors
    "EPUBParserError",
    "UnzipFailedError",
    "ContainerMissingError",
    "ContentPathMissingError",
    "PackageDocumentMissingError",
    "TableOfContentsMissingError",
    "NavigationPointInvalidError",
]

"""Progress notifications emitted by EPUBParser."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from epubkit.core.parser import EPUBParser
    from epubkit.models import Manifest, Metadata, Spine, TableOfContents


class ParserDelegate:
    """Observer of the parsing pipeline.

    Subclass and override the callbacks you need; the rest are no-ops.
    Callbacks run synchronously on the thread calling ``parse`` and cannot
    change the outcome of parsing.
    """

    def parsing_began(self, parser: EPUBParser, path: Path) -> None:
        pass

    def archive_extracted(self, parser: EPUBParser, directory: Path) -> None:
        pass

    def content_located(self, parser: EPUBParser, content_directory: Path) -> None:
        pass

    def metadata_parsed(self, parser: EPUBParser, metadata: Metadata) -> None:
        pass

    def manifest_parsed(self, parser: EPUBParser, manifest: Manifest) -> None:
        pass

    def spine_parsed(self, parser: EPUBParser, spine: Spine) -> None:
        pass

    def table_of_contents_parsed(
        self, parser: EPUBParser, table_of_contents: TableOfContents
    ) -> None:
        pass

    def parsing_finished(self, parser: EPUBParser, path: Path) -> None:
        pass

    def parsing_failed(self, parser: EPUBParser, path: Path, error: Exception) -> None:
        pass

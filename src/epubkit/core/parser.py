"""Parse EPUB publications into Document values."""

from __future__ import annotations

import logging
from pathlib import Path

from epubkit.config import ParserConfig
from epubkit.core.archive import ArchiveService
from epubkit.core.content import ContentService, resolve_toc_path
from epubkit.core.delegate import ParserDelegate
from epubkit.core.manifest_parser import ManifestParser
from epubkit.core.metadata_parser import MetadataParser
from epubkit.core.spine_parser import SpineParser
from epubkit.core.toc_parser import TableOfContentsParser
from epubkit.models.document import Document
from epubkit.models.manifest import Manifest, MediaType
from epubkit.models.metadata import Metadata
from epubkit.models.spine import Spine

log = logging.getLogger(__name__)


class EPUBParser:
    """Decode an .epub archive (or an already extracted directory).

    The parser keeps no state between calls, so one instance may serve
    several threads as long as its delegate is safe to call from them.
    """

    def __init__(
        self,
        delegate: ParserDelegate | None = None,
        config: ParserConfig | None = None,
        archive_service: ArchiveService | None = None,
    ):
        self.delegate = delegate
        self.config = config or ParserConfig()
        self.archive_service = archive_service or ArchiveService(
            self.config.extract_root
        )
        self.metadata_parser = MetadataParser()
        self.manifest_parser = ManifestParser()
        self.spine_parser = SpineParser()
        self.toc_parser = TableOfContentsParser()

    def parse(self, path: Path | str) -> Document:
        """Parse the publication at ``path`` and return the complete Document."""
        path = Path(path)
        self._notify("parsing_began", path)
        try:
            document = self._parse(path)
        except Exception as error:
            log.debug("Parsing %s failed: %s", path, error)
            self._notify("parsing_failed", path, error)
            raise
        self._notify("parsing_finished", path)
        return document

    def _parse(self, path: Path) -> Document:
        directory = path if path.is_dir() else self.archive_service.unarchive(path)
        self._notify("archive_extracted", directory)

        content = ContentService(directory)
        self._notify("content_located", content.content_directory)

        spine = self.spine_parser.parse(content.spine)
        self._notify("spine_parsed", spine)

        metadata = self.metadata_parser.parse(content.metadata)
        self._notify("metadata_parsed", metadata)

        manifest = self.manifest_parser.parse(content.manifest)
        self._notify("manifest_parsed", manifest)

        toc_path = resolve_toc_path(spine, manifest, fallback=self.config.toc_fallback)
        table_of_contents = self.toc_parser.parse(content.table_of_contents(toc_path))
        self._notify("table_of_contents_parsed", table_of_contents)

        warnings = collect_warnings(metadata, manifest, spine)
        for warning in warnings:
            log.warning("%s: %s", path.name, warning)

        return Document(
            directory=directory,
            content_directory=content.content_directory,
            metadata=metadata,
            manifest=manifest,
            spine=spine,
            table_of_contents=table_of_contents,
            warnings=warnings,
        )

    def _notify(self, event: str, *args) -> None:
        log.debug("%s %s", event, args[0] if args else "")
        if self.delegate is None:
            return
        try:
            getattr(self.delegate, event)(self, *args)
        except Exception:
            log.exception("Parser delegate failed while handling %s", event)


def collect_warnings(metadata: Metadata, manifest: Manifest, spine: Spine) -> list[str]:
    """Describe references that point nowhere useful. Never fatal."""
    warnings = []
    items = manifest.items

    for entry in spine.items:
        if entry.idref not in items:
            warnings.append(f"Spine item {entry.idref!r} is not in the manifest")

    if spine.toc is not None and spine.toc in items:
        if items[spine.toc].media_type is not MediaType.NCX:
            warnings.append(
                f"Spine toc {spine.toc!r} is not an NCX document "
                f"({items[spine.toc].media_type.value})"
            )

    cover_id = metadata.cover_id
    if cover_id is not None:
        if cover_id not in items:
            warnings.append(f"Cover {cover_id!r} is not in the manifest")
        elif not items[cover_id].media_type.is_image:
            warnings.append(
                f"Cover {cover_id!r} is not an image "
                f"({items[cover_id].media_type.value})"
            )

    return warnings

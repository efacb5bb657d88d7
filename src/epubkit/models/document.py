"""Data model for a fully parsed EPUB publication."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict

from epubkit.models.manifest import Manifest, ManifestItem
from epubkit.models.metadata import Metadata
from epubkit.models.spine import Spine
from epubkit.models.toc import TableOfContents


class Document(BaseModel):
    """Complete parsed EPUB structure."""

    model_config = ConfigDict(frozen=True)

    directory: Path  # root of the extracted publication
    content_directory: Path  # directory holding the package document
    metadata: Metadata
    manifest: Manifest
    spine: Spine
    table_of_contents: TableOfContents
    warnings: tuple[str, ...] = ()

    @property
    def title(self) -> str | None:
        return self.metadata.title

    @property
    def author(self) -> str | None:
        creator = self.metadata.creator
        return creator.name if creator else None

    @property
    def publisher(self) -> str | None:
        return self.metadata.publisher

    @property
    def cover(self) -> Path | None:
        """Path of the cover image named by ``<meta name="cover">``, if any."""
        cover_id = self.metadata.cover_id
        if cover_id is None or cover_id not in self.manifest.items:
            return None
        return self.content_directory / self.manifest.items[cover_id].path

    @property
    def reading_order(self) -> list[ManifestItem]:
        """Manifest items of the linear spine entries, in spine order."""
        items = self.manifest.items
        return [
            items[entry.idref]
            for entry in self.spine.items
            if entry.linear and entry.idref in items
        ]

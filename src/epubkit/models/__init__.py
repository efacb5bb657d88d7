"""Data models."""

from epubkit.models.document import Document
from epubkit.models.manifest import Manifest, ManifestItem, MediaType
from epubkit.models.metadata import Creator, Metadata
from epubkit.models.spine import PageProgressionDirection, Spine, SpineItem
from epubkit.models.toc import TableOfContents

__all__ = [
    # Document
    "Document",
    # Metadata models
    "Creator",
    "Metadata",
    # Manifest models
    "MediaType",
    "ManifestItem",
    "Manifest",
    # Spine models
    "PageProgressionDirection",
    "SpineItem",
    "Spine",
    # Navigation models
    "TableOfContents",
]

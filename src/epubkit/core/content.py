"""Locate the package document and the navigation document."""

from __future__ import annotations

import logging
from pathlib import Path
from urllib.parse import unquote

from bs4 import Tag

from epubkit.core.errors import (
    ContainerMissingError,
    ContentPathMissingError,
    PackageDocumentMissingError,
    TableOfContentsMissingError,
)
from epubkit.core.xml_tree import attribute, child, load_xml
from epubkit.models.manifest import Manifest, ManifestItem, MediaType
from epubkit.models.spine import Spine

log = logging.getLogger(__name__)

# Manifest keys tried last when nothing else names the navigation document
NAV_ITEM_KEYS = ("nav", "toc")


class ContentService:
    """Loaded package document of an extracted publication.

    Follows the OCF rule: META-INF/container.xml names the package document,
    and every manifest href is relative to the directory holding it.
    """

    CONTAINER_PATH = Path("META-INF") / "container.xml"

    def __init__(self, directory: Path):
        self.directory = directory
        self.package_path = self.content_path(directory)
        self.content_directory = self.package_path.parent

        try:
            self._package = load_xml(self.package_path)
        except OSError as e:
            raise PackageDocumentMissingError(self.package_path) from e

    @classmethod
    def content_path(cls, directory: Path) -> Path:
        """Absolute path of the package document named by container.xml."""
        try:
            container = load_xml(directory / cls.CONTAINER_PATH)
        except OSError as e:
            raise ContainerMissingError() from e

        # Only the first rootfile is used
        rootfile = child(child(container, "rootfiles"), "rootfile")
        full_path = attribute(rootfile, "full-path")
        if not full_path:
            raise ContentPathMissingError()

        return directory / full_path.lstrip("/")

    @property
    def metadata(self) -> Tag | None:
        return child(self._package, "metadata")

    @property
    def manifest(self) -> Tag | None:
        return child(self._package, "manifest")

    @property
    def spine(self) -> Tag | None:
        return child(self._package, "spine")

    def table_of_contents(self, file_name: str) -> Tag | None:
        """Load the navigation document at ``file_name`` (manifest href)."""
        path = self.content_directory / unquote(file_name)
        try:
            return load_xml(path)
        except OSError as e:
            raise TableOfContentsMissingError(
                f"{TableOfContentsMissingError.description}: {path}"
            ) from e


def resolve_toc_path(spine: Spine, manifest: Manifest, fallback: bool = True) -> str:
    """Manifest href of the navigation document.

    A ``toc`` attribute on the spine must resolve; the manifest-based
    fallbacks only apply when the spine names no navigation document.
    """
    if spine.toc is not None:
        item = manifest.items.get(spine.toc)
        if item is None:
            raise TableOfContentsMissingError(
                f"{TableOfContentsMissingError.description}: "
                f"spine toc {spine.toc!r} is not in the manifest"
            )
        return item.path

    item = _fallback_item(manifest) if fallback else None
    if item is None:
        raise TableOfContentsMissingError()

    log.debug("Spine names no toc, using manifest item %r", item.id)
    return item.path


def _fallback_item(manifest: Manifest) -> ManifestItem | None:
    items = list(manifest.items.values())
    for item in items:
        if item.media_type is MediaType.NCX:
            return item
    for item in items:
        if item.has_property("nav"):
            return item
    for key in NAV_ITEM_KEYS:
        if key in manifest.items:
            return manifest.items[key]
    return None

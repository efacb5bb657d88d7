from __future__ import annotations

from pathlib import Path

import pytest

from epubkit.core.content import ContentService, resolve_toc_path
from epubkit.core.errors import (
    ContainerMissingError,
    ContentPathMissingError,
    PackageDocumentMissingError,
    TableOfContentsMissingError,
)
from epubkit.models import Manifest, ManifestItem, MediaType, Spine

from conftest import build_epub_dir


def _manifest(*items: ManifestItem) -> Manifest:
    return Manifest(items={item.id: item for item in items})


def test_package_document_is_located_through_container(epub_dir: Path) -> None:
    content = ContentService(epub_dir)

    assert content.package_path == epub_dir / "OEBPS" / "content.opf"
    assert content.content_directory == epub_dir / "OEBPS"
    assert content.metadata is not None
    assert content.manifest is not None
    assert content.spine is not None


def test_package_document_at_archive_root(tmp_path: Path) -> None:
    directory = build_epub_dir(tmp_path / "flat", opf_path="content.opf")

    content = ContentService(directory)

    assert content.content_directory == directory


def test_missing_container_raises(tmp_path: Path) -> None:
    directory = build_epub_dir(tmp_path / "book", container="")

    with pytest.raises(ContainerMissingError):
        ContentService(directory)


def test_container_without_full_path_raises(tmp_path: Path) -> None:
    container = (
        '<container xmlns="urn:oasis:names:tc:opendocument:xmlns:container">'
        '<rootfiles><rootfile media-type="application/oebps-package+xml"/></rootfiles>'
        "</container>"
    )
    directory = build_epub_dir(tmp_path / "book", container=container)

    with pytest.raises(ContentPathMissingError):
        ContentService(directory)


def test_first_rootfile_is_used(tmp_path: Path) -> None:
    container = (
        '<container xmlns="urn:oasis:names:tc:opendocument:xmlns:container">'
        '<rootfiles><rootfile full-path="OEBPS/content.opf"/>'
        '<rootfile full-path="Other/other.opf"/></rootfiles></container>'
    )
    directory = build_epub_dir(tmp_path / "book", container=container)

    assert ContentService(directory).package_path == directory / "OEBPS" / "content.opf"


def test_unreadable_package_document_raises(tmp_path: Path) -> None:
    directory = build_epub_dir(tmp_path / "book", opf=None)

    with pytest.raises(PackageDocumentMissingError):
        ContentService(directory)


def test_table_of_contents_is_loaded_relative_to_content(epub_dir: Path) -> None:
    root = ContentService(epub_dir).table_of_contents("toc.ncx")

    assert root is not None
    assert root.name == "ncx"


def test_percent_encoded_href_is_decoded_for_lookup(epub_dir: Path) -> None:
    (epub_dir / "OEBPS" / "toc.ncx").rename(epub_dir / "OEBPS" / "my toc.ncx")

    root = ContentService(epub_dir).table_of_contents("my%20toc.ncx")

    assert root is not None


def test_unreadable_table_of_contents_raises(epub_dir: Path) -> None:
    with pytest.raises(TableOfContentsMissingError):
        ContentService(epub_dir).table_of_contents("missing.ncx")


def test_spine_toc_resolves_through_manifest() -> None:
    manifest = _manifest(
        ManifestItem(id="ncx", path="toc.ncx", media_type=MediaType.NCX),
    )

    assert resolve_toc_path(Spine(toc="ncx"), manifest) == "toc.ncx"


def test_dangling_spine_toc_raises_even_with_fallback_candidates() -> None:
    manifest = _manifest(
        ManifestItem(id="ncx", path="toc.ncx", media_type=MediaType.NCX),
    )

    with pytest.raises(TableOfContentsMissingError):
        resolve_toc_path(Spine(toc="missing"), manifest)


def test_fallback_prefers_ncx_then_nav_property_then_keys() -> None:
    nav = ManifestItem(
        id="navdoc", path="nav.xhtml", media_type=MediaType.XHTML, properties="nav"
    )
    ncx = ManifestItem(id="other", path="book.ncx", media_type=MediaType.NCX)
    keyed = ManifestItem(id="toc", path="toc.xhtml", media_type=MediaType.XHTML)

    assert resolve_toc_path(Spine(), _manifest(keyed, nav, ncx)) == "book.ncx"
    assert resolve_toc_path(Spine(), _manifest(keyed, nav)) == "nav.xhtml"
    assert resolve_toc_path(Spine(), _manifest(keyed)) == "toc.xhtml"


def test_no_navigation_candidate_raises() -> None:
    manifest = _manifest(
        ManifestItem(id="ch1", path="ch1.xhtml", media_type=MediaType.XHTML),
    )

    with pytest.raises(TableOfContentsMissingError):
        resolve_toc_path(Spine(), manifest)


def test_fallback_can_be_disabled() -> None:
    manifest = _manifest(
        ManifestItem(id="ncx", path="toc.ncx", media_type=MediaType.NCX),
    )

    with pytest.raises(TableOfContentsMissingError):
        resolve_toc_path(Spine(), manifest, fallback=False)

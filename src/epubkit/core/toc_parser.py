"""Parse an NCX navigation document into a table of contents tree."""

from __future__ import annotations

from bs4 import Tag

from epubkit.core.errors import NavigationPointInvalidError
from epubkit.core.xml_tree import attribute, child, children, text
from epubkit.models.toc import TableOfContents

# The NCX spelling is "dtb:uid"; "dtb=uid" is accepted for older files
UID_META_NAMES = ("dtb:uid", "dtb=uid")

ROOT_ID = "0"


class TableOfContentsParser:
    """Build the TableOfContents tree from an <ncx> root element."""

    def parse(self, element: Tag | None) -> TableOfContents:
        return TableOfContents(
            label=text(child(child(element, "docTitle"), "text")) or "",
            id=ROOT_ID,
            item=self._unique_identifier(element),
            sub_table=self._evaluate_children(child(element, "navMap")),
        )

    def _unique_identifier(self, element: Tag | None) -> str | None:
        for meta in children(child(element, "head"), "meta"):
            if meta.get("name") in UID_META_NAMES:
                return meta.get("content")
        return None

    def _evaluate_children(self, element: Tag | None) -> list[TableOfContents]:
        """Recursively convert the navPoints directly under ``element``."""
        return [self._nav_point(point) for point in children(element, "navPoint")]

    def _nav_point(self, point: Tag) -> TableOfContents:
        point_id = point.get("id")
        if not point_id:
            raise NavigationPointInvalidError("id")

        src = attribute(child(point, "content"), "src")
        if not src:
            raise NavigationPointInvalidError("src", point_id)

        return TableOfContents(
            label=text(child(child(point, "navLabel"), "text")) or "",
            id=point_id,
            item=src,
            sub_table=self._evaluate_children(point),
        )

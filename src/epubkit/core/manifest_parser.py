"""Parse the <manifest> block of a package document."""

from __future__ import annotations

import logging

from bs4 import Tag

from epubkit.core.xml_tree import children
from epubkit.models.manifest import Manifest, ManifestItem, MediaType

log = logging.getLogger(__name__)


class ManifestParser:
    """Extract the resource inventory from <manifest>."""

    def parse(self, element: Tag | None) -> Manifest:
        items: dict[str, ManifestItem] = {}

        for item in children(element, "item"):
            item_id = item.get("id")
            href = item.get("href")
            if not item_id or not href:
                log.debug("Skipping manifest item without id/href: %s", item.attrs)
                continue

            # Later duplicates replace earlier ones
            items[item_id] = ManifestItem(
                id=item_id,
                path=href,
                media_type=MediaType(item.get("media-type")),
                properties=item.get("properties"),
            )

        return Manifest(
            id=element.get("id") if element is not None else None,
            items=items,
        )

"""Parse the <spine> block of a package document."""

from __future__ import annotations

import logging

from bs4 import Tag

from epubkit.core.xml_tree import children
from epubkit.models.spine import PageProgressionDirection, Spine, SpineItem

log = logging.getLogger(__name__)


class SpineParser:
    """Extract the linear reading order from <spine>."""

    def parse(self, element: Tag | None) -> Spine:
        items: list[SpineItem] = []

        for itemref in children(element, "itemref"):
            idref = itemref.get("idref")
            if not idref:
                log.debug("Skipping itemref without idref: %s", itemref.attrs)
                continue
            items.append(
                SpineItem(
                    id=itemref.get("id"),
                    idref=idref,
                    linear=itemref.get("linear") != "no",
                )
            )

        if element is None:
            return Spine(items=items)

        return Spine(
            id=element.get("id"),
            toc=element.get("toc"),
            page_progression_direction=self._direction(
                element.get("page-progression-direction")
            ),
            items=items,
        )

    def _direction(self, value: str | None) -> PageProgressionDirection:
        """Parse the direction, defaulting to left-to-right."""
        try:
            return PageProgressionDirection(value)
        except ValueError:
            return PageProgressionDirection.LEFT_TO_RIGHT

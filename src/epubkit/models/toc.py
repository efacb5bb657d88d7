"""Data model for the hierarchical table of contents."""

from __future__ import annotations

from typing import Iterator

from pydantic import BaseModel, ConfigDict


class TableOfContents(BaseModel):
    """Node of the table of contents.

    The root node carries the navigation document title as its label and,
    in ``item``, the document's unique identifier rather than a content
    reference. Every other node points at content, possibly with a fragment
    (``chapter1.xhtml#sec2``).
    """

    model_config = ConfigDict(frozen=True)

    label: str
    id: str
    item: str | None = None
    sub_table: tuple[TableOfContents, ...] = ()

    def walk(self, level: int = 0) -> Iterator[tuple[int, TableOfContents]]:
        """Yield ``(level, node)`` for this node and all descendants, depth first."""
        yield level, self
        for child in self.sub_table:
            yield from child.walk(level + 1)

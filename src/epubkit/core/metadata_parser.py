"""Parse the <metadata> block of a package document."""

from __future__ import annotations

from bs4 import Tag

from epubkit.core.xml_tree import attribute, child, children, text
from epubkit.models.metadata import Creator, Metadata

# Dublin Core elements that map 1:1 onto a Metadata field
DUBLIN_CORE_FIELDS = (
    "coverage",
    "date",
    "description",
    "format",
    "identifier",
    "language",
    "publisher",
    "relation",
    "rights",
    "source",
    "subject",
    "title",
    "type",
)


class MetadataParser:
    """Extract bibliographic fields from <metadata>."""

    def parse(self, element: Tag | None) -> Metadata:
        """Build Metadata; missing elements simply stay unset."""
        fields: dict[str, object] = {
            name: text(child(element, name)) for name in DUBLIN_CORE_FIELDS
        }

        creators = [self._creator(el) for el in children(element, "creator")]
        fields["creators"] = creators
        fields["creator"] = creators[0] if creators else None

        contributor = child(element, "contributor")
        fields["contributor"] = (
            self._creator(contributor) if contributor is not None else None
        )

        # Last <meta name="cover"> wins
        for meta in children(element, "meta"):
            if meta.get("name") == "cover":
                fields["cover_id"] = meta.get("content")

        return Metadata(**fields)

    def _creator(self, element: Tag) -> Creator:
        return Creator(
            name=text(element),
            role=attribute(element, "opf:role", "role"),
            file_as=attribute(element, "opf:file-as", "file-as"),
        )

"""Small helpers over BeautifulSoup's XML tree.

Documents are parsed with the lxml-backed ``"xml"`` builder, which keeps
namespace prefixes on attribute names (``opf:role``) and matches tag lookups
by local name (``find("title")`` finds ``<dc:title>``).
"""

from __future__ import annotations

from pathlib import Path

from bs4 import BeautifulSoup, Tag


def parse_xml(data: bytes | str) -> Tag | None:
    """Parse XML and return its root element, or None when there is none."""
    soup = BeautifulSoup(data, "xml")
    return soup.find(True, recursive=False)


def load_xml(path: Path) -> Tag | None:
    """Read and parse an XML file. Raises OSError when it cannot be read."""
    return parse_xml(path.read_bytes())


def child(element: Tag | None, name: str) -> Tag | None:
    """First direct child named ``name``."""
    if element is None:
        return None
    return element.find(name, recursive=False)


def children(element: Tag | None, name: str) -> list[Tag]:
    """All direct children named ``name``, in document order."""
    if element is None:
        return []
    return element.find_all(name, recursive=False)


def text(element: Tag | None) -> str | None:
    """Trimmed text of an element, None when absent or empty."""
    if element is None:
        return None
    value = element.get_text().strip()
    return value or None


def attribute(element: Tag | None, *names: str) -> str | None:
    """Value of the first attribute in ``names`` present on the element."""
    if element is None:
        return None
    for name in names:
        value = element.get(name)
        if value is not None:
            return value
    return None

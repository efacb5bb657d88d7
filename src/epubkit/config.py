"""Parser configuration."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass
class ParserConfig:
    """Configuration for EPUBParser."""

    extract_root: Path | None = None  # None = <system temp>/epubkit
    toc_fallback: bool = True  # look for an NCX/nav item when the spine names none

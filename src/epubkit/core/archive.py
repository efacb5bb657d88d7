"""Extract EPUB archives to a working directory."""

from __future__ import annotations

import logging
import shutil
import tempfile
import zipfile
from pathlib import Path

from epubkit.core.errors import UnzipFailedError

log = logging.getLogger(__name__)

# Parent of the extracted books when no destination root is configured
DEFAULT_DIRECTORY = "epubkit"


class ArchiveService:
    """Unpack a ZIP container into a per-archive directory.

    Each archive extracts to ``<root>/<archive stem>``, replacing whatever a
    previous extraction left there. The directory is kept after parsing;
    removing it is up to the caller once the document is no longer needed.
    """

    def __init__(self, destination_root: Path | None = None):
        self.destination_root = destination_root

    def destination(self, archive: Path) -> Path:
        """Directory that ``archive`` is extracted into."""
        root = self.destination_root or Path(tempfile.gettempdir()) / DEFAULT_DIRECTORY
        return root / archive.stem

    def unarchive(self, archive: Path) -> Path:
        """Extract ``archive`` and return the directory it was unpacked into."""
        destination = self.destination(archive)
        try:
            with zipfile.ZipFile(archive) as zf:
                if destination.exists():
                    shutil.rmtree(destination)
                destination.mkdir(parents=True)
                try:
                    zf.extractall(destination)
                except Exception:
                    shutil.rmtree(destination, ignore_errors=True)
                    raise
        except Exception as e:
            # zlib.error, EOFError or RuntimeError (encrypted members) can
            # surface from extractall besides the zipfile errors
            raise UnzipFailedError(e) from e

        log.debug("Extracted %s to %s", archive, destination)
        return destination

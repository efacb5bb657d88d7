"""Data models for the package manifest."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


class MediaType(str, Enum):
    """Media types recognised in a package manifest."""

    # Images
    GIF = "image/gif"
    JPEG = "image/jpeg"
    PNG = "image/png"
    SVG = "image/svg+xml"
    # Documents
    XHTML = "application/xhtml+xml"
    NCX = "application/x-dtbncx+xml"
    # Scripts
    JAVASCRIPT = "application/javascript"
    # Fonts
    OPEN_TYPE = "application/font-sfnt"
    WOFF = "application/font-woff"
    WOFF2 = "font/woff2"
    # Media overlays
    MEDIA_OVERLAYS = "application/smil+xml"
    PLS = "application/pls+xml"
    # Audio
    MP3 = "audio/mpeg"
    MP4 = "audio/mp4"
    # Styles
    CSS = "text/css"

    UNKNOWN = "unknown"

    @classmethod
    def _missing_(cls, value: object) -> MediaType:
        return cls.UNKNOWN

    @property
    def is_image(self) -> bool:
        return self.value.startswith("image/")


class ManifestItem(BaseModel):
    """Single resource listed in the manifest."""

    model_config = ConfigDict(frozen=True)

    id: str
    path: str  # relative to the content directory, forward slashes
    media_type: MediaType = MediaType.UNKNOWN
    properties: str | None = None  # space-separated, copied verbatim

    def has_property(self, name: str) -> bool:
        """Check whether ``name`` is one of the item's property tokens."""
        return name in (self.properties or "").split()


class Manifest(BaseModel):
    """Resource inventory of the publication, keyed by item id."""

    model_config = ConfigDict(frozen=True)

    id: str | None = None
    items: Mapping[str, ManifestItem] = Field(
        default_factory=lambda: MappingProxyType({})
    )

    @field_validator("items", mode="after")
    @classmethod
    def freeze_items(cls, items: Mapping[str, ManifestItem]) -> Mapping[str, ManifestItem]:
        return MappingProxyType(dict(items))

    @field_serializer("items")
    def serialize_items(self, items: Mapping[str, ManifestItem]) -> dict[str, ManifestItem]:
        return dict(items)

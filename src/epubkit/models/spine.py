"""Data models for the spine (default reading order)."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class PageProgressionDirection(str, Enum):
    """Global direction in which pages flow."""

    LEFT_TO_RIGHT = "ltr"
    RIGHT_TO_LEFT = "rtl"


class SpineItem(BaseModel):
    """Single itemref in the spine."""

    model_config = ConfigDict(frozen=True)

    id: str | None = None
    idref: str = Field(min_length=1)
    linear: bool = True


class Spine(BaseModel):
    """Ordered reading sequence of manifest items."""

    model_config = ConfigDict(frozen=True)

    id: str | None = None
    toc: str | None = None  # manifest id of the navigation document
    page_progression_direction: PageProgressionDirection = (
        PageProgressionDirection.LEFT_TO_RIGHT
    )
    items: tuple[SpineItem, ...] = ()

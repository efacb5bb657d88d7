"""Data models for publication metadata."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Creator(BaseModel):
    """Person or organisation behind a dc:creator or dc:contributor element."""

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    role: str | None = None  # MARC relator code, e.g. "aut"
    file_as: str | None = None  # sort form, e.g. "Kafka, Franz"


class Metadata(BaseModel):
    """Bibliographic fields of the package document.

    Every field is optional. Identifier, title and language are required by
    the format but real-world files omit them often enough that a missing
    value must not be fatal.
    """

    model_config = ConfigDict(frozen=True)

    contributor: Creator | None = None
    coverage: str | None = None
    creator: Creator | None = None
    creators: tuple[Creator, ...] = ()
    date: str | None = None
    description: str | None = None
    format: str | None = None
    identifier: str | None = None
    language: str | None = None
    publisher: str | None = None
    relation: str | None = None
    rights: str | None = None
    source: str | None = None
    subject: str | None = None
    title: str | None = None
    type: str | None = None
    cover_id: str | None = None

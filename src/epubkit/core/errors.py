"""Errors raised while parsing an EPUB publication."""

from __future__ import annotations


class EPUBParserError(Exception):
    """Base class for all parsing failures.

    Each subclass carries a short description, the likely reason and a hint
    the user can act on.
    """

    description = "Error while parsing the publication"
    failure_reason = "The publication could not be parsed"
    recovery_suggestion = "Make sure the file is a valid .epub publication"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.description)


class UnzipFailedError(EPUBParserError):
    """The publication is not a readable ZIP archive."""

    description = "Error while trying to unzip the archive"
    failure_reason = "The archive could not be extracted"
    recovery_suggestion = "Make sure your archive is a valid .epub archive"

    def __init__(self, reason: BaseException):
        super().__init__(f"{self.description}: {reason}")
        self.reason = reason


class ContainerMissingError(EPUBParserError):
    """META-INF/container.xml is absent or unreadable."""

    description = "Error while locating container.xml"
    failure_reason = "The container.xml may be missing"
    recovery_suggestion = (
        "Make sure the path to container.xml is correct, "
        "and the file itself is present."
    )


class ContentPathMissingError(EPUBParserError):
    """container.xml does not name a package document."""

    description = "Error while locating path to content"
    failure_reason = "Path to content is not mentioned in container.xml"
    recovery_suggestion = (
        "Make sure the first <rootfile> in container.xml has a full-path attribute."
    )


class PackageDocumentMissingError(EPUBParserError):
    """The package document named by container.xml cannot be read."""

    description = "Error while reading the package document"
    failure_reason = "The file named by container.xml may be missing"
    recovery_suggestion = (
        "Make sure the full-path in container.xml points at the .opf file."
    )

    def __init__(self, path: object):
        super().__init__(f"{self.description}: {path}")
        self.path = path


class TableOfContentsMissingError(EPUBParserError):
    """The navigation document cannot be resolved or read."""

    description = "Error with getting path for toc.ncx"
    failure_reason = "Table of contents ID was probably not mentioned in the spine"
    recovery_suggestion = "Make sure to check if the '<spine>' contains the ID for TOC"


class NavigationPointInvalidError(EPUBParserError):
    """A navPoint lacks its id or its content reference."""

    description = "Error while reading the table of contents"
    failure_reason = "A navigation point is missing a required attribute"
    recovery_suggestion = (
        "Make sure every <navPoint> has an id and a <content src=...> child."
    )

    def __init__(self, attribute: str, point_id: str | None = None):
        where = f"navPoint {point_id!r}" if point_id else "navPoint"
        super().__init__(f"{where} is missing required {attribute!r}")
        self.attribute = attribute
        self.point_id = point_id

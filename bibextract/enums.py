"""Enums used throughout the package."""

from enum import StrEnum


class MetadataField(StrEnum):
    """A bibliographic field the extractor can produce."""

    ISBN = "isbn"
    ARXIV = "arxiv"
    DOI = "doi"
    ISSN = "issn"
    YEAR = "year"
    VOLUME = "volume"
    ISSUE = "issue"
    JOURNAL = "journal"
    KEYWORDS = "keywords"

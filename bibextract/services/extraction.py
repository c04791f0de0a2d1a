"""Unified metadata extraction service."""

import logging
from collections.abc import Iterable
from dataclasses import asdict, dataclass
from typing import Literal

from bibextract.config import settings
from bibextract.database import create_session_factory
from bibextract.enums import MetadataField
from bibextract.models import Document
from bibextract.services import identifiers
from bibextract.services.journal import DatabaseJournalLookup, JournalLookup, JournalMatcher
from bibextract.services.keywords import extract_keywords

logger = logging.getLogger(__name__)


@dataclass
class ExtractedMetadata:
    """Result of metadata extraction. None means not found."""

    isbn: str | None = None
    arxiv: str | None = None
    doi: str | None | Literal[0] = None
    issn: str | None = None
    year: str | None = None
    volume: str | None = None
    issue: str | None = None
    journal: str | None = None
    keywords: list[str] | None = None

    def found(self) -> dict:
        """Only the fields that were found."""
        return {k: v for k, v in asdict(self).items() if v is not None and v != 0}


class Extractor:
    """Bibliographic field extraction for parsed documents."""

    def __init__(self, journal_lookup: JournalLookup | None = None):
        self.journal_lookup = journal_lookup
        self.journal_matcher = JournalMatcher(journal_lookup) if journal_lookup else None
        self._warned_no_lookup = False

    @classmethod
    def from_settings(cls) -> "Extractor":
        """Create an extractor, backed by the journal index when it is enabled."""
        if not settings.journal_lookup_enabled:
            return cls()
        return cls(journal_lookup=DatabaseJournalLookup(create_session_factory()))

    def isbn(self, text: str) -> str | None:
        return identifiers.isbn(text)

    def arxiv(self, text: str) -> str | None:
        return identifiers.arxiv(text)

    def issn(self, text: str) -> str | None:
        return identifiers.issn(text)

    def year(self, text: str) -> str | None:
        return identifiers.year(text)

    def volume(self, text: str) -> str | None:
        return identifiers.volume(text)

    def issue(self, text: str) -> str | None:
        return identifiers.issue(text)

    async def doi(self, document: Document) -> str | None | Literal[0]:
        """DOI of the document; 0 if the document has no pages."""
        return identifiers.doi(document)

    async def journal(self, text: str) -> str | None:
        """First journal name in text confirmed by the journal index."""
        if self.journal_matcher is None:
            if not self._warned_no_lookup:
                logger.warning("Journal lookup is not configured, skipping journal matching")
                self._warned_no_lookup = True
            return None
        return await self.journal_matcher.match(text)

    def keywords(self, document: Document) -> list[str] | None:
        return extract_keywords(document)

    async def extract(
        self,
        document: Document,
        fields: Iterable[MetadataField | str] | None = None,
    ) -> ExtractedMetadata:
        """
        Run the requested extractors over a document.

        Text fields scan the first page's text; DOI and keywords use the
        document structure.

        Args:
            document: Parsed document
            fields: Fields to extract (default: all)

        Returns:
            ExtractedMetadata with None for every field not found or not requested

        Raises:
            ValueError: if a field name is unknown
        """
        requested = [MetadataField(f) for f in fields] if fields is not None else list(MetadataField)
        result = ExtractedMetadata()

        if not document.pages:
            if MetadataField.DOI in requested:
                result.doi = identifiers.DOI_NOT_ATTEMPTED
            logger.info("Document has no pages, nothing to extract")
            return result

        text = document.pages[0].text
        text_extractors = {
            MetadataField.ISBN: self.isbn,
            MetadataField.ARXIV: self.arxiv,
            MetadataField.ISSN: self.issn,
            MetadataField.YEAR: self.year,
            MetadataField.VOLUME: self.volume,
            MetadataField.ISSUE: self.issue,
        }

        for field in requested:
            if field in text_extractors:
                setattr(result, field.value, text_extractors[field](text))
            elif field == MetadataField.DOI:
                result.doi = await self.doi(document)
            elif field == MetadataField.JOURNAL:
                result.journal = await self.journal(text)
            elif field == MetadataField.KEYWORDS:
                result.keywords = self.keywords(document)

        logger.info(f"Extracted {len(result.found())}/{len(requested)} fields")
        return result

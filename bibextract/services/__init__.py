"""Metadata extraction services."""

from bibextract.services.extraction import ExtractedMetadata, Extractor
from bibextract.services.journal import DatabaseJournalLookup, JournalLookup, JournalMatcher
from bibextract.services.keywords import build_line_blocks, extract_keywords, parse_keywords

__all__ = [
    "DatabaseJournalLookup",
    "ExtractedMetadata",
    "Extractor",
    "JournalLookup",
    "JournalMatcher",
    "build_line_blocks",
    "extract_keywords",
    "parse_keywords",
]

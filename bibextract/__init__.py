"""Bibliographic metadata extraction from parsed document layout."""

from bibextract.enums import MetadataField
from bibextract.models import Document, Line, Page, Word
from bibextract.schemas import parse_document
from bibextract.services import ExtractedMetadata, Extractor

__all__ = [
    "Document",
    "ExtractedMetadata",
    "Extractor",
    "Line",
    "MetadataField",
    "Page",
    "Word",
    "parse_document",
]

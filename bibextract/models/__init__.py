"""Models package - re-exports all models for convenient imports."""

from bibextract.models.document import Document, Line, LineBlock, Page, Word
from bibextract.models.journal import Journal

__all__ = [
    "Document",
    "Journal",
    "Line",
    "LineBlock",
    "Page",
    "Word",
]

"""Utility functions and helpers."""

from bibextract.utils.doi import extract_dois
from bibextract.utils.isbn import extract_isbns, is_valid_isbn
from bibextract.utils.text import is_upper, normalize

__all__ = [
    "extract_dois",
    "extract_isbns",
    "is_upper",
    "is_valid_isbn",
    "normalize",
]

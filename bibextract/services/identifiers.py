"""Pattern extractors for identifier-like fields.

Each extractor is a pure function over raw text that returns the value or
None. Ambiguity collapses to None: a wrong identifier is worse than none.
"""

import logging
import re
from typing import Final, Literal

from bibextract.models import Document
from bibextract.utils import extract_dois, extract_isbns

logger = logging.getLogger(__name__)

# Books may carry ISBN-10, ISBN-13 and e-ISBN. More than that means the
# text cites other books and its own ISBN can't be told apart.
MAX_ISBN_CANDIDATES: Final = 3

MIN_YEAR: Final = 1800
MAX_YEAR: Final = 2030

# Volume and issue numbers longer than this are page ranges, ids, etc.
MAX_NUMBER_DIGITS: Final = 4

# Returned by doi() for a document without pages: nothing was searched
DOI_NOT_ATTEMPTED: Final = 0

ARXIV_RE = re.compile(
    r"arXiv: ?(?:"
    r"(?P<legacy>[-A-Za-z.]+/[0-9]{7})(?:v[0-9]+)?(?![0-9])"
    r"|"
    r"(?P<modern>[0-9]{4}\.[0-9]{4,5})(?:v[0-9]+)?(?![0-9])"
    r")"
)
ISSN_RE = re.compile(r"ISSN:? *([0-9]{4}-[0-9]{3}[0-9X])")
YEAR_RE = re.compile(r"(?:^|\(|\s|,)([0-9]{4})(?:\)|,|\.|\s|$)")
VOLUME_RE = re.compile(r"\b(?:volume|vol|v)\.?[\s:-]\s*([0-9]+)", re.IGNORECASE)
ISSUE_RE = re.compile(r"\b(?:issue|num|no|number|n)\.?[\s:-]\s*([0-9]+)", re.IGNORECASE)


def isbn(text: str) -> str | None:
    """Return the first ISBN if the text holds between one and three of them."""
    isbns = extract_isbns(text)
    if 1 <= len(isbns) <= MAX_ISBN_CANDIDATES:
        return isbns[0]
    if isbns:
        logger.debug(f"Ignoring {len(isbns)} ISBNs, text likely cites other books")
    return None


def arxiv(text: str) -> str | None:
    """Return the arXiv id (without version) following an `arXiv:` label."""
    m = ARXIV_RE.search(text)
    if not m:
        return None
    return m.group("legacy") or m.group("modern")


def issn(text: str) -> str | None:
    m = ISSN_RE.search(text)
    return m.group(1) if m else None


def year(text: str) -> str | None:
    """
    Return the first standalone four-digit number if it is a plausible year.

    Only the first match is considered; an out-of-range first match is not
    replaced by a later one.
    """
    m = YEAR_RE.search(text)
    if not m:
        return None
    value = int(m.group(1))
    if MIN_YEAR <= value <= MAX_YEAR:
        return str(value)
    return None


def _short_number(rx: re.Pattern[str], text: str) -> str | None:
    m = rx.search(text)
    if m and len(m.group(1)) <= MAX_NUMBER_DIGITS:
        return m.group(1)
    return None


def volume(text: str) -> str | None:
    return _short_number(VOLUME_RE, text)


def issue(text: str) -> str | None:
    return _short_number(ISSUE_RE, text)


def doi(document: Document) -> str | None | Literal[0]:
    """
    Return the DOI of a document if its first two pages mention exactly one.

    Returns:
        The DOI, None if there is none or more than one, or
        DOI_NOT_ATTEMPTED (0) if the document has no pages
    """
    if not document.pages:
        return DOI_NOT_ATTEMPTED

    text = "\n".join(page.text for page in document.pages[:2])
    dois = extract_dois(text)

    # More than one DOI: no way to tell which is the document's own
    if len(dois) == 1:
        return dois[0]
    if dois:
        logger.debug(f"Ignoring {len(dois)} DOIs on the first pages")
    return None

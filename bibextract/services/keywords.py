"""Keyword list extraction from document layout.

Keyword lists are often wrapped over several physical lines, so lines are
first grouped into line blocks (one logical paragraph each) using font and
spacing continuity, and only then parsed as text.
"""

import logging
import re
from collections.abc import Iterable
from typing import Final

from bibextract.models import Document, Line, LineBlock
from bibextract.utils import is_upper

logger = logging.getLogger(__name__)

# Keyword sections are front matter
KEYWORD_PAGES: Final = 2

KEYWORDS_HEADER_RE = re.compile(
    r"^(?:keywords|key words|key-words|indexing terms)[ :\-—]*(.*)",
    re.IGNORECASE | re.DOTALL,
)
KEYWORD_DELIMITER_RE = re.compile(r"[;,.·—]")

MIN_KEYWORD_LENGTH: Final = 3
MAX_KEYWORD_WORDS: Final = 3
MIN_KEYWORDS: Final = 2


def build_line_blocks(lines: Iterable[Line]) -> list[LineBlock]:
    """
    Group a page's lines into line blocks.

    A line joins the trailing block when its first word has the same font as
    the block's last word and the gap between them is less than half of that
    word's font size. Lines without words are skipped.
    """
    blocks: list[LineBlock] = []

    for line in lines:
        if not line.words:
            continue

        if blocks:
            prev_word = blocks[-1].last_word
            first_word = line.words[0]
            if (
                prev_word.font == first_word.font
                and line.y_min - prev_word.y_max < prev_word.font_size / 2
            ):
                blocks[-1].lines.append(line)
                continue

        blocks.append(LineBlock(lines=[line]))

    return blocks


def split_keywords(raw: str) -> list[str] | None:
    """
    Split a raw keyword string and sanity-check the result.

    Returns:
        The keywords, or None if any keyword is too short (1-2 characters) or
        too long (more than three words), or if fewer than two remain
    """
    keywords = [x.strip() for x in KEYWORD_DELIMITER_RE.split(raw)]
    keywords = [x for x in keywords if x]

    # Short or long items mean the header matched something that isn't a keyword list
    for keyword in keywords:
        if len(keyword) < MIN_KEYWORD_LENGTH or len(keyword.split(" ")) > MAX_KEYWORD_WORDS:
            logger.debug(f"Rejecting keyword list because of {keyword!r}")
            return None

    if len(keywords) < MIN_KEYWORDS:
        return None

    return keywords


def match_keywords_header(text: str) -> str | None:
    """Return the text after a "Keywords:"-style header, or None if there is none."""
    # Headers are capitalized
    if not is_upper(text[:1]):
        return None
    m = KEYWORDS_HEADER_RE.match(text)
    return m.group(1) if m else None


def parse_keywords(text: str) -> list[str] | None:
    """
    Parse a keyword list from a line block's text.

    Returns None if the text has no keywords header. Use `match_keywords_header`
    to tell "no header" from "header with a rejected list".
    """
    raw = match_keywords_header(text)
    if raw is None:
        return None
    return split_keywords(raw)


def extract_keywords(document: Document) -> list[str] | None:
    """
    Extract the keyword list from the first pages of a document.

    The first block with a keywords header decides the result: its list is
    returned if it passes the sanity checks, otherwise None and no further
    blocks are examined. Never returns an empty list.
    """
    for page_number, page in enumerate(document.pages[:KEYWORD_PAGES], start=1):
        for block in build_line_blocks(page.lines):
            raw = match_keywords_header(block.text)
            if raw is None:
                continue

            keywords = split_keywords(raw)
            if keywords:
                logger.debug(f"Found {len(keywords)} keywords on page {page_number}")
            return keywords

    return None

"""Text helpers shared by the extractors and the journal index."""

import re
import unicodedata

# Any character that is not a Unicode letter
NON_LETTER_RE = re.compile(r"[\W\d_]")


def normalize(text: str) -> str:
    """
    Reduce text to lowercase base letters.

    Accents and ligatures are decomposed (NFKD) and everything that is not a
    letter, including the combining marks left by decomposition, is dropped.
    """
    text = NON_LETTER_RE.sub("", text)
    text = unicodedata.normalize("NFKD", text)
    text = NON_LETTER_RE.sub("", text)
    return text.lower()


def is_upper(char: str | None) -> bool:
    """Check if a single character is an upper-case letter."""
    if not char:
        return False
    return char.isalpha() and char == char.upper()


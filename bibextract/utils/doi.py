"""DOI candidate scanning."""

import re

DOI_RE = re.compile(r"\b10\.\d{4,9}/[^\s\"<>]+")

_TRAILING_PUNCTUATION = ".,;:'"
_BRACKETS = {")": "(", "]": "[", "}": "{"}


def clean_doi(candidate: str) -> str:
    """Trim sentence punctuation and unbalanced closing brackets from a DOI match."""
    doi = candidate
    while doi:
        last = doi[-1]
        if last in _TRAILING_PUNCTUATION:
            doi = doi[:-1]
        elif last in _BRACKETS and doi.count(last) > doi.count(_BRACKETS[last]):
            doi = doi[:-1]
        else:
            break
    return doi


def extract_dois(text: str) -> list[str]:
    """
    Find all DOIs in text.

    Returns:
        DOIs in order of first appearance; repeats of the same DOI (compared
        case-insensitively, as DOIs are) are dropped
    """
    dois: list[str] = []
    seen: set[str] = set()
    for m in DOI_RE.finditer(text):
        doi = clean_doi(m.group(0))
        if doi.lower() not in seen:
            seen.add(doi.lower())
            dois.append(doi)
    return dois

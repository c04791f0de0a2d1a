"""ISBN checksum validation and candidate scanning."""

import re
from collections.abc import Iterator

# Separators that may appear between ISBN digit groups (incl. figure/en/em dashes)
_SEP = r"[ ‒–—-]"
_DASH = r"[‒–—-]"

# "ISBN", "ISBN-13:", "eISBN", "E-ISBN 10" followed by a run of digit groups,
# or an unlabelled 978/979 ISBN-13 written without spaces
ISBN_RE = re.compile(
    r"(?:\be-?)?isbn(?:" + _SEP + r"?1[03])?\s*:?\s*"
    r"(?P<labelled>[0-9](?:" + _SEP + r"?[0-9Xx])*)"
    r"|"
    r"(?<![0-9Xx])(?P<bare>97[89](?:" + _DASH + r"?[0-9]){10})(?![0-9Xx])",
    re.IGNORECASE,
)


def clean_isbn(candidate: str) -> str:
    """Strip everything except digits and the check character X."""
    return re.sub(r"[^0-9Xx]", "", candidate).upper()


def is_valid_isbn(candidate: str) -> bool:
    """
    Validate an ISBN-10 or ISBN-13 check digit.

    Non-identifier characters are ignored. Any length other than 10 or 13
    after cleaning is simply invalid.
    """
    isbn = clean_isbn(candidate)

    if len(isbn) == 13:
        if not isbn.isdigit():
            return False
        total = sum(int(digit) * (3 if i % 2 else 1) for i, digit in enumerate(isbn[:12]))
        check = (10 - total % 10) % 10
        return str(check) == isbn[12]

    if len(isbn) == 10:
        if not isbn[:9].isdigit():
            return False
        total = sum(int(digit) * weight for digit, weight in zip(isbn[:9], range(10, 1, -1)))
        check = 11 - total % 11
        # A remainder of 0 gives 11, which never matches a single character
        expected = "X" if check == 10 else str(check)
        return expected == isbn[9]

    return False


def _readings(run: str) -> Iterator[str]:
    """
    Possible ISBNs in a labelled run, shortest first.

    A run can swallow unrelated numbers that follow the ISBN after a space
    ("ISBN 0471958697 12 pages"), so each reading ends at a space-separated
    group boundary.
    """
    cleaned = ""
    for group in run.split(" "):
        cleaned += clean_isbn(group)
        if len(cleaned) > 13:
            return
        if len(cleaned) in (10, 13):
            yield cleaned


def extract_isbns(text: str) -> list[str]:
    """
    Find all valid ISBNs in text.

    Returns:
        Cleaned ISBNs (digits plus upper-case X) in order of first appearance,
        without duplicates
    """
    isbns: list[str] = []
    for m in ISBN_RE.finditer(text):
        if m.group("labelled"):
            isbn = next((x for x in _readings(m.group("labelled")) if is_valid_isbn(x)), None)
        else:
            isbn = clean_isbn(m.group("bare"))
            if not is_valid_isbn(isbn):
                isbn = None
        if isbn and isbn not in isbns:
            isbns.append(isbn)
    return isbns

"""Exception taxonomy for metadata extraction.

Absence of a field is never an exception: extractors return None.
Exceptions are reserved for contract violations and collaborator failures.
"""

from sqlalchemy.exc import OperationalError


class ExtractionError(Exception):
    """Base class for extraction errors."""

    pass


class InvalidDocumentError(ExtractionError, ValueError):
    """A document payload does not satisfy the input contract.

    Examples: a page without lines, a word without a font, a non-positive font size.
    """

    pass


class JournalLookupError(ExtractionError):
    """The journal index could not be queried.

    Raised by the database-backed lookup and propagated unchanged by the matcher.
    """

    pass


# External exceptions that mean the journal index is unreachable
TRANSIENT_ERRORS = (
    ConnectionError,
    TimeoutError,
    OSError,
    OperationalError,
)

"""Journal name matching against the journal index."""

import logging
import re
from collections.abc import Iterator
from typing import Protocol

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from bibextract.exceptions import TRANSIENT_ERRORS, JournalLookupError
from bibextract.models import Journal
from bibextract.utils import is_upper, normalize

logger = logging.getLogger(__name__)

# Runs of letter tokens (letters, apostrophes, periods) separated by single spaces
PHRASE_RE = re.compile(r"(?:[^\W\d_]|['.])+(?: (?:[^\W\d_]|['.])+)*")

# Lower-case words allowed inside a journal name, between capitalized words
CONNECTORS = {
    "of", "the", "and", "for", "on", "in", "to",
    "de", "du", "des", "la", "le", "et", "di", "del", "y",
    "für", "und", "der", "zur",
}

MIN_NAME_WORDS = 2


def is_capitalized(word: str) -> bool:
    """Capitalized word, including elisions such as "d'Économie"."""
    return is_upper(word[0]) or ("'" in word and is_upper(word.rsplit("'", 1)[1][:1]))


class JournalLookup(Protocol):
    """Existence check against a journal index."""

    async def exists(self, name: str) -> bool: ...


def _capitalized_runs(words: list[str]) -> Iterator[list[str]]:
    run: list[str] = []
    pending: list[str] = []

    for word in words:
        if is_capitalized(word):
            run.extend(pending)
            run.append(word)
            pending = []
        elif run and word.lower() in CONNECTORS:
            pending.append(word)
        else:
            if run:
                yield run
            run = []
            pending = []

    if run:
        yield run


def candidate_names(phrase: str) -> Iterator[str]:
    """
    Candidate journal names in a letter phrase, in lookup order.

    The whole phrase comes first. Then each capitalized run ("Published in
    Advances in Mathematics"), followed by the tails that start after one of
    its connectors ("Advances in Mathematics"). Candidates with fewer than
    two words are dropped. A sentence-final period is removed from
    runs and tails.
    """
    words = phrase.split(" ")
    seen: set[str] = set()

    def emit(name_words: list[str]) -> Iterator[str]:
        if len(name_words) < MIN_NAME_WORDS:
            return
        name = " ".join(name_words)
        if name not in seen:
            seen.add(name)
            yield name

    yield from emit(words)

    for run in _capitalized_runs(words):
        if len(run) > 1 and run[-1].endswith(".") and run[-1] != ".":
            run = run[:-1] + [run[-1][:-1]]
        yield from emit(run)
        for i, word in enumerate(run[:-1]):
            if word.lower() in CONNECTORS and is_capitalized(run[i + 1]):
                yield from emit(run[i + 1 :])


class JournalMatcher:
    """Find the first journal name in text that exists in the index."""

    def __init__(self, lookup: JournalLookup):
        self.lookup = lookup

    async def match(self, text: str) -> str | None:
        """
        Scan text left to right and return the first confirmed journal name.

        Lookups run one at a time in text order, so the earliest name in the
        index wins and no lookup is issued past it. Lookup failures propagate.
        """
        lookups = 0
        for m in PHRASE_RE.finditer(text):
            for name in candidate_names(m.group(0)):
                lookups += 1
                if await self.lookup.exists(name):
                    logger.debug(f"Matched journal {name!r} after {lookups} lookups")
                    return name
        logger.debug(f"No journal matched after {lookups} lookups")
        return None


class DatabaseJournalLookup:
    """Journal index backed by the `journals` table, keyed by normalized name."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    async def exists(self, name: str) -> bool:
        key = normalize(name)
        if not key:
            return False

        try:
            async with self.session_factory() as session:
                result = await session.execute(
                    select(Journal.id).where(Journal.name_normalized == key).limit(1)
                )
                found = result.scalar_one_or_none() is not None
        except TRANSIENT_ERRORS as e:
            raise JournalLookupError(f"Journal index unavailable: {e}") from e

        logger.debug(f"Journal lookup {name!r} -> {found}")
        return found

    async def add(self, name: str) -> Journal | None:
        """Add a journal name to the index. Returns None if it is already present."""
        key = normalize(name)
        if not key:
            raise ValueError(f"Journal name has no letters: {name!r}")

        async with self.session_factory() as session:
            existing = await session.execute(
                select(Journal).where(Journal.name_normalized == key)
            )
            if existing.scalar_one_or_none() is not None:
                return None

            journal = Journal(name=name, name_normalized=key)
            session.add(journal)
            await session.commit()
            logger.info(f"Added journal {name!r} to index")
            return journal

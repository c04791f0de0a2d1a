"""Tests for journal name matching."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from bibextract.exceptions import JournalLookupError
from bibextract.models import Journal
from bibextract.services.journal import DatabaseJournalLookup, JournalMatcher, candidate_names


def lookup_for(*names: str) -> AsyncMock:
    """Lookup stub that confirms only the given names."""
    lookup = AsyncMock()
    lookup.exists.side_effect = lambda name: name in names
    return lookup


class TestCandidateNames:
    def test_whole_phrase_then_capitalized_runs(self):
        phrase = "Published in Nature Communications last year."
        assert list(candidate_names(phrase)) == [
            "Published in Nature Communications last year.",
            "Published in Nature Communications",
            "Nature Communications",
        ]

    def test_connectors_inside_name(self):
        phrase = "see Journal of Applied Physics for"
        assert list(candidate_names(phrase)) == [
            "see Journal of Applied Physics for",
            "Journal of Applied Physics",
            "Applied Physics",
        ]

    def test_trailing_connector_not_included(self):
        assert list(candidate_names("Physical Review and")) == [
            "Physical Review and",
            "Physical Review",
        ]

    def test_single_words_dropped(self):
        assert list(candidate_names("Nature is great")) == ["Nature is great"]

    def test_several_runs(self):
        phrase = "Cell Reports and then Science Advances"
        assert list(candidate_names(phrase)) == [
            phrase,
            "Cell Reports",
            "Science Advances",
        ]

    def test_apostrophes_and_periods_kept(self):
        assert list(candidate_names("Ann. Inst. Fourier")) == ["Ann. Inst. Fourier"]

    def test_name_with_in_connector(self):
        names = list(candidate_names("Published in Advances in Mathematics"))
        assert "Advances in Mathematics" in names
        assert "Mathematics" not in names

    def test_foreign_connectors(self):
        names = list(candidate_names("siehe Zeitschrift für Physik und Chemie"))
        assert "Zeitschrift für Physik und Chemie" in names

    def test_sentence_final_period_stripped(self):
        names = list(candidate_names("Published in Nature Communications."))
        assert "Nature Communications" in names
        assert "Nature Communications." not in names


class TestJournalMatcher:
    @pytest.mark.asyncio
    async def test_match_in_sentence(self):
        lookup = lookup_for("Nature Communications")
        matcher = JournalMatcher(lookup)

        result = await matcher.match("Published in Nature Communications last year.")

        assert result == "Nature Communications"

    @pytest.mark.asyncio
    async def test_name_containing_in(self):
        lookup = lookup_for("Advances in Mathematics")
        matcher = JournalMatcher(lookup)

        result = await matcher.match("Published in Advances in Mathematics 2019")

        assert result == "Advances in Mathematics"

    @pytest.mark.asyncio
    async def test_name_at_end_of_sentence(self):
        lookup = lookup_for("Nature Communications")
        matcher = JournalMatcher(lookup)

        result = await matcher.match("Published in Nature Communications. Received 2020.")

        assert result == "Nature Communications"

    @pytest.mark.asyncio
    async def test_first_match_wins_and_stops(self):
        """Lookups run in text order and stop at the first confirmed name."""
        lookup = lookup_for("Cell Reports", "Science Advances")
        matcher = JournalMatcher(lookup)

        result = await matcher.match("Cell Reports, 2019. Science Advances, 2020.")

        assert result == "Cell Reports"
        assert [c.args[0] for c in lookup.exists.await_args_list] == ["Cell Reports"]

    @pytest.mark.asyncio
    async def test_lookups_in_text_order(self):
        lookup = lookup_for()
        matcher = JournalMatcher(lookup)

        result = await matcher.match("Acta Numerica, Annals of Mathematics; Inventiones Mathematicae")

        assert result is None
        assert [c.args[0] for c in lookup.exists.await_args_list] == [
            "Acta Numerica",
            "Annals of Mathematics",
            "Inventiones Mathematicae",
        ]

    @pytest.mark.asyncio
    async def test_single_word_names_not_looked_up(self):
        lookup = lookup_for("Nature")
        matcher = JournalMatcher(lookup)

        assert await matcher.match("Nature, 2015") is None
        lookup.exists.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unicode_names(self):
        lookup = lookup_for("Revue d'Économie Politique")
        matcher = JournalMatcher(lookup)

        result = await matcher.match("Revue d'Économie Politique 120(3)")

        assert result == "Revue d'Économie Politique"

    @pytest.mark.asyncio
    async def test_empty_text(self):
        lookup = lookup_for()
        assert await JournalMatcher(lookup).match("") is None

    @pytest.mark.asyncio
    async def test_lookup_failure_propagates(self):
        lookup = AsyncMock()
        lookup.exists.side_effect = JournalLookupError("down")
        matcher = JournalMatcher(lookup)

        with pytest.raises(JournalLookupError):
            await matcher.match("Nature Communications")
        assert lookup.exists.await_count == 1


def session_factory_returning(scalar) -> tuple[MagicMock, AsyncMock]:
    """Session factory whose session.execute() yields the given scalar."""
    session = AsyncMock()
    session.add = MagicMock()
    result = MagicMock()
    result.scalar_one_or_none.return_value = scalar
    session.execute.return_value = result

    factory = MagicMock()
    factory.return_value.__aenter__.return_value = session
    factory.return_value.__aexit__.return_value = False
    return factory, session


class TestDatabaseJournalLookup:
    @pytest.mark.asyncio
    async def test_exists_true(self):
        factory, session = session_factory_returning(1)
        lookup = DatabaseJournalLookup(factory)

        assert await lookup.exists("Nature Communications") is True
        session.execute.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_exists_false(self):
        factory, _ = session_factory_returning(None)
        lookup = DatabaseJournalLookup(factory)

        assert await lookup.exists("Unknown Journal") is False

    @pytest.mark.asyncio
    async def test_query_uses_normalized_name(self):
        factory, session = session_factory_returning(1)
        lookup = DatabaseJournalLookup(factory)

        await lookup.exists("Revue d'Économie Politique")

        statement = session.execute.await_args.args[0]
        params = statement.compile().params
        assert "revuedeconomiepolitique" in params.values()

    @pytest.mark.asyncio
    async def test_name_without_letters_skips_query(self):
        factory, session = session_factory_returning(1)
        lookup = DatabaseJournalLookup(factory)

        assert await lookup.exists("... ''") is False
        session.execute.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_database_error_wrapped(self):
        factory, session = session_factory_returning(None)
        session.execute.side_effect = OperationalError("SELECT 1", {}, Exception("connection refused"))
        lookup = DatabaseJournalLookup(factory)

        with pytest.raises(JournalLookupError):
            await lookup.exists("Nature Communications")

    @pytest.mark.asyncio
    async def test_add_new_journal(self):
        factory, session = session_factory_returning(None)
        lookup = DatabaseJournalLookup(factory)

        journal = await lookup.add("Nature Communications")

        assert isinstance(journal, Journal)
        assert journal.name_normalized == "naturecommunications"
        session.add.assert_called_once_with(journal)
        session.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_add_existing_journal(self):
        factory, session = session_factory_returning(Journal(name="Nature", name_normalized="nature"))
        lookup = DatabaseJournalLookup(factory)

        assert await lookup.add("NATURE") is None
        session.add.assert_not_called()

    @pytest.mark.asyncio
    async def test_add_without_letters_rejected(self):
        factory, _ = session_factory_returning(None)
        lookup = DatabaseJournalLookup(factory)

        with pytest.raises(ValueError):
            await lookup.add("123")

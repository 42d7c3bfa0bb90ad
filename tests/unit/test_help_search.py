"""Unit tests for help article search."""

import pytest

from zibra.core.domain import Corpus, HelpArticle, HelpCategory, SynonymTable
from zibra.core.services.help_search import FALLBACK_LIMIT, RESULT_LIMIT, HelpSearchService

pytestmark = pytest.mark.unit


@pytest.fixture
def search(synonyms, help_articles):
    return HelpSearchService(
        synonyms,
        help_articles,
        categories=[
            HelpCategory(id="payments", name="Payments"),
            HelpCategory(id="trips", name="Trips", icon="car"),
        ],
    )


def article(article_id, title="Untitled", summary="", body="", keywords=()):
    return HelpArticle(
        id=article_id,
        category="general",
        title=title,
        summary=summary,
        body=body,
        keywords=keywords,
    )


class TestSearchRanking:
    def test_end_to_end_synonym_match(self, search):
        """"money" expands to "wallet"; the wallet article must rank."""
        results = search.search_scored("how do i get money")

        ids = [r.document.id for r in results]
        assert "a-wallet" in ids
        assert results[ids.index("a-wallet")].score > 0

    def test_phrase_bonus_outranks_word_hits(self, search):
        results = search.search_scored("trip")

        # a-rating: summary phrase 50 + summary word 10 + body "journey" 5
        # a-ride: "ride" in title 20, summary 10, keyword 15
        assert [(r.document.id, r.score) for r in results] == [("a-rating", 65), ("a-ride", 45)]

    def test_results_sorted_descending(self, search):
        scores = [r.score for r in search.search_scored("add money wallet ride")]

        assert scores == sorted(scores, reverse=True)
        assert all(score > 0 for score in scores)

    def test_synonym_keyword_bonus(self):
        """Querying "cash" reaches a document whose only keyword is "wallet"."""
        service = HelpSearchService(SynonymTable({"pay": ["wallet", "cash"]}))
        doc = article("a", title="Help", summary="Info", body="Text", keywords=["wallet"])

        results = service.search_scored("cash", [doc])

        assert results[0].score == 15

    def test_results_bounded_to_eight(self):
        corpus = [
            article(f"w-{i}", title=f"Wallet guide {i}", body="wallet " * (i % 4))
            for i in range(20)
        ]
        service = HelpSearchService(SynonymTable())

        results = service.search_scored("wallet", corpus)

        assert len(results) == RESULT_LIMIT
        scores = [r.score for r in results]
        assert scores == sorted(scores, reverse=True)
        assert all(score > 0 for score in scores)

    def test_equal_scores_keep_declaration_order(self):
        corpus = [article(f"a-{i}", title="Cash trips") for i in range(5)]
        service = HelpSearchService(SynonymTable())

        results = service.search_documents("cash", corpus)

        assert [a.id for a in results] == ["a-0", "a-1", "a-2", "a-3", "a-4"]

    def test_custom_result_limit(self, synonyms, help_articles):
        service = HelpSearchService(synonyms, help_articles, result_limit=1)

        assert len(service.search_scored("trip")) == 1


class TestFallback:
    def test_zero_relevance_returns_first_three(self, search):
        results = search.search_scored("zzzz qqqq")

        assert [r.document.id for r in results] == ["a-start", "a-wallet", "a-ride"]
        assert all(r.score == 0 for r in results)

    def test_fallback_with_small_corpus(self):
        service = HelpSearchService(SynonymTable())
        corpus = [article("only", title="Safety")]

        assert [a.id for a in service.search_documents("zzzz", corpus)] == ["only"]

    def test_fallback_limit_constant(self, search):
        assert len(search.search_documents("nothing-matches-this")) == FALLBACK_LIMIT

    def test_single_character_query_still_scores_phrases(self):
        """"a" yields no tokens, but the whole query may still match a title."""
        service = HelpSearchService(SynonymTable())
        corpus = [article("x", title="Zzz"), article("y", title="A ride")]

        results = service.search_scored("a", corpus)

        assert [(r.document.id, r.score) for r in results] == [("y", 100)]


class TestEmptyInputs:
    @pytest.mark.parametrize("query", ["", "   ", "\n\t"])
    def test_blank_query_returns_nothing(self, search, query):
        assert search.search_scored(query) == []

    def test_empty_corpus_returns_nothing(self, search):
        assert search.search_scored("wallet", []) == []

    def test_service_without_corpus(self):
        assert HelpSearchService(SynonymTable()).search_documents("wallet") == []


class TestExplicitCorpus:
    def test_search_limited_to_given_corpus(self, search, help_articles):
        subset = help_articles.in_category("trips")

        ids = [a.id for a in search.search_documents("wallet", subset)]

        assert "a-wallet" not in ids
        assert set(ids) <= {"a-ride", "a-rating"}


class TestCategories:
    def test_articles_in_category(self, search):
        assert [a.id for a in search.articles_in_category("trips")] == ["a-ride", "a-rating"]

    def test_unknown_category_is_empty(self, search):
        assert search.articles_in_category("missing") == []

    def test_get_category(self, search):
        assert search.get_category("trips").icon == "car"
        assert search.get_category("missing") is None

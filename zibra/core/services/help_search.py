"""Fuzzy help-article search with synonym expansion."""

import logging
from collections.abc import Iterable

from ..domain import Corpus, HelpArticle, HelpCategory, ScoredDocument, SynonymTable
from .normalizer import normalize_query, tokenize_query
from .scoring import ArticleScoringPolicy
from .synonym_expander import SynonymExpander

logger = logging.getLogger(__name__)

RESULT_LIMIT = 8
FALLBACK_LIMIT = 3


class HelpSearchService:
    """Ranks help articles against a free-text query.

    Returns at most ``result_limit`` articles that scored above zero. When
    nothing scores, the first ``fallback_limit`` articles of the searched
    corpus are returned in declaration order.
    """

    def __init__(
        self,
        synonyms: SynonymTable,
        articles: Corpus[HelpArticle] | None = None,
        categories: Iterable[HelpCategory] = (),
        result_limit: int = RESULT_LIMIT,
        fallback_limit: int = FALLBACK_LIMIT,
    ) -> None:
        """Initialize the search service.

        Args:
            synonyms: Synonym table for query expansion.
            articles: Default corpus searched when none is passed explicitly.
            categories: Help categories in display order.
            result_limit: Maximum number of relevant results.
            fallback_limit: Number of articles returned when nothing scores.
        """
        self.expander = SynonymExpander(synonyms)
        self.policy = ArticleScoringPolicy()
        self.articles = articles if articles is not None else Corpus(())
        self.categories = list(categories)
        self.result_limit = result_limit
        self.fallback_limit = fallback_limit

    def search_scored(
        self,
        query: str,
        corpus: Iterable[HelpArticle] | None = None,
    ) -> list[ScoredDocument]:
        """Search and keep the scores.

        Args:
            query: Free-text query.
            corpus: Articles to search; defaults to the service's corpus.

        Returns:
            Ranked results, empty for a blank query.
        """
        normalized = normalize_query(query)
        if not normalized:
            return []

        documents = list(corpus) if corpus is not None else list(self.articles)
        words = self.expander.expand(tokenize_query(normalized))

        scored = [
            ScoredDocument(document=article, score=self.policy.score(normalized, words, article))
            for article in documents
        ]
        # Stable sort: declaration order breaks ties
        scored.sort(key=lambda s: s.score, reverse=True)

        results = [s for s in scored if s.score > 0]
        if not results:
            logger.debug("No article matched %r; returning first %d", normalized, self.fallback_limit)
            return scored[: self.fallback_limit]

        logger.debug("%d articles matched %r", len(results), normalized)
        return results[: self.result_limit]

    def search_documents(
        self,
        query: str,
        corpus: Iterable[HelpArticle] | None = None,
    ) -> list[HelpArticle]:
        """Search and return the ranked articles only."""
        return [result.document for result in self.search_scored(query, corpus)]

    def get_category(self, category_id: str) -> HelpCategory | None:
        for category in self.categories:
            if category.id == category_id:
                return category
        return None

    def articles_in_category(self, category_id: str) -> list[HelpArticle]:
        """Articles listed under a category, in declaration order."""
        return self.articles.in_category(category_id)

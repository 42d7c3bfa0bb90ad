"""Relevance scoring policies.

Both policies are pure functions of the normalized query, the query words
and a document.
"""

from collections.abc import Sequence

from ..domain import HelpArticle, ResponseTemplate

# Help search weights
TITLE_PHRASE_WEIGHT = 100
SUMMARY_PHRASE_WEIGHT = 50
TITLE_WORD_WEIGHT = 20
SUMMARY_WORD_WEIGHT = 10
KEYWORD_WORD_WEIGHT = 15
BODY_WORD_WEIGHT = 5


class TemplateScoringPolicy:
    """Keyword-overlap score for response templates.

    ``score = matched / len(keywords) * 100 + priority`` where ``matched``
    counts keywords found as substrings of the normalized query. Templates
    with no matching keyword have no score.
    """

    def score(self, normalized_query: str, template: ResponseTemplate) -> float | None:
        if not template.keywords:
            return None

        match_count = sum(1 for keyword in template.keywords if keyword in normalized_query)
        if match_count == 0:
            return None

        return (match_count / len(template.keywords)) * 100 + template.priority


class ArticleScoringPolicy:
    """Multi-field score for help articles.

    The whole normalized query earns a phrase bonus when found in the
    title or summary. Each expanded word then adds to every field it
    occurs in; a word matches the keyword bucket when it contains, or is
    contained by, any article keyword.
    """

    def score(self, normalized_query: str, words: Sequence[str], article: HelpArticle) -> float:
        score = 0
        title = article.title.lower()
        summary = article.summary.lower()
        body = article.body.lower()

        if normalized_query:
            if normalized_query in title:
                score += TITLE_PHRASE_WEIGHT
            if normalized_query in summary:
                score += SUMMARY_PHRASE_WEIGHT

        for word in words:
            if word in title:
                score += TITLE_WORD_WEIGHT
            if word in summary:
                score += SUMMARY_WORD_WEIGHT
            if any(word in keyword or keyword in word for keyword in article.keywords):
                score += KEYWORD_WORD_WEIGHT
            if word in body:
                score += BODY_WORD_WEIGHT

        return score

"""Role-scoped support response selection."""

import logging

from ..domain import Corpus, ResponseTemplate, ScoredDocument
from .normalizer import normalize_query
from .scoring import TemplateScoringPolicy

logger = logging.getLogger(__name__)

DEFAULT_RESPONSE = (
    "I can help you with that. Could you tell me a bit more about what you need? "
    "You can also submit a support ticket for detailed assistance."
)


class TemplateSelector:
    """Maps a free-text query to the single best response template."""

    def __init__(
        self,
        templates: Corpus[ResponseTemplate],
        policy: TemplateScoringPolicy | None = None,
    ) -> None:
        """Initialize the selector.

        Args:
            templates: Immutable template corpus, loaded at startup.
            policy: Scoring policy; defaults to TemplateScoringPolicy.
        """
        self.templates = templates
        self.policy = policy or TemplateScoringPolicy()

    def match_template(
        self,
        query: str,
        scope: str,
        context: str | None = None,
    ) -> ScoredDocument | None:
        """Find the best scoring in-scope template.

        Args:
            query: Free-text user query.
            scope: The caller's role.
            context: Screen or conversation hint, currently unused.

        Returns:
            The winning template with its score, or None when no keyword of
            any in-scope template occurs in the query.
        """
        normalized = normalize_query(query)

        candidates = []
        for template in self.templates.candidates_in_scope(scope):
            score = self.policy.score(normalized, template)
            if score is not None and score > 0:
                candidates.append(ScoredDocument(document=template, score=score))

        if not candidates:
            logger.debug("No template matched for scope %s", scope)
            return None

        # Stable sort: first declared template wins ties
        candidates.sort(key=lambda c: c.score, reverse=True)
        best = candidates[0]
        logger.debug(
            "Selected template %s (score %.2f) from %d candidates",
            best.document.id,
            best.score,
            len(candidates),
        )
        return best

    def select_template(
        self,
        query: str,
        scope: str,
        context: str | None = None,
    ) -> ResponseTemplate | None:
        """Return the best template, or the catch-all when nothing matches.

        None only when nothing matches and the corpus has no catch-all.
        """
        match = self.match_template(query, scope, context)
        if match is not None:
            return match.document

        catch_all = self.templates.catch_all
        if catch_all is None:
            logger.warning("No template matched and the corpus has no catch-all")
        return catch_all

    def get_template_response(
        self,
        query: str,
        scope: str,
        context: str | None = None,
    ) -> str:
        """Return the response text for a query, never empty."""
        template = self.select_template(query, scope, context)
        if template is not None:
            return template.content
        return DEFAULT_RESPONSE

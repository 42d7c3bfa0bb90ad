"""Matching engine services.

- normalizer: query lowercasing, trimming and tokenizing
- synonym_expander: single-hop bidirectional synonym expansion
- scoring: template and article scoring policies
- template_selector: role-scoped best response selection
- help_search: ranked help article search with fallback
- corpus_audit: launch-readiness checks over templates
"""

from .corpus_audit import AuditReport, CheckResult, CorpusAuditor
from .help_search import FALLBACK_LIMIT, RESULT_LIMIT, HelpSearchService
from .normalizer import normalize_query, tokenize_query
from .scoring import ArticleScoringPolicy, TemplateScoringPolicy
from .synonym_expander import SynonymExpander
from .template_selector import DEFAULT_RESPONSE, TemplateSelector

__all__ = [
    "normalize_query",
    "tokenize_query",
    "SynonymExpander",
    "TemplateScoringPolicy",
    "ArticleScoringPolicy",
    "TemplateSelector",
    "DEFAULT_RESPONSE",
    "HelpSearchService",
    "RESULT_LIMIT",
    "FALLBACK_LIMIT",
    "CorpusAuditor",
    "AuditReport",
    "CheckResult",
]

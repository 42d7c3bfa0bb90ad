"""Domain models for the ZIBA support engine.

- document: ResponseTemplate, HelpArticle, HelpCategory, ScoredDocument
- corpus: Corpus, the immutable scope-filtered document store
- synonyms: SynonymTable for help search expansion
- language: response language detection

    from zibra.core.domain import Corpus, ResponseTemplate, SynonymTable
"""

from .corpus import Corpus
from .document import (
    DEFAULT_PRIORITY,
    GENERAL_SCOPE,
    ROLES,
    HelpArticle,
    HelpCategory,
    ResponseTemplate,
    ScoredDocument,
    normalize_scope,
)
from .language import LANGUAGE_CONFIG, LanguageConfig, detect_user_language
from .synonyms import SynonymTable

__all__ = [
    # Documents
    "ResponseTemplate",
    "HelpArticle",
    "HelpCategory",
    "ScoredDocument",
    "normalize_scope",
    "DEFAULT_PRIORITY",
    "GENERAL_SCOPE",
    "ROLES",
    # Corpus
    "Corpus",
    "SynonymTable",
    # Language
    "LanguageConfig",
    "LANGUAGE_CONFIG",
    "detect_user_language",
]

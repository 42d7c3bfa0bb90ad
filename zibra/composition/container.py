"""Composition root wiring the corpus source to the matching services."""

from __future__ import annotations

import logging
from functools import lru_cache

from ..adapters.outbound.corpus.json_corpus_adapter import JsonCorpusAdapter
from ..config.settings import settings
from ..core.domain import Corpus, HelpArticle, HelpCategory, ResponseTemplate, SynonymTable
from ..core.domain.exceptions import InvalidConfigurationError
from ..core.ports.corpus_source_port import CorpusSourcePort
from ..core.services.corpus_audit import CorpusAuditor
from ..core.services.help_search import HelpSearchService
from ..core.services.template_selector import TemplateSelector

logger = logging.getLogger(__name__)


@lru_cache
def get_corpus_source() -> CorpusSourcePort:
    corpus_dir = settings.resolved_corpus_dir
    if not corpus_dir.is_dir():
        raise InvalidConfigurationError(
            f"Corpus directory does not exist: {corpus_dir}",
            context={"setting": "ZIBRA_CORPUS_DIR", "value": str(corpus_dir)},
        )

    logger.info("Initializing JsonCorpusAdapter from %s", corpus_dir)
    return JsonCorpusAdapter(
        templates_path=settings.templates_path,
        help_articles_path=settings.help_articles_path,
        synonyms_path=settings.synonyms_path,
        default_priority=settings.default_priority,
        require_catch_all=settings.require_catch_all,
    )


@lru_cache
def get_template_corpus() -> Corpus[ResponseTemplate]:
    return get_corpus_source().load_templates()


@lru_cache
def get_help_corpus() -> Corpus[HelpArticle]:
    return get_corpus_source().load_help_articles()


@lru_cache
def get_help_categories() -> tuple[HelpCategory, ...]:
    return tuple(get_corpus_source().load_help_categories())


@lru_cache
def get_synonyms() -> SynonymTable:
    return get_corpus_source().load_synonyms()


@lru_cache
def get_template_selector() -> TemplateSelector:
    logger.info("Initializing TemplateSelector...")
    return TemplateSelector(get_template_corpus())


@lru_cache
def get_help_search() -> HelpSearchService:
    logger.info("Initializing HelpSearchService...")
    return HelpSearchService(
        synonyms=get_synonyms(),
        articles=get_help_corpus(),
        categories=get_help_categories(),
        result_limit=settings.search_result_limit,
        fallback_limit=settings.search_fallback_limit,
    )


@lru_cache
def get_auditor() -> CorpusAuditor:
    return CorpusAuditor()


def reset_container() -> None:
    """Drop cached singletons so the next call reloads the corpus."""
    for factory in (
        get_corpus_source,
        get_template_corpus,
        get_help_corpus,
        get_help_categories,
        get_synonyms,
        get_template_selector,
        get_help_search,
        get_auditor,
    ):
        factory.cache_clear()

"""Corpus Source Port Interface."""

from abc import ABC, abstractmethod

from ..domain import Corpus, HelpArticle, HelpCategory, ResponseTemplate, SynonymTable


class CorpusSourcePort(ABC):
    """Abstract loader for the static corpus configuration.

    Implementations are called once at startup; the returned objects are
    immutable for the life of the process.
    """

    @abstractmethod
    def load_templates(self) -> Corpus[ResponseTemplate]:
        """Load the response template corpus."""
        ...

    @abstractmethod
    def load_help_articles(self) -> Corpus[HelpArticle]:
        """Load the help article corpus."""
        ...

    @abstractmethod
    def load_help_categories(self) -> list[HelpCategory]:
        """Load help categories in display order."""
        ...

    @abstractmethod
    def load_synonyms(self) -> SynonymTable:
        """Load the synonym table."""
        ...

"""Matchable documents for the support matching engine.

Two concrete kinds share the matchable contract (id, scope, keywords,
category, priority):

- ResponseTemplate: a pre-authored support response for one or more roles.
- HelpArticle: a help-center article with title, summary and body.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field

# Roles that can own templates. "general" is the wildcard scope.
RIDER = "rider"
DRIVER = "driver"
ADMIN = "admin"
SUPER_ADMIN = "super_admin"
DIRECTOR = "director"
GENERAL_SCOPE = "general"

ROLES = (RIDER, DRIVER, ADMIN, SUPER_ADMIN, DIRECTOR, GENERAL_SCOPE)

DEFAULT_PRIORITY = 50


def normalize_scope(scope: str | Iterable[str]) -> frozenset[str]:
    """Return a scope as a set of tags; a single tag becomes a singleton set."""
    if isinstance(scope, str):
        return frozenset((scope,))
    return frozenset(scope)


def _lower_keywords(keywords: Iterable[str]) -> tuple[str, ...]:
    return tuple(keyword.lower() for keyword in keywords)


@dataclass(frozen=True)
class ResponseTemplate:
    """A role-scoped response template.

    Attributes:
        id: Unique identifier within the template corpus.
        scope: Role tags the template answers for.
        category: Informational classification, never scored.
        keywords: Lowercase phrases matched by substring containment.
            An empty tuple marks the catch-all template.
        content: The response text.
        priority: Additive ranking weight.
    """

    id: str
    scope: frozenset[str]
    category: str
    keywords: tuple[str, ...]
    content: str
    priority: int = DEFAULT_PRIORITY

    def __post_init__(self) -> None:
        object.__setattr__(self, "scope", normalize_scope(self.scope))
        object.__setattr__(self, "keywords", _lower_keywords(self.keywords))

    @property
    def is_catch_all(self) -> bool:
        return not self.keywords

    def in_scope(self, scope: str) -> bool:
        return scope in self.scope or GENERAL_SCOPE in self.scope


@dataclass(frozen=True)
class HelpArticle:
    """A help-center article ranked by the fuzzy search.

    Attributes:
        id: Unique identifier within the help corpus.
        category: Help category id the article is listed under.
        title: Heaviest weighted field.
        summary: One-line description.
        body: Full article text.
        keywords: Lowercase search terms.
        scope: Audience tags; search ignores scope.
        priority: Carried for the matchable contract, unused by search.
    """

    id: str
    category: str
    title: str
    summary: str
    body: str
    keywords: tuple[str, ...] = ()
    scope: frozenset[str] = field(default_factory=lambda: frozenset((GENERAL_SCOPE,)))
    priority: int = DEFAULT_PRIORITY

    def __post_init__(self) -> None:
        object.__setattr__(self, "scope", normalize_scope(self.scope))
        object.__setattr__(self, "keywords", _lower_keywords(self.keywords))

    @property
    def is_catch_all(self) -> bool:
        return not self.keywords

    def in_scope(self, scope: str) -> bool:
        return scope in self.scope or GENERAL_SCOPE in self.scope


@dataclass(frozen=True)
class HelpCategory:
    """A browsable group of help articles."""

    id: str
    name: str
    description: str = ""
    icon: str = ""


@dataclass(frozen=True)
class ScoredDocument:
    """A document paired with its relevance score.

    Attributes:
        document: The matched ResponseTemplate or HelpArticle.
        score: Non-negative relevance score; higher is more relevant.
    """

    document: ResponseTemplate | HelpArticle
    score: float

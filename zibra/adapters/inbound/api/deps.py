"""FastAPI dependency injection and request guards for the support engine."""

from ....composition.container import (
    get_help_corpus,
    get_help_search,
    get_template_corpus,
    get_template_selector,
)
from ....core.domain.exceptions import QueryTooLongError
from .models import MAX_QUERY_LENGTH


def check_query_length(query: str, max_length: int = MAX_QUERY_LENGTH) -> str:
    """Reject queries the engine should not be asked to scan.

    Raises:
        QueryTooLongError: If the query exceeds ``max_length`` characters.
    """
    if len(query) > max_length:
        raise QueryTooLongError(
            f"Query exceeds maximum length of {max_length} characters",
            context={"length": len(query), "max_length": max_length},
        )
    return query


__all__ = [
    "check_query_length",
    "get_help_corpus",
    "get_help_search",
    "get_template_corpus",
    "get_template_selector",
]

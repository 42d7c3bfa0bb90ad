"""Query normalization for both matching policies."""

MIN_TOKEN_LENGTH = 2


def normalize_query(query: str | None) -> str:
    """Lowercase and trim a raw query. ``None`` normalizes to ``""``."""
    if not query:
        return ""
    return query.lower().strip()


def tokenize_query(query: str | None) -> list[str]:
    """Split a query into search tokens.

    Normalizes, splits on whitespace runs and drops single-character
    tokens. Order and duplicates are preserved.
    """
    return [token for token in normalize_query(query).split() if len(token) >= MIN_TOKEN_LENGTH]

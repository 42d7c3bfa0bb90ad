"""Single-hop synonym expansion for help search queries."""

from collections.abc import Sequence

from ..domain import SynonymTable


class SynonymExpander:
    """Grows a query's token set with related vocabulary.

    For each query token ``t``:

    1. if ``t`` is a key, every word listed under it is added;
    2. for every entry whose word list contains ``t``, the entry's key and
       its whole word list are added.

    Expanded words are not expanded again.
    """

    def __init__(self, synonyms: SynonymTable) -> None:
        self.synonyms = synonyms

    def expand(self, tokens: Sequence[str]) -> list[str]:
        """Return the deduplicated expansion of ``tokens``.

        Original tokens come first, followed by expansions in discovery
        order. Scores do not depend on the order.
        """
        expanded = dict.fromkeys(tokens)

        for token in tokens:
            if token in self.synonyms:
                expanded.update(dict.fromkeys(self.synonyms[token]))
            for key, words in self.synonyms.items():
                if token in words:
                    expanded[key] = None
                    expanded.update(dict.fromkeys(words))

        return list(expanded)

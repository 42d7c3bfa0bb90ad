"""Immutable in-memory corpus store."""

from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

from .document import HelpArticle, ResponseTemplate
from .exceptions import DuplicateDocumentError

D = TypeVar("D", ResponseTemplate, HelpArticle)


class Corpus(Generic[D]):
    """Ordered, read-only collection of matchable documents.

    Declaration order is preserved; the rankers rely on it to break ties.
    """

    def __init__(self, documents: Iterable[D]) -> None:
        docs = tuple(documents)
        seen: set[str] = set()
        for doc in docs:
            if doc.id in seen:
                raise DuplicateDocumentError(
                    f"Duplicate document id: {doc.id}",
                    context={"id": doc.id},
                )
            seen.add(doc.id)
        self._documents = docs
        self._by_id = {doc.id: doc for doc in docs}

    def __iter__(self) -> Iterator[D]:
        return iter(self._documents)

    def __len__(self) -> int:
        return len(self._documents)

    def __contains__(self, doc_id: object) -> bool:
        return doc_id in self._by_id

    def get(self, doc_id: str) -> D | None:
        return self._by_id.get(doc_id)

    def documents_in_scope(self, scope: str) -> list[D]:
        """Documents whose scope contains ``scope`` or the wildcard tag."""
        return [doc for doc in self._documents if doc.in_scope(scope)]

    def candidates_in_scope(self, scope: str) -> list[D]:
        """In-scope documents eligible for scoring (non-empty keywords)."""
        return [doc for doc in self.documents_in_scope(scope) if not doc.is_catch_all]

    def in_category(self, category: str) -> list[D]:
        return [doc for doc in self._documents if doc.category == category]

    @property
    def catch_alls(self) -> list[D]:
        return [doc for doc in self._documents if doc.is_catch_all]

    @property
    def catch_all(self) -> D | None:
        """The designated fallback document.

        The empty-keyword document with the lowest priority; the first
        declared wins among equals. None when the corpus has no such
        document.
        """
        catch_alls = self.catch_alls
        if not catch_alls:
            return None
        return min(catch_alls, key=lambda doc: doc.priority)

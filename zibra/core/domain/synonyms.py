"""Bidirectional synonym table used by help search."""

from collections.abc import Iterable, Iterator, Mapping


class SynonymTable(Mapping[str, tuple[str, ...]]):
    """Read-only mapping of a canonical word to its related words.

    Keys and words are stored lowercase in declaration order. The relation
    is applied symmetrically by the expander: a word listed under a key
    also pulls in the key and its siblings.
    """

    def __init__(self, entries: Mapping[str, Iterable[str]] | None = None) -> None:
        self._entries: dict[str, tuple[str, ...]] = {
            key.lower(): tuple(word.lower() for word in words)
            for key, words in (entries or {}).items()
        }

    def __getitem__(self, key: str) -> tuple[str, ...]:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"SynonymTable({len(self._entries)} entries)"

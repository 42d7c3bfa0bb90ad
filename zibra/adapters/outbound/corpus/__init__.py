"""Corpus source adapters."""

from .json_corpus_adapter import JsonCorpusAdapter

__all__ = ["JsonCorpusAdapter"]

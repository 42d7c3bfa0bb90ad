"""Ports the core depends on."""

from .corpus_source_port import CorpusSourcePort

__all__ = ["CorpusSourcePort"]

"""Corpus loading and integrity exceptions."""

from .base import ZibraError


class CorpusError(ZibraError):
    """Error while building or loading a corpus."""

    error_code = "ZB_CRP_001"


class CorpusLoadError(CorpusError):
    """Corpus configuration could not be read or parsed."""

    error_code = "ZB_CRP_002"


class DuplicateDocumentError(CorpusError):
    """Two documents in one corpus share an id."""

    error_code = "ZB_CRP_003"


class MissingCatchAllError(CorpusError):
    """Template corpus has no catch-all document."""

    error_code = "ZB_CRP_004"

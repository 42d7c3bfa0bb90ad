"""Exception hierarchy for the ZIBA support engine.

The matching engine itself never raises; these exceptions cover corpus
loading, configuration and request validation at the edges.

    from zibra.core.domain.exceptions import ZibraError, CorpusLoadError
"""

from .base import ExceptionContext, ZibraError
from .configuration import ConfigurationError, InvalidConfigurationError
from .corpus import (
    CorpusError,
    CorpusLoadError,
    DuplicateDocumentError,
    MissingCatchAllError,
)
from .validation import QueryTooLongError, ValidationError

__all__ = [
    # Base
    "ExceptionContext",
    "ZibraError",
    # Configuration
    "ConfigurationError",
    "InvalidConfigurationError",
    # Corpus
    "CorpusError",
    "CorpusLoadError",
    "DuplicateDocumentError",
    "MissingCatchAllError",
    # Validation
    "ValidationError",
    "QueryTooLongError",
]

"""Validation exceptions raised at the request boundary."""

from .base import ZibraError


class ValidationError(ZibraError):
    """Input validation failed."""

    error_code = "ZB_VAL_001"


class QueryTooLongError(ValidationError):
    """Query exceeds maximum allowed length."""

    error_code = "ZB_VAL_002"

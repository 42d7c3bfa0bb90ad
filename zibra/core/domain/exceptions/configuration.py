"""Configuration-related exceptions."""

from .base import ZibraError


class ConfigurationError(ZibraError):
    """Configuration or environment variable errors."""

    error_code = "ZB_CFG_001"


class InvalidConfigurationError(ConfigurationError):
    """Configuration value is invalid."""

    error_code = "ZB_CFG_002"

"""Configuration management for actions-clean."""

from actions_clean.config.exceptions import (
    ConfigurationError,
    InvalidConfigurationError,
    MissingConfigurationError,
)
from actions_clean.config.models import CleanupConfig

__all__ = [
    "CleanupConfig",
    "ConfigurationError",
    "InvalidConfigurationError",
    "MissingConfigurationError",
]

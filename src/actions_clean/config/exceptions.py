"""Exceptions raised while reading the runner configuration."""


class ConfigurationError(Exception):
    """Base exception for configuration errors."""


class MissingConfigurationError(ConfigurationError):
    """A required runner variable is absent, e.g. GITHUB_WORKSPACE."""


class InvalidConfigurationError(ConfigurationError):
    """A runner variable or action input has an unusable value."""

"""Public error types for simpleconfig."""

from __future__ import annotations


class ConfigurationError(Exception):
    """Base class for all simpleconfig errors."""


class SettingsNotFoundError(ConfigurationError, FileNotFoundError):
    """Raised when the settings file is missing and may not be created."""


class SettingsParseError(ConfigurationError, ValueError):
    """Raised when stored settings cannot be decoded into the data type."""


class ConstructionError(ConfigurationError, TypeError):
    """Raised when the data type cannot be default-constructed or serialized."""

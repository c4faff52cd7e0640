"""simpleconfig.

Generic file-backed configuration container: keep one data object in sync
with a JSON settings file and get notified when it is replaced.
"""

from __future__ import annotations

import logging

from .codec import JsonCodec
from .configuration import Configuration
from .errors import (
    ConfigurationError,
    ConstructionError,
    SettingsNotFoundError,
    SettingsParseError,
)
from .events import DataChanged
from .options import ConfigurationOptions, default_settings_path

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Configuration",
    "ConfigurationError",
    "ConfigurationOptions",
    "ConstructionError",
    "DataChanged",
    "JsonCodec",
    "SettingsNotFoundError",
    "SettingsParseError",
    "default_settings_path",
]

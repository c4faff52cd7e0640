"""Options controlling where a configuration is stored."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union


def default_settings_path() -> Path:
    """Return the per-user application-data directory for this platform."""
    if sys.platform == "win32":
        appdata = os.environ.get("APPDATA")
        if appdata:
            return Path(appdata)
        return Path.home() / "AppData" / "Roaming"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support"
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg)
    return Path.home() / ".config"


@dataclass
class ConfigurationOptions:
    """Where and under which name a configuration file lives.

    The file ends up at
    ``{settings_path}/{program_name}/{settings_name}.{settings_extension}``.
    A blank ``settings_name`` is replaced with the data type's name when the
    options are handed to a :class:`~simpleconfig.Configuration`.
    """

    program_name: str = "SC"
    settings_extension: str = "sc"
    settings_name: Optional[str] = None
    settings_path: Union[Path, str] = field(default_factory=default_settings_path)

    def __post_init__(self) -> None:
        self.settings_path = Path(self.settings_path)

"""Shared fixtures: options and a container rooted at ``tmp_path``."""

from __future__ import annotations

from pathlib import Path

import pytest

from simpleconfig import Configuration, ConfigurationOptions

from tests.models import Demo


@pytest.fixture
def options(tmp_path: Path) -> ConfigurationOptions:
    """Options rooted at a temporary directory."""
    return ConfigurationOptions(
        program_name="demoprogram",
        settings_extension="test",
        settings_name="demo",
        settings_path=tmp_path,
    )


@pytest.fixture
def config(options: ConfigurationOptions) -> Configuration[Demo]:
    return Configuration(Demo, options)

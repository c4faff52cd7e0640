"""Filesystem access for a single settings file."""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass
from pathlib import Path

from ._aio import run_blocking
from .errors import SettingsNotFoundError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SettingsStorage:
    """Read, write and remove one settings file and its directory.

    Writes replace the whole file in place; they are not atomic.
    """

    directory: Path
    path: Path

    def exists(self) -> bool:
        return self.path.is_file()

    def directory_exists(self) -> bool:
        return self.directory.is_dir()

    def read_bytes(self) -> bytes:
        try:
            return self.path.read_bytes()
        except FileNotFoundError as exc:
            raise SettingsNotFoundError(
                f"Settings file does not exist: {self.path}"
            ) from exc

    def write_text(self, text: str) -> None:
        self.path.write_text(text, encoding="utf-8")
        logger.debug("Wrote settings to %s", self.path)

    def ensure_directory(self) -> None:
        if not self.directory_exists():
            self.directory.mkdir(parents=True, exist_ok=True)
            logger.debug("Created settings directory %s", self.directory)

    def delete_file(self) -> None:
        if self.exists():
            self.path.unlink()
            logger.debug("Deleted settings file %s", self.path)

    def delete_directory(self) -> None:
        if self.directory_exists():
            shutil.rmtree(self.directory)
            logger.debug("Deleted settings directory %s", self.directory)

    # ------------------------------------------------------------------ #
    # Async variants
    # ------------------------------------------------------------------ #

    async def exists_async(self) -> bool:
        return await run_blocking(self.exists)

    async def read_bytes_async(self) -> bytes:
        return await run_blocking(self.read_bytes)

    async def write_text_async(self, text: str) -> None:
        await run_blocking(self.write_text, text)

    async def ensure_directory_async(self) -> None:
        await run_blocking(self.ensure_directory)

"""Unit tests for SettingsStorage."""

from __future__ import annotations

import asyncio
from pathlib import Path

import pytest

from simpleconfig import SettingsNotFoundError
from simpleconfig.storage import SettingsStorage


def _storage(tmp_path: Path) -> SettingsStorage:
    directory = tmp_path / "prog"
    return SettingsStorage(directory=directory, path=directory / "settings.sc")


class TestSettingsStorage:
    def test_read_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(SettingsNotFoundError):
            _storage(tmp_path).read_bytes()

    def test_write_requires_directory(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            _storage(tmp_path).write_text("{}")

    def test_ensure_directory_then_write_and_read(self, tmp_path: Path) -> None:
        storage = _storage(tmp_path)
        storage.ensure_directory()
        storage.write_text('{"a": 1}')

        assert storage.exists()
        assert storage.read_bytes() == b'{"a": 1}'

    def test_write_overwrites_whole_file(self, tmp_path: Path) -> None:
        storage = _storage(tmp_path)
        storage.ensure_directory()
        storage.write_text("a much longer first payload")
        storage.write_text("short")

        assert storage.path.read_text(encoding="utf-8") == "short"

    def test_ensure_directory_creates_parents(self, tmp_path: Path) -> None:
        directory = tmp_path / "a" / "b" / "c"
        storage = SettingsStorage(directory=directory, path=directory / "x.sc")
        storage.ensure_directory()
        storage.ensure_directory()

        assert directory.is_dir()

    def test_delete_file_and_directory(self, tmp_path: Path) -> None:
        storage = _storage(tmp_path)
        storage.ensure_directory()
        storage.write_text("{}")
        (storage.directory / "other.txt").write_text("x", encoding="utf-8")

        storage.delete_file()
        assert not storage.exists()
        assert storage.directory_exists()

        storage.delete_directory()
        assert not storage.directory_exists()

    def test_deleting_missing_targets_is_a_no_op(self, tmp_path: Path) -> None:
        storage = _storage(tmp_path)
        storage.delete_file()
        storage.delete_directory()

        assert not storage.directory_exists()

    def test_async_variants(self, tmp_path: Path) -> None:
        storage = _storage(tmp_path)

        async def scenario() -> bytes:
            assert not await storage.exists_async()
            await storage.ensure_directory_async()
            await storage.write_text_async("{}")
            assert await storage.exists_async()
            return await storage.read_bytes_async()

        assert asyncio.run(scenario()) == b"{}"

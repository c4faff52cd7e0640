"""File-backed configuration container."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Generic, Optional, Type, TypeVar, Union

from pydantic import ValidationError

from .codec import JsonCodec
from .errors import ConstructionError
from .events import DataChanged
from .options import ConfigurationOptions
from .storage import SettingsStorage

logger = logging.getLogger(__name__)

T = TypeVar("T")

Mutator = Callable[[T], None]


class Configuration(Generic[T]):
    """Keep one instance of ``data_type`` in sync with a settings file.

    Public API (every method except the queries returns ``self`` so calls
    can be chained):

    * :meth:`save_exists`
    * :meth:`load` / :meth:`load_async`
    * :meth:`save` / :meth:`save_async`
    * :meth:`set`
    * :meth:`update` / :meth:`update_async`
    * :meth:`delete`
    * :meth:`to_string` / :meth:`to_string_async`

    :attr:`on_data_changed` fires with ``(data_before, data_after)`` right
    before :attr:`data` is replaced. Changing attributes of :attr:`data`
    directly does not fire it; use :meth:`update` for that.
    """

    def __init__(
        self,
        data_type: Type[T],
        options: Optional[ConfigurationOptions] = None,
    ) -> None:
        self._data_type = data_type
        self._options = options if options is not None else ConfigurationOptions()
        if not (self._options.settings_name or "").strip():
            self._options.settings_name = data_type.__name__

        settings_path = Path(self._options.settings_path)
        self._local_path = settings_path / self._options.program_name
        self._local_file_path = self._local_path / (
            f"{self._options.settings_name}.{self._options.settings_extension}"
        )
        self._storage = SettingsStorage(
            directory=self._local_path, path=self._local_file_path
        )
        self._codec: JsonCodec[T] = JsonCodec(data_type)
        self.on_data_changed: DataChanged[T] = DataChanged()
        self._data: T = self._new_data()
        logger.debug(
            "Configuration for %s stored at %s",
            data_type.__name__,
            self._local_file_path,
        )

    # ------------------------------------------------------------------ #
    # Properties
    # ------------------------------------------------------------------ #

    @property
    def options(self) -> ConfigurationOptions:
        return self._options

    @property
    def local_path(self) -> Path:
        """Directory holding the settings file."""
        return self._local_path

    @property
    def local_file_path(self) -> Path:
        return self._local_file_path

    @property
    def data(self) -> T:
        """The live configuration object.

        This is the stored instance itself, not a copy.
        """
        return self._data

    # ------------------------------------------------------------------ #
    # Internal helpers
    # ------------------------------------------------------------------ #

    def _new_data(self) -> T:
        try:
            return self._data_type()
        except (TypeError, ValidationError) as exc:
            raise ConstructionError(
                f"{self._data_type.__name__} cannot be constructed without arguments"
            ) from exc

    def _is_data(self, value: object) -> bool:
        # TypedDict and similar types reject instance checks.
        if not isinstance(self._data_type, type):
            return False
        try:
            return isinstance(value, self._data_type)
        except TypeError:
            return False

    def _replace(self, value: T) -> None:
        self.on_data_changed(self._data, value)
        self._data = value

    # ------------------------------------------------------------------ #
    # Queries
    # ------------------------------------------------------------------ #

    def save_exists(self) -> bool:
        """Return True if a settings file is present on disk."""
        return self._storage.exists()

    def save_exists_chainable(
        self, callback: Callable[[bool], None]
    ) -> "Configuration[T]":
        """Chainable :meth:`save_exists`; the result is passed to ``callback``."""
        callback(self._storage.exists())
        return self

    def to_string(self) -> str:
        """Return :attr:`data` encoded as JSON."""
        return self._codec.encode(self._data)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self._data_type.__name__}, "
            f"path={str(self._local_file_path)!r})"
        )

    # ------------------------------------------------------------------ #
    # Core operations
    # ------------------------------------------------------------------ #

    def load(
        self,
        overwrite: Optional[T] = None,
        create_if_null: bool = False,
    ) -> "Configuration[T]":
        """Replace :attr:`data` with the contents of the settings file.

        If the file is missing and ``create_if_null`` is set, ``overwrite``
        (or a fresh default instance) is written to disk and used instead.
        Otherwise a missing file raises :class:`SettingsNotFoundError`.
        """
        if create_if_null and not self._storage.exists():
            new_data = overwrite if overwrite is not None else self._new_data()
            self._storage.ensure_directory()
            self._storage.write_text(self._codec.encode(new_data))
            logger.debug("Created settings file %s", self._local_file_path)
            self._replace(new_data)
        else:
            loaded = self._codec.decode(self._storage.read_bytes())
            logger.debug("Loaded settings from %s", self._local_file_path)
            self._replace(loaded)
        return self

    def save(self) -> "Configuration[T]":
        """Write :attr:`data` to the settings file, creating its directory."""
        self._storage.ensure_directory()
        self._storage.write_text(self._codec.encode(self._data))
        return self

    def set(self, value: Union[T, Mutator[T]]) -> "Configuration[T]":
        """Replace :attr:`data` with ``value``.

        A callable that is not itself an instance of the data type is
        treated as a mutator and forwarded to :meth:`update`.
        """
        if callable(value) and not self._is_data(value):
            return self.update(value)
        self._replace(value)
        return self

    def update(self, mutator: Mutator[T], optimize: bool = False) -> "Configuration[T]":
        """Apply ``mutator`` to a copy of :attr:`data` and store the result.

        With ``optimize`` the live instance is mutated instead of a copy, so
        ``data_before`` and ``data_after`` in the notification are the same
        object.
        """
        working = self._data if optimize else self._codec.clone(self._data)
        mutator(working)
        self._replace(working)
        return self

    def delete(self, only_settings: bool = False) -> "Configuration[T]":
        """Remove the settings file and, unless ``only_settings``, its directory."""
        self._storage.delete_file()
        if not only_settings:
            self._storage.delete_directory()
        return self

    # ------------------------------------------------------------------ #
    # Async variants
    # ------------------------------------------------------------------ #

    async def load_async(
        self,
        overwrite: Optional[T] = None,
        create_if_null: bool = False,
    ) -> "Configuration[T]":
        if create_if_null and not await self._storage.exists_async():
            new_data = overwrite if overwrite is not None else self._new_data()
            await self._storage.ensure_directory_async()
            text = await self._codec.encode_async(new_data)
            await self._storage.write_text_async(text)
            logger.debug("Created settings file %s", self._local_file_path)
            self._replace(new_data)
        else:
            raw = await self._storage.read_bytes_async()
            loaded = await self._codec.decode_async(raw)
            logger.debug("Loaded settings from %s", self._local_file_path)
            self._replace(loaded)
        return self

    async def save_async(self) -> "Configuration[T]":
        await self._storage.ensure_directory_async()
        text = await self._codec.encode_async(self._data)
        await self._storage.write_text_async(text)
        return self

    async def update_async(
        self,
        mutator: Mutator[T],
        optimize: bool = False,
    ) -> "Configuration[T]":
        if optimize:
            working = self._data
        else:
            working = await self._codec.clone_async(self._data)
        mutator(working)
        self._replace(working)
        return self

    async def to_string_async(self) -> str:
        return await self._codec.encode_async(self._data)

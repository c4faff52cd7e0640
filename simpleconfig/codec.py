"""JSON encoding of configuration data.

Any type pydantic can validate works as configuration data: ``BaseModel``
subclasses, dataclasses and so on. The encoded text is a plain JSON object
mirroring the type's fields, with no header or version stamp.
"""

from __future__ import annotations

from typing import Generic, Type, TypeVar, Union

from pydantic import PydanticUserError, TypeAdapter, ValidationError

from ._aio import run_blocking
from .errors import ConstructionError, SettingsParseError

T = TypeVar("T")


class JsonCodec(Generic[T]):
    """Encode/decode values of one data type to and from JSON text."""

    def __init__(self, data_type: Type[T]) -> None:
        self.data_type = data_type
        try:
            self._adapter: TypeAdapter[T] = TypeAdapter(data_type)
        except PydanticUserError as exc:
            raise ConstructionError(
                f"{data_type.__name__} cannot be serialized as JSON"
            ) from exc

    def encode(self, value: T) -> str:
        return self._adapter.dump_json(value).decode("utf-8")

    def decode(self, raw: Union[str, bytes]) -> T:
        try:
            return self._adapter.validate_json(raw)
        except ValidationError as exc:
            raise SettingsParseError(
                f"Stored settings are not a valid {self.data_type.__name__}: {exc}"
            ) from exc

    def clone(self, value: T) -> T:
        """Deep copy ``value`` through an encode/decode round trip."""
        return self.decode(self.encode(value))

    async def encode_async(self, value: T) -> str:
        return await run_blocking(self.encode, value)

    async def decode_async(self, raw: Union[str, bytes]) -> T:
        return await run_blocking(self.decode, raw)

    async def clone_async(self, value: T) -> T:
        return await self.decode_async(await self.encode_async(value))

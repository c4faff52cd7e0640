"""Change notification for configuration data."""

from __future__ import annotations

from typing import Callable, Generic, List, TypeVar

T = TypeVar("T")

DataChangedHandler = Callable[[T, T], None]


class DataChanged(Generic[T]):
    """Ordered list of ``(data_before, data_after)`` callbacks.

    Handlers run synchronously in registration order. An exception raised by
    a handler propagates to whoever triggered the notification and the
    remaining handlers are skipped.
    """

    def __init__(self) -> None:
        self._handlers: List[DataChangedHandler[T]] = []

    def add(self, handler: DataChangedHandler[T]) -> DataChangedHandler[T]:
        self._handlers.append(handler)
        return handler

    def remove(self, handler: DataChangedHandler[T]) -> None:
        try:
            self._handlers.remove(handler)
        except ValueError:
            raise ValueError("handler is not registered") from None

    def __iadd__(self, handler: DataChangedHandler[T]) -> "DataChanged[T]":
        self.add(handler)
        return self

    def __isub__(self, handler: DataChangedHandler[T]) -> "DataChanged[T]":
        self.remove(handler)
        return self

    def __len__(self) -> int:
        return len(self._handlers)

    def __call__(self, data_before: T, data_after: T) -> None:
        # Snapshot so handlers may unsubscribe themselves.
        for handler in list(self._handlers):
            handler(data_before, data_after)

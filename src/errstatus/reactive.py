"""Observable error cell and lazily recomputed derived values."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any, Generic, TypeVar

from errstatus.errors.boundary import to_error_value
from errstatus.errors.classify import classify
from errstatus.errors.types import CustomHandler, ErrorValue, NoError, TranslateFn

T = TypeVar("T")

Listener = Callable[[], None]


class _Observable:
    """Subscriber bookkeeping shared by cells and derived values."""

    def __init__(self) -> None:
        self._listeners: list[Listener] = []

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener`` on every change. Returns an unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener()


class ErrorCell(_Observable):
    """Mutable holder for the current error of an operation."""

    def __init__(self, value: ErrorValue | None = None) -> None:
        super().__init__()
        self._value: ErrorValue = value if value is not None else NoError()

    @property
    def value(self) -> ErrorValue:
        return self._value

    @value.setter
    def value(self, value: ErrorValue) -> None:
        if value == self._value:
            return
        self._value = value
        self._notify()

    def set_raw(self, raw: Any) -> None:
        """Store a raw string, exception or None."""
        self.value = to_error_value(raw)

    def clear(self) -> None:
        self.value = NoError()


class DerivedValue(_Observable, Generic[T]):
    """Caches ``compute()`` until one of its sources changes.

    A change marks the value dirty and notifies subscribers; the next read
    recomputes it.
    """

    def __init__(
        self,
        compute: Callable[[], T],
        sources: Iterable[_Observable] = (),
    ) -> None:
        super().__init__()
        self._compute = compute
        self._cached: T | None = None
        self._dirty = True
        self._unsubscribers = [source.subscribe(self.invalidate) for source in sources]

    @property
    def dirty(self) -> bool:
        return self._dirty

    @property
    def value(self) -> T:
        if self._dirty:
            self._cached = self._compute()
            self._dirty = False
        return self._cached

    def invalidate(self) -> None:
        """Mark the cached value stale and notify subscribers."""
        self._dirty = True
        self._notify()

    def close(self) -> None:
        """Stop listening to sources."""
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers = []


def error_status(
    cell: ErrorCell | None,
    translate: TranslateFn | None,
    custom_handler: CustomHandler | None = None,
    *,
    logger: logging.Logger | None = None,
) -> DerivedValue[str]:
    """Derive the status message for ``cell``, recomputed when it changes.

    A missing cell yields the missing-parameters message. The cell keeps
    the derived value subscribed until ``close()`` is called on it, so call
    ``close()`` when the message is no longer needed.
    """

    def compute() -> str:
        error = cell.value if cell is not None else None
        return classify(error, translate, custom_handler, logger=logger)

    return DerivedValue(compute, [cell] if cell is not None else [])

"""Turn raw errors from application code into error values.

This is the only place that inspects the runtime type of an error. Callers
that catch exceptions from network code convert them here before storing
them in an ``ErrorCell``.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any, TypeVar

import httpx

from errstatus.errors.types import (
    ErrorValue,
    ExceptionError,
    NoError,
    TextError,
    UnrecognizedError,
)

if TYPE_CHECKING:
    from errstatus.reactive import ErrorCell

T = TypeVar("T")

logger = logging.getLogger("errstatus.boundary")

_ERROR_VALUE_TYPES = (NoError, TextError, ExceptionError, UnrecognizedError)


def _exception_message(exc: BaseException) -> str:
    if isinstance(exc, asyncio.CancelledError):
        return "Request aborted"
    if isinstance(exc, httpx.HTTPStatusError):
        return f"Request failed with status code {exc.response.status_code}"
    return str(exc)


def to_error_value(raw: Any) -> ErrorValue:
    """Convert a raw error into an ErrorValue.

    Args:
        raw: None, a string, an exception, or an existing ErrorValue

    Returns:
        The matching ErrorValue variant; anything else is UnrecognizedError
    """
    if raw is None:
        return NoError()
    if isinstance(raw, _ERROR_VALUE_TYPES):
        return raw
    if isinstance(raw, str):
        return TextError(raw)
    if isinstance(raw, BaseException):
        return ExceptionError(message=_exception_message(raw), exception=raw)
    return UnrecognizedError(raw)


@contextmanager
def capture_error(cell: ErrorCell) -> Iterator[ErrorCell]:
    """Record any exception raised in the block into ``cell``.

    The cell is cleared on entry. Exceptions are stored and suppressed.
    """
    cell.clear()
    try:
        yield cell
    except Exception as e:
        logger.debug("Captured %s: %s", type(e).__name__, e)
        cell.value = to_error_value(e)


async def track_errors(cell: ErrorCell, awaitable: Awaitable[T]) -> T | None:
    """Await an operation and mirror its outcome into ``cell``.

    Success clears the cell. Failures are recorded and the result is None.
    Cancellation is recorded as an aborted request and then re-raised.
    """
    try:
        result = await awaitable
    except asyncio.CancelledError as e:
        cell.value = to_error_value(e)
        raise
    except Exception as e:
        logger.debug("Operation failed with %s: %s", type(e).__name__, e)
        cell.value = to_error_value(e)
        return None
    cell.clear()
    return result

"""Classify an error value into a single localized status message."""

from __future__ import annotations

import logging

from errstatus.errors.rules import match_status_rule
from errstatus.errors.types import (
    Classification,
    CustomHandler,
    ErrorKind,
    ErrorValue,
    ExceptionError,
    MissingTranslatorError,
    NoError,
    StatusKey,
    TextError,
    TranslateFn,
    UnrecognizedError,
)

_logger = logging.getLogger("errstatus.classify")


def _resolve(
    error: ErrorValue,
    custom_handler: CustomHandler | None,
) -> Classification:
    """Pick a status key, or a handler message, for a present error value."""
    if isinstance(error, NoError):
        return Classification(kind=ErrorKind.NO_ERROR, message=None, key=StatusKey.DEFAULT)

    if isinstance(error, (TextError, ExceptionError)):
        rule = match_status_rule(error.comparison_text)
        if rule is not None:
            return Classification(
                kind=ErrorKind.CLASSIFIED_BY_RULE,
                message=None,
                key=rule.key,
                rule=rule.substring,
            )

        if custom_handler is not None:
            custom_message = custom_handler(error.payload)
            if isinstance(custom_message, str) and custom_message:
                return Classification(
                    kind=ErrorKind.CLASSIFIED_BY_CUSTOM_HANDLER,
                    message=custom_message,
                )

        return Classification(
            kind=ErrorKind.DEFAULT_UNCLASSIFIED, message=None, key=StatusKey.DEFAULT
        )

    if isinstance(error, UnrecognizedError):
        return Classification(
            kind=ErrorKind.UNRECOGNIZED_SHAPE, message=None, key=StatusKey.DEFAULT
        )

    raise TypeError(f"Not an error value: {type(error).__name__}")


def explain(
    error: ErrorValue | None,
    translate: TranslateFn | None,
    custom_handler: CustomHandler | None = None,
    *,
    logger: logging.Logger | None = None,
) -> Classification:
    """Classify an error and report how the message was chosen.

    Args:
        error: Current error value, or None when the error cell is missing
        translate: Maps a status key to a display string
        custom_handler: Consulted only when no built-in rule matches
        logger: Diagnostics sink, defaults to the ``errstatus.classify`` logger

    Returns:
        Classification carrying the translated (or handler) message

    Raises:
        MissingTranslatorError: If ``translate`` is None
    """
    log = logger or _logger

    if error is None or translate is None:
        log.warning("errorStatus: Missing required parameters.")
        if translate is None:
            raise MissingTranslatorError("errorStatus: translate function is required")
        return Classification(
            kind=ErrorKind.MISSING_PARAMETERS,
            message=translate(StatusKey.MISSING_PARAMETERS.value),
            key=StatusKey.MISSING_PARAMETERS,
        )

    try:
        result = _resolve(error, custom_handler)
    except Exception as e:
        log.error("Error in errorStatus function: %s", e)
        result = Classification(
            kind=ErrorKind.UNEXPECTED_FAULT, message=None, key=StatusKey.UNEXPECTED
        )

    if result.key is None:
        return result
    # translate faults are the caller's to handle
    return Classification(
        kind=result.kind,
        message=translate(result.key.value),
        key=result.key,
        rule=result.rule,
    )


def classify(
    error: ErrorValue | None,
    translate: TranslateFn | None,
    custom_handler: CustomHandler | None = None,
    *,
    logger: logging.Logger | None = None,
) -> str:
    """Return the localized status message for an error value."""
    return explain(error, translate, custom_handler, logger=logger).message

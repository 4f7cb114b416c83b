"""Error classification for errstatus."""

from errstatus.errors.boundary import capture_error, to_error_value, track_errors
from errstatus.errors.classify import classify, explain
from errstatus.errors.messages import (
    DEFAULT_LOCALE,
    MESSAGE_CATALOGS,
    available_locales,
    catalog_translator,
)
from errstatus.errors.rules import (
    RETIRED_SUBSTRINGS,
    STATUS_RULES,
    StatusRule,
    match_status_rule,
)
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

__all__ = [
    # Core types
    "ErrorValue",
    "NoError",
    "TextError",
    "ExceptionError",
    "UnrecognizedError",
    "StatusKey",
    "ErrorKind",
    "Classification",
    "MissingTranslatorError",
    "TranslateFn",
    "CustomHandler",
    # Classification
    "classify",
    "explain",
    "StatusRule",
    "STATUS_RULES",
    "RETIRED_SUBSTRINGS",
    "match_status_rule",
    # Boundary
    "to_error_value",
    "capture_error",
    "track_errors",
    # Messages
    "DEFAULT_LOCALE",
    "MESSAGE_CATALOGS",
    "available_locales",
    "catalog_translator",
]

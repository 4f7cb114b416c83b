"""Error values, status keys and classification results."""

from __future__ import annotations

from enum import StrEnum
from typing import Any, Callable

import msgspec


class StatusKey(StrEnum):
    """Translation keys for every status message the classifier emits."""

    ABORT_ERROR = "errStatus.abortError"
    INVALID_NONCE = "errStatus.invalidNonce"
    BAD_REQUEST = "errStatus.400"
    UNAUTHORIZED = "errStatus.401"
    FORBIDDEN = "errStatus.403"
    NOT_FOUND = "errStatus.404"
    TOO_MANY_REQUESTS = "errStatus.429"
    INTERNAL_SERVER_ERROR = "errStatus.500"
    BAD_GATEWAY = "errStatus.502"
    SERVICE_UNAVAILABLE = "errStatus.503"
    GATEWAY_TIMEOUT = "errStatus.504"
    DEFAULT = "errStatus.defaultStatusError"
    MISSING_PARAMETERS = "errStatus.missingParameters"
    UNEXPECTED = "errStatus.unexpectedError"


class ErrorKind(StrEnum):
    """How a classification was reached."""

    MISSING_PARAMETERS = "missing_parameters"
    NO_ERROR = "no_error"
    UNRECOGNIZED_SHAPE = "unrecognized_shape"
    CLASSIFIED_BY_RULE = "classified_by_rule"
    CLASSIFIED_BY_CUSTOM_HANDLER = "classified_by_custom_handler"
    DEFAULT_UNCLASSIFIED = "default_unclassified"
    UNEXPECTED_FAULT = "unexpected_fault"


class MissingTranslatorError(ValueError):
    """Raised when classification is requested without a translate function."""


class NoError(msgspec.Struct, frozen=True, tag="none"):
    """The error cell holds no error."""

    @property
    def payload(self) -> None:
        return None

    @property
    def comparison_text(self) -> str | None:
        return None


class TextError(msgspec.Struct, frozen=True, tag="text"):
    """A plain string error."""

    text: str

    @property
    def payload(self) -> str:
        return self.text

    @property
    def comparison_text(self) -> str | None:
        return self.text


class ExceptionError(msgspec.Struct, frozen=True, tag="exception"):
    """An exception-like error, matched on its message."""

    message: str
    exception: BaseException | None = None

    @property
    def payload(self) -> BaseException | str:
        # Handlers expect the exception object when there is one
        return self.exception if self.exception is not None else self.message

    @property
    def comparison_text(self) -> str | None:
        return self.message


class UnrecognizedError(msgspec.Struct, frozen=True, tag="unrecognized"):
    """A raw error value that is neither a string nor an exception."""

    value: Any = None

    @property
    def payload(self) -> Any:
        return self.value

    @property
    def comparison_text(self) -> str | None:
        return None


ErrorValue = NoError | TextError | ExceptionError | UnrecognizedError

TranslateFn = Callable[[str], str]
CustomHandler = Callable[[Any], "str | None"]


class Classification(msgspec.Struct, frozen=True):
    """Outcome of classifying one error value."""

    kind: ErrorKind
    message: str | None
    key: StatusKey | None = None
    rule: str | None = None

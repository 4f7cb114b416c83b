"""Ordered substring rules mapping error text to status keys."""

from __future__ import annotations

import msgspec

from errstatus.errors.types import StatusKey


class StatusRule(msgspec.Struct, frozen=True):
    """Error text containing ``substring`` maps to ``key``."""

    substring: str
    key: StatusKey

    def matches(self, text: str) -> bool:
        return self.substring in text


# Priority order matters: the first rule whose substring appears wins.
STATUS_RULES: tuple[StatusRule, ...] = (
    StatusRule("aborted", StatusKey.ABORT_ERROR),
    StatusRule("invalidNonce", StatusKey.INVALID_NONCE),
    StatusRule("400", StatusKey.BAD_REQUEST),
    StatusRule("401", StatusKey.UNAUTHORIZED),
    StatusRule("403", StatusKey.FORBIDDEN),
    StatusRule("404", StatusKey.NOT_FOUND),
    StatusRule("429", StatusKey.TOO_MANY_REQUESTS),
    StatusRule("500", StatusKey.INTERNAL_SERVER_ERROR),
    StatusRule("502", StatusKey.BAD_GATEWAY),
    StatusRule("503", StatusKey.SERVICE_UNAVAILABLE),
    StatusRule("504", StatusKey.GATEWAY_TIMEOUT),
)

# No longer matched. Do not add these back to STATUS_RULES without a
# product decision; connection failures now fall through to the default.
RETIRED_SUBSTRINGS: frozenset[str] = frozenset(
    {"ETIMEDOUT", "ECONNREFUSED", "EREQERROR", "ECONNABORTED", "ENOTFOUND", "NORESPONSE"}
)


def match_status_rule(
    text: str,
    rules: tuple[StatusRule, ...] = STATUS_RULES,
) -> StatusRule | None:
    """Return the first rule whose substring occurs in ``text``.

    Matching is case-sensitive.
    """
    for rule in rules:
        if rule.matches(text):
            return rule
    return None

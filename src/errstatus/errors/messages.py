"""Built-in status message catalogs."""

from __future__ import annotations

from collections.abc import Mapping

from errstatus.errors.types import StatusKey, TranslateFn

DEFAULT_LOCALE = "en"

MESSAGE_CATALOGS: dict[str, dict[str, str]] = {
    "en": {
        StatusKey.ABORT_ERROR: "The request was aborted.",
        StatusKey.INVALID_NONCE: "Your session is out of sync. Please sign in again.",
        StatusKey.BAD_REQUEST: "The request was invalid.",
        StatusKey.UNAUTHORIZED: "You need to sign in to do this.",
        StatusKey.FORBIDDEN: "You do not have permission to do this.",
        StatusKey.NOT_FOUND: "The requested resource was not found.",
        StatusKey.TOO_MANY_REQUESTS: "Too many requests. Please wait a moment and try again.",
        StatusKey.INTERNAL_SERVER_ERROR: "The server ran into a problem. Please try again later.",
        StatusKey.BAD_GATEWAY: "The server received an invalid response. Please try again later.",
        StatusKey.SERVICE_UNAVAILABLE: "The service is temporarily unavailable.",
        StatusKey.GATEWAY_TIMEOUT: "The server took too long to respond.",
        StatusKey.DEFAULT: "Something went wrong.",
        StatusKey.MISSING_PARAMETERS: "The error status could not be determined.",
        StatusKey.UNEXPECTED: "An unexpected error occurred.",
    },
    "de": {
        StatusKey.ABORT_ERROR: "Die Anfrage wurde abgebrochen.",
        StatusKey.INVALID_NONCE: "Deine Sitzung ist nicht mehr gültig. Bitte melde dich erneut an.",
        StatusKey.BAD_REQUEST: "Die Anfrage war ungültig.",
        StatusKey.UNAUTHORIZED: "Du musst angemeldet sein, um das zu tun.",
        StatusKey.FORBIDDEN: "Du hast keine Berechtigung dafür.",
        StatusKey.NOT_FOUND: "Die angeforderte Ressource wurde nicht gefunden.",
        StatusKey.TOO_MANY_REQUESTS: "Zu viele Anfragen. Bitte versuche es gleich noch einmal.",
        StatusKey.INTERNAL_SERVER_ERROR: "Auf dem Server ist ein Fehler aufgetreten.",
        StatusKey.BAD_GATEWAY: "Der Server hat eine ungültige Antwort erhalten.",
        StatusKey.SERVICE_UNAVAILABLE: "Der Dienst ist vorübergehend nicht erreichbar.",
        StatusKey.GATEWAY_TIMEOUT: "Der Server hat zu lange nicht geantwortet.",
        StatusKey.DEFAULT: "Etwas ist schiefgelaufen.",
        StatusKey.MISSING_PARAMETERS: "Der Fehlerstatus konnte nicht ermittelt werden.",
        StatusKey.UNEXPECTED: "Ein unerwarteter Fehler ist aufgetreten.",
    },
}


def available_locales() -> list[str]:
    """List locales with a built-in catalog."""
    return sorted(MESSAGE_CATALOGS)


def catalog_translator(
    locale: str = DEFAULT_LOCALE,
    overrides: Mapping[str, str] | None = None,
) -> TranslateFn:
    """Build a translate function backed by the built-in catalogs.

    Args:
        locale: Catalog to use; unknown locales fall back to English
        overrides: Per-key messages that take precedence over the catalog

    Returns:
        Function mapping a status key to its message. Unknown keys are
        returned unchanged.
    """
    catalog = dict(MESSAGE_CATALOGS.get(locale, MESSAGE_CATALOGS[DEFAULT_LOCALE]))
    if overrides:
        catalog.update(overrides)

    def translate(key: str) -> str:
        return catalog.get(key, key)

    return translate

"""errstatus: Localized status messages for failed requests."""

from __future__ import annotations

__version__ = "0.1.0"

from errstatus.errors import ErrorValue
from errstatus.errors import ExceptionError
from errstatus.errors import MissingTranslatorError
from errstatus.errors import NoError
from errstatus.errors import StatusKey
from errstatus.errors import TextError
from errstatus.errors import UnrecognizedError
from errstatus.errors import catalog_translator
from errstatus.errors import classify
from errstatus.errors import explain
from errstatus.errors import to_error_value
from errstatus.reactive import DerivedValue
from errstatus.reactive import ErrorCell
from errstatus.reactive import error_status

__all__ = [
    "__version__",
    "ErrorValue",
    "NoError",
    "TextError",
    "ExceptionError",
    "UnrecognizedError",
    "StatusKey",
    "MissingTranslatorError",
    "classify",
    "explain",
    "to_error_value",
    "catalog_translator",
    "ErrorCell",
    "DerivedValue",
    "error_status",
]


def main() -> None:
    """Entry point for the errstatus CLI."""
    from errstatus.cli.app import run_app

    run_app()

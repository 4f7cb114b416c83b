"""Tests for errors/types.py (error values and status keys)."""

from __future__ import annotations

import msgspec
import pytest

from errstatus.errors.types import (
    ErrorKind,
    ExceptionError,
    NoError,
    StatusKey,
    TextError,
    UnrecognizedError,
)


class TestErrorValues:
    """Tests for the ErrorValue variants."""

    def test_no_error(self):
        """NoError has no payload or comparison text."""
        assert NoError().payload is None
        assert NoError().comparison_text is None

    def test_text_error(self):
        """TextError compares and hands over its text."""
        error = TextError("boom 404")

        assert error.payload == "boom 404"
        assert error.comparison_text == "boom 404"

    def test_exception_error_payload(self):
        """ExceptionError hands over the exception when present."""
        exc = OSError("disk")
        error = ExceptionError(message="disk", exception=exc)

        assert error.payload is exc
        assert error.comparison_text == "disk"

    def test_unrecognized_error(self):
        """UnrecognizedError has no comparison text."""
        error = UnrecognizedError([1, 2])

        assert error.payload == [1, 2]
        assert error.comparison_text is None

    def test_immutability(self):
        """Error values are immutable."""
        error = TextError("x")
        with pytest.raises(AttributeError):
            error.text = "y"

    def test_tagged_json(self):
        """Variants encode with a type tag."""
        assert msgspec.json.decode(msgspec.json.encode(TextError("404"))) == {
            "type": "text",
            "text": "404",
        }
        assert msgspec.json.decode(msgspec.json.encode(NoError())) == {"type": "none"}


class TestStatusKey:
    """Tests for StatusKey enum."""

    def test_values(self):
        """Keys use the errStatus namespace."""
        for key in StatusKey:
            assert key.value.startswith("errStatus.")

    def test_count(self):
        """Eleven rule keys plus three fallbacks."""
        assert len(StatusKey) == 14

    def test_is_str(self):
        """Keys compare equal to their string values."""
        assert StatusKey.NOT_FOUND == "errStatus.404"


class TestErrorKind:
    """Tests for ErrorKind enum."""

    def test_values(self):
        """ErrorKind covers each classification outcome."""
        assert {kind.value for kind in ErrorKind} == {
            "missing_parameters",
            "no_error",
            "unrecognized_shape",
            "classified_by_rule",
            "classified_by_custom_handler",
            "default_unclassified",
            "unexpected_fault",
        }

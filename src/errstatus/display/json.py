"""JSON output utilities for errstatus."""

from __future__ import annotations

import json
import sys

import msgspec

from errstatus.errors.types import Classification

__all__ = [
    "ClassificationData",
    "from_classification",
    "output_json_pretty",
]


class ClassificationData(msgspec.Struct, frozen=True):
    """Classification result as emitted by ``errstatus classify --json``."""

    kind: str
    message: str | None
    key: str | None = None
    rule: str | None = None


def from_classification(result: Classification) -> ClassificationData:
    """Convert a Classification into its JSON output shape."""
    return ClassificationData(
        kind=result.kind.value,
        message=result.message,
        key=result.key.value if result.key is not None else None,
        rule=result.rule,
    )


def output_json_pretty(data: object, indent: int = 2) -> None:
    """Output data as pretty-printed JSON to stdout.

    Args:
        data: Any msgspec-serializable object
        indent: Number of spaces for indentation
    """
    python_obj = msgspec.to_builtins(data)
    sys.stdout.write(json.dumps(python_obj, indent=indent, ensure_ascii=False))
    sys.stdout.write("\n")

"""CLI for errstatus."""

from errstatus.cli.app import app, run_app

__all__ = ["app", "run_app"]

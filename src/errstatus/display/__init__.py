"""Output formatting for errstatus."""

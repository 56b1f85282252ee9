"""Shared utilities."""

from __future__ import annotations


def split_csv(text: str) -> list[str]:
    """Split comma-separated user input, dropping blanks."""
    return [part.strip() for part in text.split(",") if part.strip()]


def fmt_seconds(seconds: float) -> str:
    """Format an elapsed duration the way the summary prints it."""
    return f"{seconds:.2f}s"

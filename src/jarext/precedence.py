"""Ordered-fallback helpers shared by record resolution."""

from typing import TypeVar

T = TypeVar("T")


def first_non_empty(*values: T | None) -> T | None:
    """Return the first value that is neither ``None`` nor empty."""
    for value in values:
        if value:
            return value
    return None


def first_non_empty_str(*values: str | None) -> str:
    """Return the first non-empty string, or ``""`` when all are empty."""
    return first_non_empty(*values) or ""

"""Deduplication module."""

from .duplicate_finder import (
    DuplicateFinder,
    find_duplicates,
    name_size_fingerprint,
    FINGERPRINT_SEPARATOR,
)

__all__ = [
    "DuplicateFinder",
    "find_duplicates",
    "name_size_fingerprint",
    "FINGERPRINT_SEPARATOR",
]

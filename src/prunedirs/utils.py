"""Shared utility functions."""

from __future__ import annotations

_MB = 1024**2
_GB = 1024**3


def format_size(size_bytes: int | None) -> str:
    """Format a byte count as megabytes or, from 1 GB up, gigabytes."""
    if size_bytes is None:
        return "unavailable"
    if size_bytes >= _GB:
        return f"{size_bytes / _GB:.2f} GB"
    return f"{size_bytes / _MB:.2f} MB"


def plural(count: int, noun: str) -> str:
    """Return ``"<count> <noun>"`` with a trailing ``s`` unless count is 1."""
    return f"{count:,} {noun}{'' if count == 1 else 's'}"

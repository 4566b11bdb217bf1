"""Error types raised by prunedirs."""

from __future__ import annotations

from pathlib import Path


class PruneError(Exception):
    """Base class for fatal errors that abort a run before any deletion."""

    exit_code = 1


class InvalidArguments(PruneError):
    """Raised when the target name list is missing or malformed."""

    exit_code = 2


class RootNotFound(PruneError):
    """Raised when the root path does not exist or is not a directory."""

    def __init__(self, path: Path, reason: str = "does not exist") -> None:
        super().__init__(f"Root path {reason}: {path}")
        self.path = path


class RootInaccessible(PruneError):
    """Raised when the root path exists but cannot be traversed."""

    def __init__(self, path: Path, error: OSError) -> None:
        super().__init__(f"Cannot access root path {path}: {error.strerror or error}")
        self.path = path

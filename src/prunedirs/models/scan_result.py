"""Scan and size result dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True, slots=True)
class ScanResult:
    """Directories found under a root whose name matches a target name.

    ``matches`` keeps traversal order and holds absolute paths.
    """

    root: Path
    names: tuple[str, ...]
    matches: tuple[Path, ...] = ()
    skipped_dirs: int = 0

    def __len__(self) -> int:
        return len(self.matches)

    def __bool__(self) -> bool:
        return bool(self.matches)


@dataclass(slots=True)
class MatchEntry:
    """Size information for a single matched directory."""

    path: Path
    size_bytes: int = 0
    file_count: int = 0
    sized: bool = False


@dataclass(slots=True)
class SizeReport:
    """Aggregate size of all matched directories."""

    entries: list[MatchEntry] = field(default_factory=list)

    @property
    def total_bytes(self) -> int | None:
        """Sum of all readable file sizes, or None if nothing could be read."""
        sized = [e.size_bytes for e in self.entries if e.sized]
        if not sized:
            return None
        return sum(sized)

    @property
    def file_count(self) -> int:
        return sum(e.file_count for e in self.entries)

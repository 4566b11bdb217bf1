"""Run options collected from the command line."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class RunOptions:
    """Settings for a single run. Built once by the CLI, never persisted."""

    root: Path | str | None
    names: tuple[str, ...]
    force: bool = False
    preview: bool = False
    strict: bool = False
    as_json: bool = False

"""Aggregate size of matched directories."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from prunedirs.core.tree import tree_size
from prunedirs.models.scan_result import MatchEntry, SizeReport

log = logging.getLogger(__name__)


def measure(matches: Iterable[Path]) -> SizeReport:
    """Sum the file sizes under every matched directory.

    Never raises for filesystem problems: unreadable files count as zero
    and a match with no readable file is marked as not sized.
    """
    report = SizeReport()
    for path in matches:
        visitor = tree_size(path)
        entry = MatchEntry(
            path=path,
            size_bytes=visitor.total,
            file_count=visitor.file_count,
            sized=visitor.probed > 0,
        )
        if visitor.probed < visitor.file_count:
            log.info("%s: %d file size(s) unavailable", path, visitor.file_count - visitor.probed)
        report.entries.append(entry)
    return report

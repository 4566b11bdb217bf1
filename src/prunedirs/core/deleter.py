"""Remove matched directories, or pretend to in preview mode."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterable

from prunedirs.core.tree import remove_tree
from prunedirs.models.delete_result import DeleteResult

log = logging.getLogger(__name__)

ProgressCallback = Callable[[Path, str, str], None]  # (path, status, detail)


def delete(
    matches: Iterable[Path],
    *,
    preview: bool = False,
    on_progress: ProgressCallback | None = None,
    remover: Callable[[Path], object] | None = None,
) -> DeleteResult:
    """Delete every path in *matches* in order.

    A failure on one path is recorded and the batch moves on to the next.

    Args:
        matches: Directories to remove.
        preview: Report what would be removed without touching anything.
        on_progress: Called per path with status ``"preview"``,
                     ``"deleted"`` or ``"error"`` and an error detail.
        remover: Function that removes one directory tree, by default
                 ``remove_tree``.
    """
    remover = remover or remove_tree
    result = DeleteResult(preview=preview)

    for path in matches:
        if preview:
            result.succeeded += 1
            if on_progress:
                on_progress(path, "preview", "")
            continue

        try:
            remover(path)
        except OSError as e:
            detail = e.strerror or str(e)
            if e.filename and str(e.filename) != str(path):
                detail = f"{detail} ({e.filename})"
            log.warning("Failed to delete %s: %s", path, detail)
            result.failed += 1
            result.errors.append(f"{path}: {detail}")
            if on_progress:
                on_progress(path, "error", detail)
            continue

        log.debug("Deleted %s", path)
        result.succeeded += 1
        if on_progress:
            on_progress(path, "deleted", "")

    return result

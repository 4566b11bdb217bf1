"""Depth-first directory tree traversal shared by sizing and deletion.

A traversal never follows symlinks: a symlink, whatever it points at,
is handed to ``visit_file`` like a regular file.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Callable, Iterator, Literal

log = logging.getLogger(__name__)

ErrorPolicy = Literal["ignore", "raise"]


class TreeVisitor:
    """Callbacks invoked while walking a directory tree.

    ``enter_dir`` runs before a directory's children are visited,
    ``leave_dir`` after all of them. The default hooks do nothing.
    """

    def enter_dir(self, path: str) -> None:
        pass

    def visit_file(self, entry: os.DirEntry) -> None:
        pass

    def leave_dir(self, path: str) -> None:
        pass


def walk_tree(root: Path | str, visitor: TreeVisitor, *, on_error: ErrorPolicy = "ignore") -> None:
    """Walk *root* depth-first and feed every node to *visitor*.

    Args:
        root: Directory to walk. The root itself is entered and left.
        visitor: Receives enter/file/leave callbacks.
        on_error: ``"ignore"`` logs unreadable nodes and skips them,
                  ``"raise"`` propagates the first ``OSError``.
    """
    # Each frame is (path, remaining children or None before entering).
    stack: list[tuple[str, Iterator[os.DirEntry] | None]] = [(os.fspath(root), None)]

    while stack:
        path, children = stack[-1]

        if children is None:
            try:
                visitor.enter_dir(path)
                # Listed up front so removing entries never races the iterator.
                with os.scandir(path) as it:
                    children = iter(list(it))
            except OSError as e:
                if on_error == "raise":
                    raise
                log.debug("Cannot read directory %s: %s", path, e)
                stack.pop()
                continue
            stack[-1] = (path, children)

        child = next(children, None)
        if child is None:
            stack.pop()
            _guard(visitor.leave_dir, path, on_error)
            continue

        try:
            is_dir = child.is_dir(follow_symlinks=False)
        except OSError as e:
            if on_error == "raise":
                raise
            log.debug("Cannot inspect %s: %s", child.path, e)
            continue

        if is_dir:
            stack.append((child.path, None))
        else:
            _guard(visitor.visit_file, child, on_error)


def _guard(callback: Callable[[Any], None], arg: Any, on_error: ErrorPolicy) -> None:
    try:
        callback(arg)
    except OSError as e:
        if on_error == "raise":
            raise
        log.debug("Cannot process %s: %s", getattr(arg, "path", arg), e)


class SizeVisitor(TreeVisitor):
    """Sums the sizes of all files in a tree.

    Files that cannot be stat'ed count as zero.
    """

    def __init__(self) -> None:
        self.total = 0
        self.file_count = 0
        self.probed = 0

    def visit_file(self, entry: os.DirEntry) -> None:
        self.file_count += 1
        try:
            size = entry.stat(follow_symlinks=False).st_size
        except OSError as e:
            log.debug("Cannot stat %s: %s", entry.path, e)
            return
        self.total += size
        self.probed += 1


class DeleteVisitor(TreeVisitor):
    """Removes files on the way down and directories on the way up."""

    def __init__(self) -> None:
        self.files_removed = 0
        self.dirs_removed = 0

    def visit_file(self, entry: os.DirEntry) -> None:
        os.unlink(entry.path)
        self.files_removed += 1

    def leave_dir(self, path: str) -> None:
        os.rmdir(path)
        self.dirs_removed += 1


def tree_size(path: Path | str) -> SizeVisitor:
    """Measure a directory tree, ignoring anything unreadable."""
    visitor = SizeVisitor()
    walk_tree(path, visitor, on_error="ignore")
    return visitor


def remove_tree(path: Path | str) -> DeleteVisitor:
    """Recursively delete a directory tree.

    Raises:
        OSError: on the first file or directory that cannot be removed.
            Whatever was already removed stays removed.
    """
    visitor = DeleteVisitor()
    walk_tree(path, visitor, on_error="raise")
    return visitor

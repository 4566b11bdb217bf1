"""Find directories whose name matches one of the target names."""

from __future__ import annotations

import errno
import logging
import os
import stat
from pathlib import Path
from typing import Iterable

from prunedirs.errors import InvalidArguments, RootInaccessible, RootNotFound
from prunedirs.models.scan_result import ScanResult

log = logging.getLogger(__name__)

_SEPARATORS = {s for s in ("/", os.sep, os.altsep) if s}


def normalize_names(names: Iterable[str]) -> tuple[str, ...]:
    """Validate target names and drop duplicates, keeping first-seen order.

    Raises:
        InvalidArguments: if no names are given or a name is not a plain
            directory name.
    """
    result: list[str] = []
    for name in names:
        if not name or name in (".", "..") or any(sep in name for sep in _SEPARATORS):
            raise InvalidArguments(f"Invalid folder name: {name!r}")
        if name not in result:
            result.append(name)
    if not result:
        raise InvalidArguments("At least one folder name is required")
    return tuple(result)


def resolve_root(root: Path | str | None) -> Path:
    """Return *root* as an absolute directory path, defaulting to the cwd.

    Raises:
        InvalidArguments: if *root* is an empty string.
        RootNotFound: if it is missing or not a directory.
        RootInaccessible: if it cannot be stat'ed, e.g. a parent is not
            traversable.
    """
    if root is None:
        path = Path.cwd()
    elif not str(root):
        raise InvalidArguments("Root path must not be empty")
    else:
        path = Path(root).expanduser().absolute()

    try:
        st = path.stat()
    except OSError as e:
        if e.errno in (errno.ENOENT, errno.ENOTDIR):
            raise RootNotFound(path) from e
        raise RootInaccessible(path, e) from e
    if not stat.S_ISDIR(st.st_mode):
        raise RootNotFound(path, "is not a directory")
    return path


def scan(root: Path | str | None, names: Iterable[str]) -> ScanResult:
    """Collect every directory below *root* named like one of *names*.

    Directories are visited depth-first with siblings in sorted order.
    Hidden directories are included, symlinked directories are not
    followed, and a matched directory is not descended into. If the
    root's own name matches, the root is the only match.

    Raises:
        InvalidArguments: for an empty or malformed name list.
        RootNotFound: if the root does not exist or is not a directory.
        RootInaccessible: if the root cannot be stat'ed or listed.
    """
    targets = normalize_names(names)
    root_path = resolve_root(root)
    wanted = {os.path.normcase(n) for n in targets}

    if os.path.normcase(root_path.name) in wanted:
        log.debug("Match: %s (root)", root_path)
        return ScanResult(root=root_path, names=targets, matches=(root_path,))

    try:
        with os.scandir(root_path) as it:
            top = sorted(it, key=lambda e: e.name)
    except OSError as e:
        raise RootInaccessible(root_path, e) from e

    matches: list[Path] = []
    skipped = 0
    # Reversed so that pop() yields entries in sorted order.
    stack: list[os.DirEntry] = top[::-1]

    while stack:
        entry = stack.pop()
        try:
            if not entry.is_dir(follow_symlinks=False):
                continue
        except OSError:
            continue

        if os.path.normcase(entry.name) in wanted:
            log.debug("Match: %s", entry.path)
            matches.append(Path(entry.path))
            continue

        try:
            with os.scandir(entry.path) as it:
                children = sorted(it, key=lambda e: e.name)
        except OSError as e:
            log.info("Skipping unreadable directory %s: %s", entry.path, e)
            skipped += 1
            continue
        stack.extend(reversed(children))

    log.info("Scanned %s: %d match(es), %d unreadable", root_path, len(matches), skipped)
    return ScanResult(root=root_path, names=targets, matches=tuple(matches), skipped_dirs=skipped)

"""Confirmation gate in front of destructive actions."""

from __future__ import annotations

import logging
from typing import Callable

from prunedirs.utils import plural

log = logging.getLogger(__name__)

AskFunc = Callable[[str], str]


def confirm(count: int, *, force: bool, preview: bool, ask: AskFunc) -> bool:
    """Decide whether deletion of *count* folders may go ahead.

    Preview and force mode never ask. Otherwise *ask* is called with the
    prompt text and only a plain ``y`` (any case) is taken as consent.
    """
    if preview:
        log.debug("Preview mode, confirmation skipped")
        return True
    if force:
        log.debug("Force mode, confirmation skipped")
        return True

    try:
        answer = ask(f"Delete {plural(count, 'folder')}? [y/N]")
    except EOFError:
        return False
    return (answer or "").strip().lower() == "y"

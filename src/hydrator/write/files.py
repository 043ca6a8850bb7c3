"""Low-level file helpers shared by the artifact writers."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO

from hydrator.errors import ArtifactWriteError

logger = logging.getLogger(__name__)


def close_logged(handle: IO[str], path: Path) -> None:
    """Close *handle*; a failure is logged and otherwise ignored.

    Only used once the primary write has already succeeded or failed on its
    own, so a close error never replaces the call's outcome.
    """
    try:
        handle.close()
    except OSError:
        logger.error("failed to close %s", path, exc_info=True)


def overwrite_text(path: Path, content: str) -> None:
    """Create or truncate *path* and write *content* to it."""
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise ArtifactWriteError(f"failed to write {path.name}: {exc}") from exc

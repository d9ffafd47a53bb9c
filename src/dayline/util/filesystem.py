"""
Filesystem helpers for publishing dashboard pages.
"""

from __future__ import annotations

import logging
import os
import tempfile
from contextlib import contextmanager
from pathlib import Path

from filelock import FileLock

logger = logging.getLogger(__name__)

SITE_LOCK_NAME = ".dayline.lock"


def ensure_directory(path: Path | str) -> Path:
    """
    Ensure a directory exists, returning the resolved Path.
    """
    resolved = Path(path).expanduser().resolve()
    resolved.mkdir(parents=True, exist_ok=True)
    return resolved


@contextmanager
def site_lock(web_root: Path | str):
    """
    Serialize publishing into one web root.

    Two builds targeting the same directory would otherwise interleave their
    feed pages and index.
    """
    root = ensure_directory(web_root)
    with FileLock(str(root / SITE_LOCK_NAME)):
        logger.debug("Holding publish lock for %s", root)
        yield root


def write_text_file(path: Path | str, content: str, encoding: str = "utf-8") -> Path:
    """
    Replace a file's content atomically, creating parent directories as needed.
    """
    target = Path(path).expanduser().resolve()
    target.parent.mkdir(parents=True, exist_ok=True)
    fd, staging = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=target.parent)
    try:
        with os.fdopen(fd, "w", encoding=encoding) as handle:
            handle.write(content)
        os.replace(staging, target)
    except BaseException:
        Path(staging).unlink(missing_ok=True)
        raise
    logger.debug("Wrote %d characters to %s", len(content), target)
    return target

"""File operation executor -- move, copy, touch, mkdir for a single path.

Every action is logged before it happens; under dry_run only the log line
is produced. OS failures propagate as OSError for the caller's error gate.
"""

from __future__ import annotations

import os
import shutil
from datetime import datetime
from pathlib import Path

from loguru import logger

log = logger.bind(workflow="fileops")


def move_or_copy(
    src: Path,
    dest: Path,
    copy_mode: bool = False,
    dry_run: bool = False,
    log=log,
) -> Path:
    """Move (or copy) src to dest. Returns dest."""
    log.info(f"{src} => {dest}")
    if dry_run:
        return dest

    if copy_mode:
        shutil.copy2(src, dest)
    else:
        shutil.move(str(src), str(dest))
    return dest


def touch(path: Path, timestamp: datetime, dry_run: bool = False, log=log) -> None:
    """Set both access and modification time of path to timestamp."""
    log.info(f"Touching {path}...")
    if dry_run:
        return
    ts = timestamp.timestamp()
    os.utime(path, (ts, ts))


def ensure_dir(path: Path) -> Path:
    """Create path (and parents) unless it already exists."""
    path.mkdir(parents=True, exist_ok=True)
    return path

"""Directory walker -- lists files and directories under a root."""

from __future__ import annotations

import stat
from pathlib import Path

from loguru import logger

from ..errors import TraversalError
from ..models import ErrorPolicy, WalkResult
from ..policy import ErrorGate

log = logger.bind(workflow="walker")


def _list_dir(root: Path) -> list[Path]:
    try:
        names = sorted(p.name for p in root.iterdir())
    except OSError as e:
        raise TraversalError(root, e.strerror or str(e)) from e
    return [root / name for name in names]


def _walk(root: Path, skip_dot_files: bool, recurse: bool, gate: ErrorGate) -> WalkResult:
    result = WalkResult()
    for path in _list_dir(root):
        if skip_dot_files and path.name.startswith("."):
            continue
        with gate.guard(path):
            mode = path.stat().st_mode
            if stat.S_ISDIR(mode):
                result.dirs.append(path)
                if recurse:
                    result.merge(_walk(path, skip_dot_files, recurse, gate))
                continue
            result.files.append(path)
    return result


def walk(
    root: Path,
    skip_dot_files: bool = True,
    recurse: bool = False,
    policy: ErrorPolicy = ErrorPolicy.HALT,
    log=log,
) -> WalkResult:
    """List the files and directories under root.

    Entries are visited in name order. Directories are always recorded;
    with recurse, each directory's own result is appended right after it
    is visited (pre-order), so a parent's lists include its descendants.

    Raises TraversalError if root itself cannot be listed. A failure to
    classify an entry (or to list a subdirectory) goes through the error
    policy: re-raised under HALT, entry skipped under CONTINUE.
    """
    log.debug(f"walk(root={root}, skip_dot_files={skip_dot_files}, recurse={recurse})")
    return _walk(root, skip_dot_files, recurse, ErrorGate(policy, log=log))


def file_count(
    root: Path,
    skip_dot_files: bool = True,
    recurse: bool = False,
    policy: ErrorPolicy = ErrorPolicy.HALT,
    log=log,
) -> int:
    """Number of files walk() finds under root."""
    return len(walk(root, skip_dot_files, recurse, policy, log=log).files)

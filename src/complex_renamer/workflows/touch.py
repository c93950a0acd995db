"""Touch workflow -- backdate every file by one year."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from loguru import logger

from ..models import BatchResult
from ..ops.fileops import touch
from ..ops.naming import one_year_before
from ..ops.walker import walk
from ..policy import ErrorGate

if TYPE_CHECKING:
    from ..config import RunConfig

log = logger.bind(workflow="touch")


def run(config: RunConfig, log=log, now: datetime | None = None) -> BatchResult:
    """Set atime and mtime of each file under source to one year before now."""
    log.info(f"Touching files in {config.source}...")

    files = walk(
        config.source,
        config.skip_dot_files,
        config.recurse,
        config.error_policy,
        log=log,
    ).files
    timestamp = one_year_before(now or datetime.now())
    gate = ErrorGate(config.error_policy, log=log)
    result = BatchResult(total=len(files))

    for file in files:
        with gate.guard(file):
            touch(file, timestamp, config.dry_run, log=log)
            result.completed += 1

    result.failed = len(gate.failures)
    return result

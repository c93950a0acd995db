"""CHD workflow -- convert disc images to compressed hunks of data via chdman."""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

from .. import process
from ..models import CHD_VERBS, BatchResult
from ..ops.fileops import ensure_dir
from ..ops.walker import walk
from ..policy import ErrorGate

if TYPE_CHECKING:
    from ..config import RunConfig

log = logger.bind(workflow="chd")


def run(config: RunConfig, log=log) -> BatchResult:
    """Convert every .iso/.gdi/.cue under source to <stem>.chd in dest_dir.

    Each produced file is checked with ``chdman verify``. Files with other
    extensions are skipped. Always recursive.
    """
    log.info(f"Converting disc images in {config.source} to CHD...")

    files = walk(
        config.source,
        config.skip_dot_files,
        True,
        config.error_policy,
        log=log,
    ).files
    gate = ErrorGate(config.error_policy, log=log)
    result = BatchResult(total=len(files))

    if not config.dry_run:
        ensure_dir(config.dest_dir)

    for file in files:
        verb = CHD_VERBS.get(file.suffix.lower())
        if verb is None:
            log.debug(f"Skipping {file.name} (not a disc image)")
            result.skipped += 1
            continue

        output = config.dest_dir / f"{file.stem}.chd"
        with gate.guard(file):
            process.run(
                config.chdman,
                [verb, "-i", str(file), "-o", str(output)],
                dry_run=config.dry_run,
                log=log,
            )
            process.run(
                config.chdman,
                ["verify", "-i", str(output)],
                dry_run=config.dry_run,
                log=log,
            )
            result.completed += 1

    result.failed = len(gate.failures)
    log.info(
        f"Converted {result.completed} images "
        f"({result.failed} failed, {result.skipped} skipped)"
    )
    return result

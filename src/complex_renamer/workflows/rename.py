"""Rename workflow -- prefix substitution and suffix removal."""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

from ..models import BatchResult, RenamePlan
from ..ops.fileops import ensure_dir, move_or_copy
from ..ops.naming import substituted_name
from ..ops.walker import walk
from ..policy import ErrorGate

if TYPE_CHECKING:
    from ..config import RunConfig

log = logger.bind(workflow="rename")


def run(config: RunConfig, log=log) -> BatchResult:
    """Apply substituted_name() to every file under source.

    Files keep their position relative to source, re-rooted under dest_dir.
    Unchanged names are skipped, not errors.
    """
    log.info(
        f"Attempting to reformat files: source={config.source} "
        f'prefix="{config.prefix}" replacement="{config.replacement}" '
        f'suffix="{config.suffix}"'
    )

    files = walk(
        config.source,
        config.skip_dot_files,
        config.recurse,
        config.error_policy,
        log=log,
    ).files
    gate = ErrorGate(config.error_policy, log=log)
    result = BatchResult(total=len(files))

    for file in files:
        new_name = substituted_name(
            file.name, config.prefix, config.replacement, config.suffix
        )
        if new_name == file.name:
            log.debug(f"Nothing to do: {file.name}")
            result.skipped += 1
            continue

        dest_parent = config.dest_dir / file.parent.relative_to(config.source)
        plan = RenamePlan(file, dest_parent / new_name)
        with gate.guard(file):
            if not config.dry_run and dest_parent != file.parent:
                ensure_dir(dest_parent)
            move_or_copy(
                plan.source, plan.dest, config.copy_mode, config.dry_run, log=log
            )
            result.completed += 1

    result.failed = len(gate.failures)
    log.info(f"Renamed {result.completed} files.")
    return result

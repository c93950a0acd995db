"""Order workflow -- rename files by their position in the walk."""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

from ..models import BatchResult, RenamePlan
from ..ops.fileops import ensure_dir, move_or_copy
from ..ops.naming import ordered_name
from ..ops.walker import walk
from ..policy import ErrorGate

if TYPE_CHECKING:
    from ..config import RunConfig

log = logger.bind(workflow="order")


def plan_renames(config: RunConfig, files) -> list[RenamePlan]:
    """Pair each file with its numbered destination, starting at offset."""
    plans = []
    for index, file in enumerate(files, start=config.offset):
        new_name = ordered_name(
            index, config.season, config.prefix, config.tv_mode, file.suffix
        )
        plans.append(RenamePlan(file, config.dest_dir / new_name))
    return plans


def run(config: RunConfig, log=log) -> BatchResult:
    """Rename every file under source to its ordered name in dest_dir."""
    log.info(f"Renaming files in {config.source} based on file index...")

    files = walk(
        config.source,
        config.skip_dot_files,
        config.recurse,
        config.error_policy,
        log=log,
    ).files
    gate = ErrorGate(config.error_policy, log=log)
    result = BatchResult(total=len(files))

    if not config.dry_run and config.dest_dir != config.source:
        ensure_dir(config.dest_dir)

    for plan in plan_renames(config, files):
        with gate.guard(plan.source):
            if plan.dest != plan.source and plan.dest.exists():
                log.warning(f"{plan.dest} exists and will be overwritten")
            move_or_copy(
                plan.source, plan.dest, config.copy_mode, config.dry_run, log=log
            )
            result.completed += 1

    result.failed = len(gate.failures)
    log.info(f"Renamed {result.completed} of {result.total} files.")
    return result

"""Extract workflow -- mirror one incoming item into !extract and unrar it.

Only video/subtitle containers are copied; .rar archives are queued and
extracted into the mirrored directory once the copy pass is done. Every
message of the run is also written to !extract.log beside the content.

Dry-run is not honored here: there is no meaningful simulation of an
archive extraction, so copies and extractions always happen.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

from loguru import logger

from .. import process
from ..errors import ConfigError
from ..models import (
    ARCHIVE_EXTENSIONS,
    COPY_EXTENSIONS,
    EXTRACT_DIR_NAME,
    EXTRACT_LOG_NAME,
    BatchResult,
)
from ..ops.fileops import ensure_dir, move_or_copy
from ..policy import ErrorGate
from ..runlog import run_log

if TYPE_CHECKING:
    from ..config import RunConfig

log = logger.bind(workflow="extract")


def _copy_tree(
    src_dir: Path,
    dest_dir: Path,
    config: RunConfig,
    gate: ErrorGate,
    result: BatchResult,
    archives: list[tuple[Path, Path]],
    output: Path,
    log=log,
) -> None:
    """Mirror src_dir into dest_dir, queueing archives as (archive, target).

    Directories that are, or contain, the output directory are not mirrored.
    """
    ensure_dir(dest_dir)
    for entry in sorted(src_dir.iterdir()):
        if config.skip_dot_files and entry.name.startswith("."):
            continue
        with gate.guard(entry):
            if entry.is_dir():
                if output.is_relative_to(entry.resolve()):
                    log.debug(f"Skipping {entry} (holds the extract output)")
                    continue
                _copy_tree(
                    entry,
                    dest_dir / entry.name,
                    config,
                    gate,
                    result,
                    archives,
                    output,
                    log=log,
                )
                continue

            result.total += 1
            suffix = entry.suffix.lower()
            if suffix in COPY_EXTENSIONS:
                move_or_copy(entry, dest_dir / entry.name, copy_mode=True, log=log)
                result.completed += 1
            elif suffix in ARCHIVE_EXTENSIONS:
                log.info(f"Queueing {entry} for extraction")
                archives.append((entry, dest_dir))
            else:
                log.info(f"Skipping {entry}")
                result.skipped += 1


def extract_archive(archive: Path, dest_dir: Path, config: RunConfig, log=log) -> str:
    """Unpack archive into dest_dir with the configured unrar binary.

    The trailing separator makes unrar treat the target as a folder.
    """
    return process.run(
        config.winrar,
        ["x", "-y", "-idp", str(archive), os.path.join(dest_dir, "")],
        log=log,
    )


def prepare_dest(config: RunConfig) -> Path:
    """Create and return <extract_root>/!extract/<name> for the source item.

    Raises ConfigError, before anything is created, if the item is missing.
    """
    content = config.source.resolve()
    if not content.exists():
        raise ConfigError(f"Nothing to extract at {config.source}")
    return ensure_dir(config.extract_root.resolve() / EXTRACT_DIR_NAME / content.name)


def run(config: RunConfig, log=log) -> BatchResult:
    """Extract the item at source into <extract_root>/!extract/<name>."""
    content = config.source.resolve()
    dest = prepare_dest(config)

    with run_log(dest / EXTRACT_LOG_NAME):
        log.info(f"Extracting {content} into {dest}...")
        if config.dry_run:
            log.warning("Dry-run is not supported for extract; running for real")

        gate = ErrorGate(config.error_policy, log=log)
        result = BatchResult()
        archives: list[tuple[Path, Path]] = []

        if content.is_dir():
            _copy_tree(content, dest, config, gate, result, archives, dest, log=log)
        else:
            result.total = 1
            if content.suffix.lower() in COPY_EXTENSIONS:
                with gate.guard(content):
                    move_or_copy(content, dest / content.name, copy_mode=True, log=log)
                    result.completed += 1
            else:
                log.info(f"Skipping {content} (not a video or subtitle file)")
                result.skipped += 1

        for archive, target in archives:
            with gate.guard(archive):
                extract_archive(archive, target, config, log=log)
                result.completed += 1

        result.failed = len(gate.failures)
        log.info(
            f"Extract done: {result.completed} copied/extracted, "
            f"{result.skipped} skipped, {result.failed} failed"
        )
    return result

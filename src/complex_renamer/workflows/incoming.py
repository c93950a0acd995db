"""Incoming workflow -- reconcile an incoming root against its !extract folder."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from loguru import logger

from ..models import EXTRACT_DIR_NAME, ReconciliationReport
from ..ops.walker import file_count, walk
from ..policy import ErrorGate

if TYPE_CHECKING:
    from ..config import RunConfig

log = logger.bind(workflow="incoming")


def check_one(
    config: RunConfig,
    basename: str,
    source_count: int,
    extract_path: Path,
    report: ReconciliationReport,
    log=log,
) -> None:
    """Compare one incoming entry with its counterpart under !extract.

    Extracted content always carries one extra file (the !extract.log),
    so a complete entry has source_count + 1 files.
    """
    target = extract_path / basename
    if not target.exists():
        report.missing.append(basename)
        return

    extract_count = file_count(
        target, config.skip_dot_files, config.recurse, config.error_policy, log=log
    )
    if extract_count != source_count + 1:
        log.debug(
            f"{basename}: expected {source_count + 1} files in "
            f"{EXTRACT_DIR_NAME}, found {extract_count}"
        )
        report.mismatched.append(basename)


def run(config: RunConfig, log=log) -> ReconciliationReport:
    """Report incoming entries missing from !extract or short on content."""
    root = config.source
    extract_path = root / EXTRACT_DIR_NAME
    log.info(f"Checking incoming folder {root}...")

    found = walk(
        root, config.skip_dot_files, config.recurse, config.error_policy, log=log
    )

    def outside_extract(p: Path) -> bool:
        return p != extract_path and extract_path not in p.parents

    dirs = [d for d in found.dirs if outside_extract(d)]
    files = [f for f in found.files if outside_extract(f)]

    gate = ErrorGate(config.error_policy, log=log)
    report = ReconciliationReport()

    for d in dirs:
        with gate.guard(d):
            source_count = file_count(
                d, config.skip_dot_files, config.recurse, config.error_policy, log=log
            )
            check_one(config, d.name, source_count, extract_path, report, log=log)

    for f in files:
        with gate.guard(f):
            check_one(config, f.name, 1, extract_path, report, log=log)

    report.emit(log)
    if report.clean:
        log.info(f"All {len(dirs) + len(files)} entries present in {EXTRACT_DIR_NAME}")
    return report

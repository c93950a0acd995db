"""External process bridge -- runs chdman / unrar synchronously."""

import subprocess

from loguru import logger

from .errors import ProcessExitError, ProcessSpawnError

log = logger.bind(workflow="process")


def run(binary: str, args: list[str], dry_run: bool = False, log=log) -> str:
    """Run ``binary args...`` to completion and return its stdout.

    Raises ProcessSpawnError if the binary cannot be started and
    ProcessExitError on a nonzero exit code. Under dry_run the command is
    only logged.
    """
    cmd = [binary, *args]
    log.info(f"Running: {' '.join(cmd)}")
    if dry_run:
        log.debug("dry-run skip")
        return ""

    try:
        # Tools echo file names, which need not be valid UTF-8
        result = subprocess.run(
            cmd, capture_output=True, text=True, encoding="utf-8", errors="replace"
        )
    except OSError as e:
        raise ProcessSpawnError(binary, e.strerror or str(e)) from e

    if result.returncode != 0:
        raise ProcessExitError(binary, result.returncode, result.stderr.strip()[-500:])

    if result.stdout:
        log.debug(result.stdout.strip())
    return result.stdout

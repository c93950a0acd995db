"""Per-run log file mirrored from the console stream.

Used by the extract workflow, which leaves ``!extract.log`` next to the
extracted content. Each message is written as one line and forced to disk.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from loguru import logger

# Resolved paths of log files currently receiving messages
_open_logs: set[Path] = set()


class SyncedFile:
    """Loguru sink that flushes and fsyncs after every message."""

    def __init__(self, path: Path) -> None:
        self.path = path
        self._fh = open(path, "w", encoding="utf-8")

    def write(self, message: str) -> None:
        self._fh.write(message)
        self._fh.flush()
        os.fsync(self._fh.fileno())

    def close(self) -> None:
        if not self._fh.closed:
            self._fh.close()


@contextmanager
def run_log(path: Path) -> Iterator[Path]:
    """Mirror every log message to ``path`` until the block exits.

    The file is truncated on open and closed on exit, even on failure.
    Entering again for a path that is already open reuses the outer sink,
    so the file stays open until the outermost block exits.
    """
    key = path.resolve()
    if key in _open_logs:
        yield path
        return

    sink = SyncedFile(path)
    handler_id = logger.add(sink, format="{message}", level="INFO")
    _open_logs.add(key)
    try:
        yield path
    finally:
        _open_logs.discard(key)
        logger.remove(handler_id)
        sink.close()

"""Core enums, constants, and data types for the batch renamer.

Enums:
    Workflow     -- The one action an invocation performs (extract, chd,
                    incoming, order, touch, rename).
    ErrorPolicy  -- What a per-item failure does to the run (halt, continue).
    FileKind     -- Classification of a walked entry (file, directory).
"""

from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path


class Workflow(StrEnum):
    EXTRACT = "extract"
    CHD = "chd"
    INCOMING = "incoming"
    ORDER = "order"
    TOUCH = "touch"
    RENAME = "rename"


class ErrorPolicy(StrEnum):
    HALT = "halt"
    CONTINUE = "continue"


class FileKind(StrEnum):
    FILE = "file"
    DIRECTORY = "directory"


# Sibling folder of an incoming root that holds extracted content
EXTRACT_DIR_NAME = "!extract"
EXTRACT_LOG_NAME = "!extract.log"

# disc image suffix -> chdman create verb
CHD_VERBS: dict[str, str] = {
    ".iso": "createdvd",
    ".gdi": "createcd",
    ".cue": "createcd",
}

# Video and subtitle containers mirrored by the extract workflow
COPY_EXTENSIONS: frozenset[str] = frozenset(
    {
        ".mkv",
        ".mp4",
        ".m4v",
        ".avi",
        ".mov",
        ".wmv",
        ".mpg",
        ".mpeg",
        ".ts",
        ".webm",
        ".srt",
        ".sub",
        ".idx",
        ".ass",
        ".ssa",
        ".vtt",
        ".sup",
    }
)

ARCHIVE_EXTENSIONS: frozenset[str] = frozenset({".rar"})


@dataclass(frozen=True)
class FileEntry:
    path: Path
    kind: FileKind


@dataclass
class WalkResult:
    """Files and directories found under a root, in traversal order."""

    files: list[Path] = field(default_factory=list)
    dirs: list[Path] = field(default_factory=list)

    def merge(self, other: "WalkResult") -> None:
        self.files.extend(other.files)
        self.dirs.extend(other.dirs)

    @property
    def entries(self) -> list[FileEntry]:
        return [FileEntry(d, FileKind.DIRECTORY) for d in self.dirs] + [
            FileEntry(f, FileKind.FILE) for f in self.files
        ]


@dataclass(frozen=True)
class RenamePlan:
    source: Path
    dest: Path


@dataclass
class ReconciliationReport:
    """Basenames from an incoming root that are absent or short in !extract."""

    missing: list[str] = field(default_factory=list)
    mismatched: list[str] = field(default_factory=list)

    @property
    def clean(self) -> bool:
        return not self.missing and not self.mismatched

    def emit(self, log) -> None:
        if self.missing:
            log.info(f"Folders missing from {EXTRACT_DIR_NAME}:")
            for name in self.missing:
                log.info(name)
        if self.mismatched:
            log.info(f"Folders in {EXTRACT_DIR_NAME} with missing content:")
            for name in self.mismatched:
                log.info(name)


@dataclass
class BatchResult:
    """Per-run counters for the file-processing workflows."""

    completed: int = 0
    failed: int = 0
    skipped: int = 0
    total: int = 0

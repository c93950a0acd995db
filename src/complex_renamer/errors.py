"""Exception hierarchy for the batch renamer.

Filesystem actions (copy, move, utime) raise plain ``OSError``; the classes
here cover traversal roots and external tools.
"""

from pathlib import Path


class RenamerError(Exception):
    """Base exception for all renamer errors."""


class ConfigError(RenamerError):
    """Invalid or missing configuration."""


class TraversalError(RenamerError):
    """A directory could not be listed."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot list {path}: {reason}")
        self.path = path
        self.reason = reason


class ProcessError(RenamerError):
    """An external tool (chdman, unrar) could not be run or failed."""

    def __init__(self, message: str, tool: str) -> None:
        super().__init__(message)
        self.tool = tool


class ProcessSpawnError(ProcessError):
    """The tool binary could not be started at all."""

    def __init__(self, tool: str, message: str) -> None:
        super().__init__(f"Failed to start {tool}: {message}", tool)
        self.message = message


class ProcessExitError(ProcessError):
    """The tool ran but exited with a nonzero code."""

    def __init__(self, tool: str, exit_code: int, stderr: str = "") -> None:
        detail = f": {stderr}" if stderr else ""
        super().__init__(f"{tool} exited with code {exit_code}{detail}", tool)
        self.exit_code = exit_code
        self.stderr = stderr

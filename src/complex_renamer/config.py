"""Run configuration via pydantic-settings (.env + env vars + CLI kwargs)."""

import sys
from pathlib import Path

from loguru import logger
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models import ErrorPolicy, Workflow

LOG_FORMAT = (
    "{time:HH:mm:ss} | {level:<8} | {extra[workflow]:<8} | {message}"
)


class RunConfig(BaseSettings):
    """Resolved options for one invocation, read-only once built.

    Layered resolution: .env file < RENAMER_* environment variables <
    constructor kwargs (the CLI passes its flags as kwargs).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="RENAMER_",
        extra="ignore",
        frozen=True,
    )

    # -- Paths --
    source: Path
    dest: Path | None = None

    # -- Naming --
    prefix: str = ""
    replacement: str = ""
    suffix: str = ""
    season: int = 1
    offset: int = 1
    tv_mode: bool = True

    # -- Behavior --
    workflow: Workflow = Workflow.RENAME
    copy_mode: bool = False
    dry_run: bool = False
    force: bool = False  # continue on error
    include_dot_files: bool = False
    recurse: bool = False
    log_level: str = "INFO"

    # -- External tools --
    chdman: str = "chdman"
    winrar: str = "unrar"

    @property
    def dest_dir(self) -> Path:
        """Destination directory, falling back to the source."""
        return self.dest if self.dest is not None else self.source

    @property
    def extract_root(self) -> Path:
        """Incoming root whose !extract folder receives extracted content.

        The source is resolved first so a relative item such as ``.`` maps to
        its real parent rather than to itself.
        """
        return self.dest if self.dest is not None else self.source.resolve().parent

    @property
    def error_policy(self) -> ErrorPolicy:
        return ErrorPolicy.CONTINUE if self.force else ErrorPolicy.HALT

    @property
    def skip_dot_files(self) -> bool:
        return not self.include_dot_files

    def setup_logging(self) -> None:
        """Configure loguru: a single stderr sink, always on."""
        logger.remove()  # Remove default stderr handler

        def _default_extra(record):
            record["extra"].setdefault("workflow", "")
            return True

        logger.add(
            sys.stderr,
            format=LOG_FORMAT,
            level=self.log_level.upper(),
            filter=_default_extra,
        )

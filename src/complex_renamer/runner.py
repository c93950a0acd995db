"""Batch runner -- dispatches the selected workflow for one invocation."""

from __future__ import annotations

from contextlib import ExitStack, nullcontext

from loguru import logger

from .config import RunConfig
from .errors import RenamerError
from .models import EXTRACT_LOG_NAME, Workflow
from .runlog import run_log
from .workflows import get_workflow_runner

log = logger.bind(workflow="runner")


def select_workflow(
    extract: bool = False,
    chd: bool = False,
    incoming: bool = False,
    order: bool = False,
    touch: bool = False,
) -> Workflow:
    """Pick the workflow from CLI selector flags (first match wins)."""
    for flag, workflow in (
        (extract, Workflow.EXTRACT),
        (chd, Workflow.CHD),
        (incoming, Workflow.INCOMING),
        (order, Workflow.ORDER),
        (touch, Workflow.TOUCH),
    ):
        if flag:
            return workflow
    return Workflow.RENAME


class BatchRunner:
    """Runs one workflow over one directory tree."""

    def __init__(self, config: RunConfig) -> None:
        self.config = config
        self.workflow = config.workflow

    def _log_file(self):
        """Context for the run's log file: !extract.log for extract, else none."""
        if self.workflow == Workflow.EXTRACT:
            from .workflows.extract import prepare_dest

            return run_log(prepare_dest(self.config) / EXTRACT_LOG_NAME)
        return nullcontext()

    def run(self):
        """Run the configured workflow and return its result.

        A failure that escapes the workflow (error policy HALT) is logged
        here once more and re-raised. The run's log file, if any, is still
        open at that point and closes last.
        """
        workflow_run = get_workflow_runner(self.workflow)
        wf_log = logger.bind(workflow=self.workflow.value)

        log.debug(
            f"Starting {self.workflow}: source={self.config.source} "
            f"dest={self.config.dest_dir} dry_run={self.config.dry_run} "
            f"force={self.config.force}"
        )
        with ExitStack() as stack:
            try:
                stack.enter_context(self._log_file())
                return workflow_run(config=self.config, log=wf_log)
            except (RenamerError, OSError) as exc:
                log.error(f"{self.workflow} aborted: {exc}")
                raise

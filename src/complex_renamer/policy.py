"""Continue-on-error handling shared by the walker, workflows, and bridge."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from loguru import logger

from .errors import RenamerError
from .models import ErrorPolicy

log = logger.bind(workflow="policy")


class ErrorGate:
    """Decides, in one place, whether a per-item failure stops the run.

    Wrap each item's work in ``guard()``. Under ``ErrorPolicy.HALT`` the
    failure is logged and re-raised; under ``ErrorPolicy.CONTINUE`` it is
    logged, recorded, and the caller moves on to the next item.
    """

    def __init__(self, policy: ErrorPolicy, log=log) -> None:
        self.policy = policy
        self.log = log
        self.failures: list[tuple[str, Exception]] = []

    @property
    def halts(self) -> bool:
        return self.policy == ErrorPolicy.HALT

    @contextmanager
    def guard(self, label: object) -> Iterator[None]:
        try:
            yield
        except (RenamerError, OSError) as exc:
            # nested guards see a halting failure again on its way out
            if not any(seen is exc for _, seen in self.failures):
                self.failures.append((str(label), exc))
                self.log.error(f"{label}: {exc}")
            if self.halts:
                raise

"""Recorder that collects failures as issues for the pytest integration."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass

from gauntlet.assertions.base import FailureReason, ThrownError
from gauntlet.recording.base import FailureRecorder

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Issue:
    """A failure as it will be reported for a test.

    Attributes:
        description: '<name> failed - <detail>'.
        file_path: File captured at the assertion call site.
        line_number: Line captured at the assertion call site.
        error: The raised exception when the failure was a ThrownError.
    """

    description: str
    file_path: str
    line_number: int
    error: BaseException | None = None

    def __str__(self) -> str:
        return f"{self.file_path}:{self.line_number}: {self.description}"


class PytestFailureRecorder(FailureRecorder):
    """Collects issues during a test; `TestContext.verify()` reports them."""

    def __init__(self, test_id: str = "") -> None:
        self.test_id = test_id
        self._issues: list[Issue] = []
        self._lock = threading.RLock()

    @property
    def issues(self) -> list[Issue]:
        with self._lock:
            return list(self._issues)

    def record(
        self,
        name: str,
        reason: FailureReason,
        file_path: str,
        line_number: int,
    ) -> None:
        error = reason.error if isinstance(reason, ThrownError) else None
        issue = Issue(
            description=f"{name} failed - {reason.detail}",
            file_path=file_path,
            line_number=line_number,
            error=error,
        )
        with self._lock:
            self._issues.append(issue)
        logger.warning("[%s] %s", self.test_id, issue)

    def report(self, issues: list[Issue] | None = None) -> str:
        """Render `issues`, or every issue recorded so far."""
        if issues is None:
            issues = self.issues
        count = len(issues)
        noun = "failure" if count == 1 else "failures"
        lines = [f"{count} assertion {noun}:"]
        lines.extend(f"  {issue}" for issue in issues)
        return "\n".join(lines)

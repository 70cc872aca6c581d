"""In-memory and no-op recorders used to test assertions themselves."""

from __future__ import annotations

from gauntlet.assertions.base import FailureReason
from gauntlet.recording.base import FailureRecorder, RecordedFailure


class MockFailureRecorder(FailureRecorder):
    """Appends every recorded failure to `recorded_failures`, in call order.

    Assumes one test drives it at a time; no locking.
    """

    def __init__(self) -> None:
        self.recorded_failures: list[RecordedFailure] = []

    def clear(self) -> None:
        self.recorded_failures = []

    def record(
        self,
        name: str,
        reason: FailureReason,
        file_path: str,
        line_number: int,
    ) -> None:
        self.recorded_failures.append(
            RecordedFailure(
                name=name,
                reason=reason,
                file_path=file_path,
                line_number=line_number,
            )
        )


class SilentFailureRecorder(FailureRecorder):
    """Discards failures. Used for fixtures that must not fail the test."""

    def record(
        self,
        name: str,
        reason: FailureReason,
        file_path: str,
        line_number: int,
    ) -> None:
        return None

"""Failure recorder interface and the data it records."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from gauntlet.assertions.base import FailureReason


@dataclass(frozen=True)
class RecordedFailure:
    """One call made to a FailureRecorder.

    Attributes:
        name: Name of the assertion step that failed (e.g. "is_equal_to").
        reason: Why it failed.
        file_path: File captured at the call site.
        line_number: Line captured at the call site.
    """

    name: str
    reason: FailureReason
    file_path: str
    line_number: int


class FailureRecorder(ABC):
    """Receives assertion failures. Implemented by the host test framework."""

    @abstractmethod
    def record(
        self,
        name: str,
        reason: FailureReason,
        file_path: str,
        line_number: int,
    ) -> None:
        """Record a failure. Must not raise."""
        ...

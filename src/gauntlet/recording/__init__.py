"""Failure recorders."""

from gauntlet.recording.base import FailureRecorder, RecordedFailure
from gauntlet.recording.host import Issue, PytestFailureRecorder
from gauntlet.recording.memory import MockFailureRecorder, SilentFailureRecorder

__all__ = [
    "FailureRecorder",
    "Issue",
    "MockFailureRecorder",
    "PytestFailureRecorder",
    "RecordedFailure",
    "SilentFailureRecorder",
]

"""Fluent, chainable assertions for pytest."""

from gauntlet.assertions import (
    NEVER_EVALUATED_MESSAGE,
    Assertion,
    AssertionResult,
    AsyncThrowableExpression,
    Fail,
    FailureReason,
    Message,
    Pass,
    ThrowableExpression,
    ThrownError,
)
from gauntlet.context import TestContext
from gauntlet.recording import (
    FailureRecorder,
    Issue,
    MockFailureRecorder,
    PytestFailureRecorder,
    RecordedFailure,
    SilentFailureRecorder,
)

__all__ = [
    "NEVER_EVALUATED_MESSAGE",
    "Assertion",
    "AssertionResult",
    "AsyncThrowableExpression",
    "Fail",
    "FailureReason",
    "FailureRecorder",
    "Issue",
    "Message",
    "MockFailureRecorder",
    "Pass",
    "PytestFailureRecorder",
    "RecordedFailure",
    "SilentFailureRecorder",
    "TestContext",
    "ThrowableExpression",
    "ThrownError",
]

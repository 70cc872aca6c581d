"""Assertion chain engine and its result types."""

from gauntlet.assertions.base import (
    NEVER_EVALUATED_MESSAGE,
    AssertionResult,
    Fail,
    FailureReason,
    Message,
    Pass,
    ThrownError,
)
from gauntlet.assertions.expressions import AsyncThrowableExpression, ThrowableExpression
from gauntlet.assertions.engine import Assertion

__all__ = [
    "NEVER_EVALUATED_MESSAGE",
    "Assertion",
    "AssertionResult",
    "AsyncThrowableExpression",
    "Fail",
    "FailureReason",
    "Message",
    "Pass",
    "ThrowableExpression",
    "ThrownError",
]

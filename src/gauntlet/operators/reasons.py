"""Checks on FailureReason values."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from gauntlet.assertions.base import Fail, Message, Pass, ThrownError
from gauntlet.location import caller_line

if TYPE_CHECKING:
    from gauntlet.assertions.engine import Assertion


def _not_a_reason(reason: Any) -> TypeError:
    return TypeError(f"{type(reason).__name__} is not a FailureReason")


class ReasonOperators:
    def is_message(self, *, line: int | None = None) -> Assertion[str]:
        """Assert that the reason is a Message, passing its text on."""
        line = caller_line() if line is None else line

        def check(reason: Any) -> Pass | Fail:
            if isinstance(reason, Message):
                return Pass(reason.text)
            if isinstance(reason, ThrownError):
                return Fail.message(f"FailureReason is thrown_error: {reason.error}")
            raise _not_a_reason(reason)

        return self.evaluate("is_message", line, check)

    def is_thrown_error(self, *, line: int | None = None) -> Assertion[BaseException]:
        """Assert that the reason is a ThrownError, passing the error on."""
        line = caller_line() if line is None else line

        def check(reason: Any) -> Pass | Fail:
            if isinstance(reason, ThrownError):
                return Pass(reason.error)
            if isinstance(reason, Message):
                return Fail.message(f"FailureReason is message: {reason.text}")
            raise _not_a_reason(reason)

        return self.evaluate("is_thrown_error", line, check)
